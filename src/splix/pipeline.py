"""
Module: pipeline

Purpose:
    Batch driver for splitting images into grids. Runs
    decode -> partition -> compose -> slice -> write for every source
    image and isolates per-image failures.

Key Functions:
    - split_image(): Process one source image
    - run_batch(): Process many source images on a thread pool

Key Classes:
    - ImageResult: Outcome for one source image
    - BatchSummary: Aggregated outcome for a batch

Dependencies:
    - concurrent.futures: Per-image worker pool
    - splix.images.codec: Decoding and output format
    - splix.slicing: Partition, grid, crop and write
    - splix.file_locking: Manifest appends

Used By:
    - splix.cli: Command-line runs
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Sequence, Tuple

from .common.path_utils import assign_output_stems, output_file_name
from .config import SplitConfig
from .core.models import Cell
from .errors import ImageWriteError, PartitionMismatchError, SplixError
from .file_locking import locked_append_jsonl
from .images.codec import decode_image, resolve_output_format
from .slicing import WriteQueue, build_grid, ensure_output_dir, slice_grid
from .slicing.writer import build_manifest_record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageResult:
    """
    Result of splitting one source image.

    Attributes:
        source: Source image path.
        outputs: Written cell files, row-major.
        shape: (rows, cols) of the grid, or None if never computed.
        error: Failure message, or None on success.
    """
    source: Path
    outputs: Tuple[Path, ...] = ()
    shape: Optional[Tuple[int, int]] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class BatchSummary:
    """
    Complete batch result (immutable).

    Attributes:
        results: One ImageResult per source, in input order.

    Example:
        >>> summary = run_batch(paths, config)
        >>> print(f"{summary.succeeded} succeeded, {summary.failed} failed")
    """
    results: Tuple[ImageResult, ...]

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return self.total - self.succeeded

    @property
    def failures(self) -> Tuple[ImageResult, ...]:
        return tuple(r for r in self.results if not r.success)

    @property
    def output_count(self) -> int:
        return sum(len(r.outputs) for r in self.results)


def split_image(
    source_path: Path,
    config: SplitConfig,
    *,
    output_stem: Optional[str] = None,
) -> ImageResult:
    """
    Split one image into grid cells and write them.

    Pipeline:
    1. Decode the source image
    2. Partition rows against its height and cols against its width
    3. Compose the grid
    4. Crop and write every cell
    5. Append a manifest record (if enabled)

    Args:
        source_path: Image file to split.
        config: Split configuration.
        output_stem: Stem for output names (default: source file stem).

    Returns:
        ImageResult listing the written files.

    Raises:
        ImageDecodeError: If the source cannot be decoded.
        DegenerateAxisError: If the image is too small for the grid.
        ImageWriteError: If any cell cannot be written. Cells already
            written for this image are removed first.
        PartitionMismatchError: If a grid is applied to the wrong image.
    """
    stem = output_stem or source_path.stem
    source = decode_image(source_path)
    image_format, extension = resolve_output_format(source, config.output_format)

    grid = build_grid(source.width, source.height, config.rows, config.cols)
    n_rows, n_cols = grid.shape
    logger.info(
        f"Splitting {source_path.name} ({source.width}x{source.height}) "
        f"into {n_rows}x{n_cols} cells"
    )

    ensure_output_dir(config.output_dir)
    outputs: Dict[Cell, Path] = {}
    with WriteQueue(max_workers=config.cell_workers, overwrite=config.overwrite) as queue:
        try:
            for cell, tile in slice_grid(source.image, grid):
                path = config.output_dir / output_file_name(stem, cell.row, cell.col, extension)
                outputs[cell] = path
                queue.queue_write(tile, path, image_format=image_format)
            queue.wait_all()
        except ImageWriteError:
            # A failed image leaves no partial set of cells behind
            queue.rollback()
            raise

    if config.write_manifest:
        record = build_manifest_record(
            source_path, grid, str(config.rows), str(config.cols), outputs
        )
        locked_append_jsonl(config.manifest_path, record)

    return ImageResult(
        source=source_path,
        outputs=tuple(outputs[cell] for cell in grid),
        shape=grid.shape,
    )


def run_batch(sources: Sequence[Path], config: SplitConfig) -> BatchSummary:
    """
    Split every source image, continuing past per-image failures.

    A single source (or max_workers == 1) runs sequentially; otherwise
    images are processed on a ThreadPoolExecutor. Results are returned
    in input order regardless of completion order.

    Args:
        sources: Resolved image paths (see splix.discovery).
        config: Split configuration shared by all images.

    Returns:
        BatchSummary with one ImageResult per source.

    Raises:
        PartitionMismatchError: Internal invariant violation (never
            recorded as a per-image failure).
        SplixError: The first per-image failure, when config.fail_fast.
    """
    sources = list(dict.fromkeys(sources))
    stems = assign_output_stems(sources)
    results: Dict[Path, ImageResult] = {}

    if not sources:
        logger.warning("No images to process")
        return BatchSummary(results=())

    max_workers = config.resolved_workers(len(sources))

    if max_workers == 1:
        for path in sources:
            results[path] = _run_one(path, config, stems[path])
    else:
        logger.info(f"Processing {len(sources)} images with {max_workers} threads")
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            future_to_path = {
                executor.submit(_run_one, path, config, stems[path]): path
                for path in sources
            }
            try:
                for future in as_completed(future_to_path):
                    path = future_to_path[future]
                    results[path] = future.result()
            except BaseException:
                for future in future_to_path:
                    future.cancel()
                raise

    summary = BatchSummary(results=tuple(results[path] for path in sources))
    logger.info(
        f"Processed {summary.total} images: "
        f"{summary.succeeded} succeeded, {summary.failed} failed"
    )
    return summary


def _run_one(path: Path, config: SplitConfig, stem: str) -> ImageResult:
    """Run split_image() and convert per-image errors into a failed result."""
    try:
        return split_image(path, config, output_stem=stem)
    except PartitionMismatchError:
        raise
    except SplixError as e:
        if config.fail_fast:
            raise
        logger.error(f"{path.name}: {e}")
        return ImageResult(source=path, error=str(e))
