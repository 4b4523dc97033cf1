"""
Module: slicing.writer

Purpose:
    Writes sliced cells to disk. Every image write is atomic (temp file
    in the target directory, then rename) so an interrupted run never
    leaves a truncated tile behind.

Key Functions:
    - ensure_output_dir(): Idempotent output directory creation
    - write_cell(): Atomically save one sliced cell
    - build_manifest_record(): Per-image record for the JSONL manifest

Dependencies:
    - PIL.Image: Image saving
    - splix.images.codec: prepare_for_format()

Used By:
    - splix.slicing.write_queue: Background writes
    - splix.pipeline: Output step
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Any, Dict, Mapping

from PIL import Image

from splix.core.models import Cell, Grid
from splix.errors import ImageWriteError
from splix.images.codec import prepare_for_format

logger = logging.getLogger(__name__)


def ensure_output_dir(output_dir: Path) -> Path:
    """
    Create the output directory and any missing parents.

    Safe to call concurrently from several workers: an existing
    directory counts as success.

    Raises:
        ImageWriteError: If the directory cannot be created.
    """
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ImageWriteError(f"Failed to create directory {output_dir}: {e}") from e
    return output_dir


def write_cell(
    image: Image.Image,
    path: Path,
    *,
    image_format: str,
    overwrite: bool = True,
) -> Path:
    """
    Save a sliced cell atomically.

    Args:
        image: Cropped cell image.
        path: Destination file path.
        image_format: PIL format name to encode with ("PNG", "JPEG", ...).
        overwrite: Replace an existing file at path. When False an existing
            file raises ImageWriteError and is left untouched.

    Returns:
        The destination path.

    Raises:
        ImageWriteError: If the directory or file cannot be written, or the
            file exists and overwrite is False.

    Example:
        >>> write_cell(tile, Path("out/sheet-r0c0.png"), image_format="PNG")
        PosixPath('out/sheet-r0c0.png')
    """
    ensure_output_dir(path.parent)

    if path.exists():
        if not overwrite:
            raise ImageWriteError(f"Refusing to overwrite existing file {path}")
        logger.info(f"Replacing existing {path.name}")

    temp_path = None
    try:
        encoded = prepare_for_format(image, image_format)
        with tempfile.NamedTemporaryFile(
            mode="wb",
            suffix=path.suffix,
            prefix=f".{path.stem}-",
            dir=path.parent,
            delete=False,
        ) as f:
            temp_path = Path(f.name)
            encoded.save(f, format=image_format)
        # Use replace() instead of rename() for Windows compatibility
        temp_path.replace(path)
    except (OSError, ValueError, KeyError) as e:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise ImageWriteError(f"Failed to save image {path.name}: {e}") from e

    logger.debug(f"Wrote {path.name} ({image.width}x{image.height})")
    return path


def build_manifest_record(
    source: Path,
    grid: Grid,
    rows: str,
    cols: str,
    outputs: Mapping[Cell, Path],
) -> Dict[str, Any]:
    """Build the manifest record for one processed image."""
    width, height = grid.size
    cells = []
    for cell in grid:
        entry = cell.to_dict()
        entry["file"] = outputs[cell].name
        cells.append(entry)
    return {
        "source": str(source),
        "size": {"width": width, "height": height},
        "shape": {"rows": grid.shape[0], "cols": grid.shape[1]},
        "rows": rows,
        "cols": cols,
        "cells": cells,
    }
