"""
Module: config

Purpose:
    Configuration dataclasses for a splix run. Built once from the CLI
    (or by library callers) and passed explicitly to the batch driver.

Key Classes:
    - SplitConfig: Grid specs, output location and execution settings

Dependencies:
    - dataclasses: For frozen dataclass support
    - splix.core.models: WeightSpec

Used By:
    - splix.pipeline: split_image(), run_batch()
    - splix.cli: Builds SplitConfig from arguments
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from splix.core.models import WeightSpec

DEFAULT_OUTPUT_DIR = Path("splixed-images")
MANIFEST_NAME = "splix-manifest.jsonl"


@dataclass(frozen=True)
class SplitConfig:
    """
    Configuration for splitting one or more images.

    Attributes:
        rows: Row weights, applied against each image's height (default 1).
        cols: Column weights, applied against each image's width (default 1).
        output_dir: Directory for sliced images (default ./splixed-images).
        recursive: Search source directories recursively.
        output_format: Target format ("png", "jpg", ...). None keeps the
            source format.
        overwrite: Replace existing output files (logged). When False an
            existing file fails that image.
        max_workers: Image worker threads. None uses os.cpu_count().
        cell_workers: Threads used to write the cells of one image.
            1 writes synchronously.
        fail_fast: Abort the batch on the first per-image failure.
        write_manifest: Append a JSONL record per image to MANIFEST_NAME.
    """
    rows: WeightSpec = field(default_factory=lambda: WeightSpec.uniform(1))
    cols: WeightSpec = field(default_factory=lambda: WeightSpec.uniform(1))
    output_dir: Path = DEFAULT_OUTPUT_DIR
    recursive: bool = False
    output_format: Optional[str] = None
    overwrite: bool = True
    max_workers: Optional[int] = None
    cell_workers: int = 1
    fail_fast: bool = False
    write_manifest: bool = False

    def __post_init__(self) -> None:
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1: {self.max_workers}")
        if self.cell_workers < 1:
            raise ValueError(f"cell_workers must be >= 1: {self.cell_workers}")

    @property
    def manifest_path(self) -> Path:
        return self.output_dir / MANIFEST_NAME

    def resolved_workers(self, job_count: int) -> int:
        """Number of image workers for a batch of ``job_count`` images."""
        requested = self.max_workers or os.cpu_count() or 4
        return max(1, min(requested, job_count))
