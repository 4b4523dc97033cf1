"""
Module: slicing

Purpose:
    Grid partition and slicing engine: turns weight specs into pixel
    boundaries, composes the cell grid, crops cells and writes them.

Key Modules:
    - partition: Axis partitioning with exact integer boundaries
    - composer: Row x column grid composition
    - cropper: Cell cropping with bounds validation
    - writer: Atomic cell writing
    - write_queue: Parallel cell writing

Dependencies:
    - PIL: Image manipulation
    - splix.core.models: WeightSpec, AxisPartition, Cell, Grid

Used By:
    - splix.pipeline: Per-image processing
"""

from .partition import partition_axis, compute_boundaries
from .composer import compose_grid, build_grid
from .cropper import crop_cell, slice_grid
from .writer import write_cell, ensure_output_dir
from .write_queue import WriteQueue

__all__ = [
    "partition_axis",
    "compute_boundaries",
    "compose_grid",
    "build_grid",
    "crop_cell",
    "slice_grid",
    "write_cell",
    "ensure_output_dir",
    "WriteQueue",
]
