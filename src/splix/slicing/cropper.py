"""
Module: slicing.cropper

Purpose:
    Utilities for cropping grid cells from a decoded source image.
    Provides cropping with bounds validation.

Key Functions:
    - crop_cell(): Crop single cell from an image
    - slice_grid(): Crop every cell of a grid, in row-major order

Dependencies:
    - PIL: Image manipulation
    - splix.core.models: Cell, Grid

Used By:
    - splix.pipeline: Per-image slicing
"""

from __future__ import annotations

from typing import Iterator, Tuple

from PIL import Image

from splix.core.models import Cell, Grid
from splix.errors import PartitionMismatchError


def crop_cell(image: Image.Image, cell: Cell) -> Image.Image:
    """
    Crop a cell from an image.

    Args:
        image: Source image.
        cell: Region to crop.

    Returns:
        Cropped image (new copy, not a view).

    Raises:
        ValueError: If the cell lies outside the image.

    Example:
        >>> crop_cell(image, grid.cell(0, 1)).size
        (5, 5)
    """
    if cell.right > image.width:
        raise ValueError(f"Cell right {cell.right} exceeds image width {image.width}")
    if cell.bottom > image.height:
        raise ValueError(f"Cell bottom {cell.bottom} exceeds image height {image.height}")
    return cell.crop_from(image)


def slice_grid(image: Image.Image, grid: Grid) -> Iterator[Tuple[Cell, Image.Image]]:
    """
    Crop every cell of a grid.

    The size check happens before the first crop, so a mismatched grid
    produces no output at all.

    Args:
        image: Source image the grid was computed for.
        grid: Grid from build_grid() for this image.

    Yields:
        (cell, cropped image) pairs in row-major order.

    Raises:
        PartitionMismatchError: If the grid was computed for another size.
    """
    if grid.size != image.size:
        raise PartitionMismatchError(
            f"Grid computed for {grid.size[0]}x{grid.size[1]} "
            f"applied to {image.width}x{image.height} image"
        )
    return _iter_crops(image, grid)


def _iter_crops(image: Image.Image, grid: Grid) -> Iterator[Tuple[Cell, Image.Image]]:
    for cell in grid:
        yield cell, crop_cell(image, cell)
