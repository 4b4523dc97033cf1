"""
Module: grid

Purpose:
    Provides the Cell and Grid dataclasses - the rectangular output
    regions formed by crossing a row partition with a column partition.

Key Functions:
    - Cell.box: (left, top, right, bottom) tuple for PIL crop
    - Cell.crop_from(image): Crop this cell from a PIL image
    - Grid.cell(row, col): Look up one cell
    - Grid.rows(): Iterate cells row by row

Dependencies:
    - dataclasses (std)
    - PIL.Image (TYPE_CHECKING only)

Used By:
    - splix.slicing.composer
    - splix.slicing.cropper
    - splix.pipeline
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from .bounds import AxisPartition, PixelInterval

if TYPE_CHECKING:
    from PIL import Image


@dataclass(frozen=True, slots=True)
class Cell:
    """
    One grid cell addressed by (row, col).

    Attributes:
        row: Zero-based row index.
        col: Zero-based column index.
        vertical: Row span (top to bottom).
        horizontal: Column span (left to right).

    Example:
        >>> cell = Cell(0, 1, PixelInterval(0, 5), PixelInterval(5, 10))
        >>> cell.box
        (5, 0, 10, 5)
    """

    row: int
    col: int
    vertical: PixelInterval
    horizontal: PixelInterval

    @property
    def top(self) -> int:
        return self.vertical.start

    @property
    def bottom(self) -> int:
        return self.vertical.end

    @property
    def left(self) -> int:
        return self.horizontal.start

    @property
    def right(self) -> int:
        return self.horizontal.end

    @property
    def width(self) -> int:
        return self.horizontal.length

    @property
    def height(self) -> int:
        return self.vertical.length

    @property
    def origin(self) -> tuple[int, int]:
        """(top, left) of the cell."""
        return (self.top, self.left)

    @property
    def box(self) -> tuple[int, int, int, int]:
        """(left, top, right, bottom) tuple for PIL."""
        return (self.left, self.top, self.right, self.bottom)

    def crop_from(self, image: Image.Image) -> Image.Image:
        """Crop this cell from an image."""
        return image.crop(self.box)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON storage."""
        return {
            "row": self.row,
            "col": self.col,
            "bounds": {
                "top": self.top,
                "bottom": self.bottom,
                "left": self.left,
                "right": self.right,
            },
        }

    def __repr__(self) -> str:
        return f"Cell(r{self.row}c{self.col}, {self.box})"


@dataclass(frozen=True, slots=True)
class Grid:
    """
    All cells for one image, in row-major order.

    Attributes:
        row_partition: Vertical partition (computed against image height).
        col_partition: Horizontal partition (computed against image width).
        cells: Cells ordered by row, then column.
    """

    row_partition: AxisPartition
    col_partition: AxisPartition
    cells: tuple[Cell, ...]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (len(self.row_partition), len(self.col_partition))

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) of the image this grid was computed for."""
        return (self.col_partition.extent, self.row_partition.extent)

    @property
    def is_empty(self) -> bool:
        return not self.cells

    def cell(self, row: int, col: int) -> Cell:
        """
        Get the cell at (row, col).

        Raises:
            IndexError: If row or col is out of range.
        """
        n_rows, n_cols = self.shape
        if not (0 <= row < n_rows and 0 <= col < n_cols):
            raise IndexError(f"cell ({row}, {col}) outside grid {n_rows}x{n_cols}")
        return self.cells[row * n_cols + col]

    def rows(self) -> Iterator[tuple[Cell, ...]]:
        """Yield one tuple of cells per row."""
        n_cols = self.shape[1]
        for start in range(0, len(self.cells), n_cols or 1):
            yield self.cells[start:start + n_cols]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)
