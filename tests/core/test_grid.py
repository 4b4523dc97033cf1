"""
Unit Tests for Cell and Grid Models
"""

import pytest
from PIL import Image

from splix.core.models import AxisPartition, Cell, Grid, PixelInterval


@pytest.fixture
def cell():
    return Cell(row=1, col=2, vertical=PixelInterval(5, 10), horizontal=PixelInterval(6, 9))


def test_cell_edges(cell):
    """Cell edges come from its row and column spans."""
    assert (cell.top, cell.bottom, cell.left, cell.right) == (5, 10, 6, 9)
    assert (cell.width, cell.height) == (3, 5)
    assert cell.origin == (5, 6)


def test_cell_box_is_pil_order(cell):
    """box is (left, top, right, bottom)."""
    assert cell.box == (6, 5, 9, 10)


def test_cell_crop_from(cell):
    img = Image.new("RGB", (20, 20))
    assert cell.crop_from(img).size == (3, 5)


def test_cell_to_dict(cell):
    assert cell.to_dict() == {
        "row": 1,
        "col": 2,
        "bounds": {"top": 5, "bottom": 10, "left": 6, "right": 9},
    }


def test_grid_lookup_and_shape():
    rows = AxisPartition.from_boundaries([0, 4, 8])
    cols = AxisPartition.from_boundaries([0, 3, 6, 12])
    cells = tuple(
        Cell(r, c, v, h) for r, v in enumerate(rows) for c, h in enumerate(cols)
    )
    grid = Grid(rows, cols, cells)

    assert grid.shape == (2, 3)
    assert grid.size == (12, 8)
    assert grid.cell(1, 2).box == (6, 4, 12, 8)
    assert [len(row) for row in grid.rows()] == [3, 3]
    assert len(grid) == 6


def test_grid_cell_out_of_range_raises():
    grid = Grid(AxisPartition.from_boundaries([0, 4]), AxisPartition.from_boundaries([0, 4]),
                (Cell(0, 0, PixelInterval(0, 4), PixelInterval(0, 4)),))
    with pytest.raises(IndexError):
        grid.cell(1, 0)
