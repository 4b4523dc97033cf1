"""
Tests for splix.slicing.composer

Test Coverage:
- compose_grid(): cross product of row and column partitions
- build_grid(): rows against height, cols against width
"""

import pytest

from splix.core.models import AxisPartition, WeightSpec
from splix.errors import DegenerateAxisError
from splix.slicing.composer import build_grid, compose_grid


def test_two_by_two_on_ten_by_ten():
    """Four 5x5 cells at (0,0), (0,5), (5,0), (5,5)."""
    grid = build_grid(10, 10, WeightSpec.uniform(2), WeightSpec.uniform(2))

    assert grid.shape == (2, 2)
    assert [cell.origin for cell in grid] == [(0, 0), (0, 5), (5, 0), (5, 5)]
    assert all((cell.width, cell.height) == (5, 5) for cell in grid)


def test_rows_follow_height_and_cols_follow_width():
    grid = build_grid(30, 12, WeightSpec((1, 2)), WeightSpec.uniform(3))

    assert grid.shape == (2, 3)
    assert grid.size == (30, 12)
    assert grid.cell(1, 0).height == 8
    assert grid.cell(0, 2).width == 10


def test_cells_are_row_major_and_indexed():
    grid = build_grid(9, 6, WeightSpec.uniform(2), WeightSpec.uniform(3))
    assert [(c.row, c.col) for c in grid] == [
        (0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2),
    ]


def test_cells_tile_the_image_exactly():
    grid = build_grid(37, 23, WeightSpec((2, 3, 1)), WeightSpec((5, 1, 1, 2)))
    assert sum(cell.width * cell.height for cell in grid) == 37 * 23


def test_empty_partition_gives_empty_grid():
    grid = compose_grid(AxisPartition(10, ()), AxisPartition.from_boundaries([0, 5, 10]))
    assert grid.is_empty
    assert grid.shape == (0, 2)


def test_degenerate_axis_propagates():
    with pytest.raises(DegenerateAxisError, match="cols"):
        build_grid(2, 100, WeightSpec.uniform(1), WeightSpec.uniform(3))
