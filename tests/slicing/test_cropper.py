"""
Tests for splix.slicing.cropper

Test Coverage:
- crop_cell(): exact cell rectangle, bounds validation
- slice_grid(): every cell in order, size mismatch detection
"""

import pytest
from PIL import Image

from splix.core.models import Cell, PixelInterval, WeightSpec
from splix.errors import PartitionMismatchError
from splix.slicing.composer import build_grid
from splix.slicing.cropper import crop_cell, slice_grid


def test_crop_cell_returns_cell_pixels(quadrant_image):
    """Top-right quadrant of the fixture is green."""
    # Arrange
    cell = Cell(0, 1, PixelInterval(0, 5), PixelInterval(5, 10))

    # Act
    result = crop_cell(quadrant_image, cell)

    # Assert
    assert result.size == (5, 5)
    assert result.getpixel((0, 0)) == (0, 255, 0)
    assert result.getpixel((4, 4)) == (0, 255, 0)


def test_crop_cell_does_not_mutate_source(quadrant_image):
    before = quadrant_image.tobytes()
    crop_cell(quadrant_image, Cell(0, 0, PixelInterval(0, 5), PixelInterval(0, 5)))
    assert quadrant_image.tobytes() == before


def test_crop_cell_preserves_mode():
    img = Image.new("RGBA", (8, 8))
    cell = Cell(0, 0, PixelInterval(0, 4), PixelInterval(0, 4))
    assert crop_cell(img, cell).mode == "RGBA"


def test_crop_cell_outside_image_raises(quadrant_image):
    cell = Cell(0, 0, PixelInterval(0, 5), PixelInterval(5, 11))
    with pytest.raises(ValueError, match="exceeds image width"):
        crop_cell(quadrant_image, cell)


def test_slice_grid_yields_all_quadrants(quadrant_image):
    grid = build_grid(10, 10, WeightSpec.uniform(2), WeightSpec.uniform(2))

    tiles = list(slice_grid(quadrant_image, grid))

    assert [cell.origin for cell, _ in tiles] == [(0, 0), (0, 5), (5, 0), (5, 5)]
    assert [tile.getpixel((2, 2)) for _, tile in tiles] == [
        (255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 0),
    ]


def test_slice_grid_mismatched_size_raises_before_cropping(quadrant_image):
    """A grid computed for another image size is rejected."""
    grid = build_grid(12, 10, WeightSpec.uniform(2), WeightSpec.uniform(2))
    with pytest.raises(PartitionMismatchError):
        slice_grid(quadrant_image, grid)
