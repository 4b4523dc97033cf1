"""
Unit Tests for PixelInterval and AxisPartition Models

Tests for the half-open pixel spans along one image axis.
"""

import pytest

from splix.core.models.bounds import AxisPartition, PixelInterval


class TestPixelInterval:
    """Tests for PixelInterval dataclass."""

    # ─────────────────────────────────────────────────────────────────────────
    # Constructor Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_init_when_valid_then_creates_interval(self):
        span = PixelInterval(2, 5)
        assert span.start == 2
        assert span.end == 5
        assert span.length == 3

    def test_init_when_negative_start_then_raises_error(self):
        with pytest.raises(ValueError, match="start must be >= 0"):
            PixelInterval(-1, 5)

    def test_init_when_end_equals_start_then_raises_error(self):
        with pytest.raises(ValueError, match="end must be > start"):
            PixelInterval(5, 5)

    # ─────────────────────────────────────────────────────────────────────────
    # Query Method Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_contains_when_at_end_then_false(self):
        """end is exclusive."""
        span = PixelInterval(2, 5)
        assert span.contains(2) is True
        assert span.contains(4) is True
        assert span.contains(5) is False

    def test_overlaps_when_adjacent_then_false(self):
        assert PixelInterval(0, 5).overlaps(PixelInterval(5, 10)) is False

    def test_overlaps_when_sharing_pixel_then_true(self):
        assert PixelInterval(0, 6).overlaps(PixelInterval(5, 10)) is True

    def test_to_dict(self):
        assert PixelInterval(2, 5).to_dict() == {"start": 2, "end": 5}


class TestAxisPartition:
    """Tests for AxisPartition invariants."""

    def test_from_boundaries_builds_contiguous_intervals(self):
        partition = AxisPartition.from_boundaries([0, 2, 5, 6, 11])
        assert partition.extent == 11
        assert partition.lengths == (2, 3, 1, 5)
        assert partition.boundaries == (0, 2, 5, 6, 11)
        assert len(partition) == 4
        assert partition[1] == PixelInterval(2, 5)

    def test_init_when_gap_then_raises_error(self):
        with pytest.raises(ValueError, match="not contiguous"):
            AxisPartition(10, (PixelInterval(0, 4), PixelInterval(5, 10)))

    def test_init_when_not_starting_at_zero_then_raises_error(self):
        with pytest.raises(ValueError, match="start at 0"):
            AxisPartition(10, (PixelInterval(1, 10),))

    def test_init_when_short_of_extent_then_raises_error(self):
        with pytest.raises(ValueError, match="end at extent"):
            AxisPartition(10, (PixelInterval(0, 9),))

    def test_empty_partition_is_allowed(self):
        partition = AxisPartition(10, ())
        assert len(partition) == 0
        assert partition.boundaries == ()
