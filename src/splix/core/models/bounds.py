"""
Module: bounds

Purpose:
    Provides the PixelInterval and AxisPartition dataclasses - the pixel
    spans of rows or columns along one image axis.

Key Functions:
    - PixelInterval.contains(p): Check if a pixel index is in the span
    - PixelInterval.overlaps(other): Check for overlap with another span
    - PixelInterval.to_dict(): Serialize for JSON
    - AxisPartition.boundaries: Ordered boundary list [b0, ..., bn]

Dependencies:
    - dataclasses (std)

Used By:
    - splix.core.models.grid.Cell
    - splix.slicing.partition
    - splix.slicing.composer
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class PixelInterval:
    """
    Half-open pixel span [start, end) along one axis.

    - start is inclusive (first pixel included)
    - end is exclusive (first pixel NOT included)

    Attributes:
        start: First pixel index of the span.
        end: One past the last pixel index.

    Invariants:
        - start >= 0
        - end > start

    Example:
        >>> span = PixelInterval(2, 5)
        >>> span.length
        3
        >>> span.contains(5)  # end is exclusive
        False
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span on construction."""
        if self.start < 0:
            raise ValueError(f"start must be >= 0: {self.start}")
        if self.end <= self.start:
            raise ValueError(f"end must be > start: {self.end} <= {self.start}")

    @property
    def length(self) -> int:
        """Number of pixels in the span."""
        return self.end - self.start

    def contains(self, p: int) -> bool:
        """Return True if start <= p < end."""
        return self.start <= p < self.end

    def overlaps(self, other: PixelInterval) -> bool:
        """
        Check if this span shares at least one pixel with another.

        Adjacent spans (one.end == other.start) do NOT overlap.
        """
        return not (self.end <= other.start or other.end <= self.start)

    def to_dict(self) -> dict:
        return {"start": self.start, "end": self.end}

    def __repr__(self) -> str:
        return f"PixelInterval({self.start}, {self.end})"


@dataclass(frozen=True, slots=True)
class AxisPartition:
    """
    Ordered, gapless intervals covering one axis of an image.

    Attributes:
        extent: Total pixel length of the axis.
        intervals: Spans in axis order.

    Invariants (checked when intervals is non-empty):
        - intervals[0].start == 0
        - intervals[i].end == intervals[i + 1].start
        - intervals[-1].end == extent
    """

    extent: int
    intervals: tuple[PixelInterval, ...]

    def __post_init__(self) -> None:
        """Validate contiguity on construction."""
        if self.extent < 0:
            raise ValueError(f"extent must be >= 0: {self.extent}")
        if not self.intervals:
            return
        if self.intervals[0].start != 0:
            raise ValueError(f"first interval must start at 0: {self.intervals[0]}")
        for prev, nxt in zip(self.intervals, self.intervals[1:]):
            if prev.end != nxt.start:
                raise ValueError(f"intervals not contiguous: {prev} then {nxt}")
        if self.intervals[-1].end != self.extent:
            raise ValueError(
                f"last interval must end at extent {self.extent}: {self.intervals[-1]}"
            )

    @classmethod
    def from_boundaries(cls, boundaries: list[int] | tuple[int, ...]) -> AxisPartition:
        """Build a partition from [b0, b1, ..., bn] with b0 == 0."""
        intervals = tuple(
            PixelInterval(start, end) for start, end in zip(boundaries, boundaries[1:])
        )
        return cls(extent=boundaries[-1], intervals=intervals)

    @property
    def boundaries(self) -> tuple[int, ...]:
        """Boundary positions, from 0 to extent."""
        if not self.intervals:
            return ()
        return (0, *(interval.end for interval in self.intervals))

    @property
    def lengths(self) -> tuple[int, ...]:
        return tuple(interval.length for interval in self.intervals)

    def __len__(self) -> int:
        return len(self.intervals)

    def __iter__(self) -> Iterator[PixelInterval]:
        return iter(self.intervals)

    def __getitem__(self, index: int) -> PixelInterval:
        return self.intervals[index]
