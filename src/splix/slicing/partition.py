"""
Module: slicing.partition

Purpose:
    Converts a pixel extent and a WeightSpec into an AxisPartition:
    integer intervals that cover [0, extent) with no gaps or overlaps,
    sized in proportion to the weights.

Key Functions:
    - partition_axis(): Compute the AxisPartition for one axis
    - compute_boundaries(): Raw boundary list used by partition_axis

Rounding:
    Boundary i is floor(extent * cumulative_weight[i] / total_weight),
    computed in integer arithmetic. b[0] is 0 and b[n] is pinned to
    extent. If a floored share would be empty (small extent, very
    unequal weights), inner boundaries are clamped so every interval
    keeps at least one pixel. The clamp leaves uniform specs, and any
    spec whose floored shares are all >= 1 px, untouched.

Dependencies:
    - splix.core.models: WeightSpec, AxisPartition

Used By:
    - splix.slicing.composer: build_grid()
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Union

from splix.core.models import AxisPartition, WeightSpec
from splix.errors import DegenerateAxisError, InvalidSpecificationError

logger = logging.getLogger(__name__)


def compute_boundaries(
    extent: int,
    weights: Union[WeightSpec, Sequence[int]],
    *,
    axis: str = "axis",
) -> List[int]:
    """
    Compute n + 1 boundaries for n weights along an axis.

    Args:
        extent: Total pixel length of the axis.
        weights: WeightSpec or sequence of positive ints.
        axis: Axis name used in error messages ("rows" or "cols").

    Returns:
        Strictly increasing list starting at 0 and ending at extent.

    Raises:
        InvalidSpecificationError: If weights are empty/invalid or extent <= 0.
        DegenerateAxisError: If extent < number of weights.

    Example:
        >>> compute_boundaries(11, [2, 3, 1, 5])
        [0, 2, 5, 6, 11]
    """
    spec = _as_spec(weights, axis)
    if isinstance(extent, bool) or not isinstance(extent, int) or extent <= 0:
        raise InvalidSpecificationError(f"{axis}: extent must be a positive integer: {extent!r}")
    n = spec.count
    if extent < n:
        raise DegenerateAxisError(
            f"{axis}: cannot split {extent}px into {n} divisions"
        )

    total = spec.total
    boundaries = [extent * cum // total for cum in spec.cumulative()]
    boundaries[0] = 0
    boundaries[-1] = extent

    # Keep every interval at least one pixel wide
    clamped = False
    for i in range(1, n):
        if boundaries[i] <= boundaries[i - 1]:
            boundaries[i] = boundaries[i - 1] + 1
            clamped = True
    for i in range(n - 1, 0, -1):
        if boundaries[i] >= boundaries[i + 1]:
            boundaries[i] = boundaries[i + 1] - 1
            clamped = True
    if clamped:
        logger.debug(f"{axis}: clamped boundaries to 1px minimum: {boundaries}")

    return boundaries


def partition_axis(
    extent: int,
    weights: Union[WeightSpec, Sequence[int]],
    *,
    axis: str = "axis",
) -> AxisPartition:
    """
    Partition one image axis into proportional intervals.

    Args:
        extent: Image height (rows) or width (cols) in pixels.
        weights: Relative sizes of the intervals.
        axis: Axis name used in error messages.

    Returns:
        AxisPartition with len(weights) contiguous intervals.

    Raises:
        InvalidSpecificationError: If weights are empty/invalid or extent <= 0.
        DegenerateAxisError: If extent < number of weights.

    Example:
        >>> partition_axis(10, WeightSpec.uniform(2)).lengths
        (5, 5)
    """
    return AxisPartition.from_boundaries(compute_boundaries(extent, weights, axis=axis))


def _as_spec(weights: Union[WeightSpec, Sequence[int]], axis: str) -> WeightSpec:
    if isinstance(weights, WeightSpec):
        return weights
    try:
        return WeightSpec(tuple(weights))
    except InvalidSpecificationError as e:
        raise InvalidSpecificationError(f"{axis}: {e}") from e
