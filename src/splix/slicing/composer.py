"""
Module: slicing.composer

Purpose:
    Crosses a row partition with a column partition to produce the Grid
    of cells for one image.

Key Functions:
    - compose_grid(): Cross product of two AxisPartitions
    - build_grid(): Partition both axes for an image size, then compose

Dependencies:
    - splix.core.models: AxisPartition, Cell, Grid, WeightSpec
    - splix.slicing.partition: partition_axis

Used By:
    - splix.pipeline: Per-image grid construction
"""

from __future__ import annotations

from splix.core.models import AxisPartition, Cell, Grid, WeightSpec

from .partition import partition_axis


def compose_grid(row_partition: AxisPartition, col_partition: AxisPartition) -> Grid:
    """
    Build the grid of cells from independent row and column partitions.

    Rows are vertical spans (image height), columns are horizontal spans
    (image width). An empty partition on either axis yields an empty grid.

    Args:
        row_partition: Partition of the image height.
        col_partition: Partition of the image width.

    Returns:
        Grid with len(row_partition) * len(col_partition) cells, row-major.
    """
    cells = tuple(
        Cell(row=r, col=c, vertical=vertical, horizontal=horizontal)
        for r, vertical in enumerate(row_partition)
        for c, horizontal in enumerate(col_partition)
    )
    return Grid(row_partition=row_partition, col_partition=col_partition, cells=cells)


def build_grid(width: int, height: int, rows: WeightSpec, cols: WeightSpec) -> Grid:
    """
    Compute the grid for an image of the given size.

    Raises:
        DegenerateAxisError: If either axis is too small for its spec.

    Example:
        >>> grid = build_grid(10, 10, WeightSpec.uniform(2), WeightSpec.uniform(2))
        >>> [cell.origin for cell in grid]
        [(0, 0), (0, 5), (5, 0), (5, 5)]
    """
    row_partition = partition_axis(height, rows, axis="rows")
    col_partition = partition_axis(width, cols, axis="cols")
    return compose_grid(row_partition, col_partition)
