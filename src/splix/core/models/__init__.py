"""
Core Models Package

Immutable, validated data models shared by the slicing engine.

All models in this package are frozen dataclasses, so partitions and
grids can be handed to worker threads without copying.
"""

from .weights import WeightSpec, parse_weights
from .bounds import PixelInterval, AxisPartition
from .grid import Cell, Grid

__all__ = [
    "WeightSpec",
    "parse_weights",
    "PixelInterval",
    "AxisPartition",
    "Cell",
    "Grid",
]
