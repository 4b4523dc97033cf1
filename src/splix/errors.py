"""
Module: errors

Purpose:
    Exception hierarchy shared by every splix module. Argument-level
    errors also subclass ValueError so callers validating input can
    catch them generically.

Key Classes:
    - SplixError: Base class for all splix failures
    - InvalidSpecificationError: Malformed row/column weights
    - DegenerateAxisError: Extent too small for the requested divisions
    - ImageDecodeError: Source image unreadable or unsupported
    - ImageWriteError: Output directory creation or file write failed
    - PartitionMismatchError: Grid applied to an image of another size

Used By:
    - splix.core.models.weights
    - splix.slicing
    - splix.images.codec
    - splix.pipeline
    - splix.cli
"""


class SplixError(Exception):
    """Base class for splix errors."""
    pass


class InvalidSpecificationError(SplixError, ValueError):
    """Row or column specification is empty, non-positive or unparsable."""
    pass


class DegenerateAxisError(SplixError, ValueError):
    """Axis extent is smaller than the number of requested divisions."""
    pass


class ImageDecodeError(SplixError):
    """Source image could not be opened or decoded."""
    pass


class ImageWriteError(SplixError):
    """Output directory or sliced image could not be written."""
    pass


class PartitionMismatchError(SplixError):
    """
    Grid was computed against a different image size.

    Indicates an internal invariant violation; partitions must be
    recomputed for every source image.
    """
    pass
