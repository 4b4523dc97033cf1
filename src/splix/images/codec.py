"""
Module: images.codec

Purpose:
    Pillow-backed decoding of source images and resolution of the
    output encoding for sliced cells.

Key Classes:
    - SourceImage: Decoded raster plus its path and format

Key Functions:
    - decode_image(): Open and fully load an image
    - resolve_output_format(): Pick PIL format + file extension for output
    - prepare_for_format(): Convert image mode when the format needs it
    - supported_extensions(): File suffixes Pillow can open

Dependencies:
    - PIL: Image decoding and format registry

Used By:
    - splix.pipeline: Decode step and output naming
    - splix.discovery: Extension filtering
    - splix.cli: Target format validation
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image, UnidentifiedImageError

from splix.errors import ImageDecodeError, InvalidSpecificationError

logger = logging.getLogger(__name__)

# Formats that cannot store an alpha channel or palette transparency
_RGB_ONLY_FORMATS = {"JPEG", "EPS", "PCX"}
_JPEG_MODES = {"RGB", "L", "CMYK"}


@dataclass(frozen=True)
class SourceImage:
    """
    Decoded source image.

    Attributes:
        path: File the image was read from.
        image: Fully loaded PIL image.
        format: PIL format name ("PNG", "JPEG", ...).
    """
    path: Path
    image: Image.Image
    format: str

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height


@lru_cache(maxsize=1)
def supported_extensions() -> frozenset[str]:
    """Lower-case suffixes (with dot) Pillow can open."""
    return frozenset(
        ext.lower()
        for ext, fmt in Image.registered_extensions().items()
        if fmt in Image.OPEN
    )


def decode_image(path: Path) -> SourceImage:
    """
    Open an image and force a full decode.

    Pillow opens lazily, so load() is called here to surface truncated
    or corrupt files as decode errors rather than during cropping.

    Args:
        path: Image file path.

    Returns:
        SourceImage with the loaded raster.

    Raises:
        ImageDecodeError: If the file is missing, unreadable or not an image.
    """
    try:
        with Image.open(path) as img:
            img.load()
            fmt = img.format or _format_from_suffix(path)
            # copy() detaches the raster from the file handle
            image = img.copy()
    except (UnidentifiedImageError, OSError, Image.DecompressionBombError, SyntaxError) as e:
        raise ImageDecodeError(f"Cannot decode {path}: {e}") from e

    if not fmt:
        raise ImageDecodeError(f"Unknown image format for {path}")

    logger.debug(f"Decoded {path.name}: {image.width}x{image.height} {fmt} {image.mode}")
    return SourceImage(path=path, image=image, format=fmt)


def resolve_output_format(
    source: Optional[SourceImage],
    target: Optional[str] = None,
) -> Tuple[str, str]:
    """
    Determine the PIL format and file extension for sliced output.

    With no target, the source format is reused and the source suffix is
    kept (lower-cased). A target may be an extension ("jpg") or a format
    name ("JPEG").

    Args:
        source: Decoded source (may be None when only validating target).
        target: Optional configured output format.

    Returns:
        (pil_format, extension_without_dot)

    Raises:
        InvalidSpecificationError: If target is not a format Pillow can save.

    Example:
        >>> resolve_output_format(None, "jpg")
        ('JPEG', 'jpg')
    """
    if target:
        return _resolve_target(target)

    if source is None:
        raise ValueError("source is required when no target format is given")

    suffix = source.path.suffix.lower().lstrip(".")
    fmt = source.format
    if suffix and Image.registered_extensions().get(f".{suffix}") == fmt:
        return fmt, suffix
    return fmt, _extension_for_format(fmt)


def prepare_for_format(image: Image.Image, pil_format: str) -> Image.Image:
    """
    Convert image mode when the output format cannot store it.

    Returns the image unchanged when no conversion is needed.
    """
    if pil_format == "JPEG" and image.mode not in _JPEG_MODES:
        return image.convert("RGB")
    if pil_format in _RGB_ONLY_FORMATS and image.mode in ("RGBA", "LA", "P"):
        return image.convert("RGB")
    return image


def _resolve_target(target: str) -> Tuple[str, str]:
    name = target.strip().lower().lstrip(".")
    registered = Image.registered_extensions()
    fmt = registered.get(f".{name}")
    ext = name
    if fmt is None:
        # Format name such as "jpeg2000" or "webp"
        upper = name.upper()
        if upper in Image.SAVE:
            fmt = upper
            ext = _extension_for_format(upper)
    if fmt is None or fmt not in Image.SAVE:
        raise InvalidSpecificationError(f"Unsupported output format: {target!r}")
    return fmt, ext


def _format_from_suffix(path: Path) -> Optional[str]:
    return Image.registered_extensions().get(path.suffix.lower())


def _extension_for_format(fmt: str) -> str:
    for ext, registered_fmt in Image.registered_extensions().items():
        if registered_fmt == fmt:
            return ext.lstrip(".")
    return fmt.lower()
