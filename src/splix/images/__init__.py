"""
Module: images

Purpose:
    Image access for splix. Wraps Pillow decoding and output format
    resolution.
"""

from .codec import (
    SourceImage,
    decode_image,
    resolve_output_format,
    prepare_for_format,
    supported_extensions,
)

__all__ = [
    "SourceImage",
    "decode_image",
    "resolve_output_format",
    "prepare_for_format",
    "supported_extensions",
]
