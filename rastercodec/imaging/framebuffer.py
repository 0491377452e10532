"""Framebuffer validation shared by the PPM and TGA encoders."""

from __future__ import annotations

import numbers
from typing import Any

from rastercodec.errors import (
    InvalidDimensionError,
    NullArgumentError,
    SizeMismatchError,
    UnsupportedBppError,
    UnsupportedFormatError,
)

PPM = "ppm"
TGA = "tga"

ACCEPTED_BPP = {
    PPM: (1, 3),
    TGA: (1, 3, 4),
}

# TGA stores width and height as little-endian uint16.
TGA_MAX_DIMENSION = 0xFFFF


def _is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def as_byte_view(framebuffer: Any) -> memoryview:
    """Return a flat unsigned-byte view over any buffer-protocol object."""
    view = memoryview(framebuffer)
    if view.ndim != 1 or view.format != "B":
        view = view.cast("B")
    return view


def validate_framebuffer(
    framebuffer: Any,
    width: int,
    height: int,
    bpp: int,
    fmt: str,
) -> memoryview:
    """Check geometry and bpp for ``fmt`` and return a byte view of the buffer.

    Nothing is written and nothing is retained; any inconsistency raises an
    :class:`~rastercodec.errors.EncodeError` subclass.
    """
    if fmt not in ACCEPTED_BPP:
        raise UnsupportedFormatError(f"Unsupported image format '{fmt}'")
    if framebuffer is None:
        raise NullArgumentError("framebuffer must not be None")

    if not _is_integer(width) or not _is_integer(height):
        raise InvalidDimensionError(f"Width and height must be integers, got {width!r}x{height!r}.")
    if width <= 0:
        raise InvalidDimensionError(f"Width must be positive, got {width}.")
    if height <= 0:
        raise InvalidDimensionError(f"Height must be positive, got {height}.")
    if fmt == TGA and (width > TGA_MAX_DIMENSION or height > TGA_MAX_DIMENSION):
        raise InvalidDimensionError(
            f"TGA dimensions must not exceed {TGA_MAX_DIMENSION}, got {width}x{height}."
        )

    accepted = ACCEPTED_BPP[fmt]
    if not _is_integer(bpp) or bpp not in accepted:
        choices = ", ".join(str(value) for value in accepted)
        raise UnsupportedBppError(f"{fmt.upper()} bpp must be one of {choices}, got {bpp}.")

    view = as_byte_view(framebuffer)
    expected = width * height * bpp
    if view.nbytes != expected:
        raise SizeMismatchError(
            f"Framebuffer size {view.nbytes} does not match width*height*bpp {expected}."
        )
    return view


__all__ = ["ACCEPTED_BPP", "PPM", "TGA", "TGA_MAX_DIMENSION", "as_byte_view", "validate_framebuffer"]
