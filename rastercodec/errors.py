"""Exceptions raised by the image encoders."""

from __future__ import annotations


class EncodeError(Exception):
    """Base class for every failure raised while encoding an image."""


class NullArgumentError(EncodeError, TypeError):
    """Raised when the destination or framebuffer is missing."""


class InvalidDimensionError(EncodeError, ValueError):
    """Raised when width or height is out of range for the format."""


class UnsupportedBppError(EncodeError, ValueError):
    """Raised when the bytes-per-pixel value is not accepted by the format."""


class SizeMismatchError(EncodeError, ValueError):
    """Raised when the framebuffer length differs from width*height*bpp."""


class UnsupportedFormatError(EncodeError, ValueError):
    """Raised when an output format name or file suffix is not recognised."""


class EncodeIOError(EncodeError, OSError):
    """Raised when writing encoded bytes to the destination fails."""


__all__ = [
    "EncodeError",
    "EncodeIOError",
    "InvalidDimensionError",
    "NullArgumentError",
    "SizeMismatchError",
    "UnsupportedBppError",
    "UnsupportedFormatError",
]
