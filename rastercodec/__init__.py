"""Framebuffer encoders for PPM and run-length compressed TGA images."""

from rastercodec.errors import (
    EncodeError,
    EncodeIOError,
    InvalidDimensionError,
    NullArgumentError,
    SizeMismatchError,
    UnsupportedBppError,
    UnsupportedFormatError,
)
from rastercodec.imaging import Frame, encode, encode_ppm, encode_tga, save_frame, save_image

__version__ = "0.1.0"

__all__ = [
    "EncodeError",
    "EncodeIOError",
    "Frame",
    "InvalidDimensionError",
    "NullArgumentError",
    "SizeMismatchError",
    "UnsupportedBppError",
    "UnsupportedFormatError",
    "encode",
    "encode_ppm",
    "encode_tga",
    "save_frame",
    "save_image",
]
