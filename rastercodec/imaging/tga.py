"""Run-length compressed TGA encoder."""

from __future__ import annotations

import struct
from typing import Any, BinaryIO

from rastercodec.imaging.framebuffer import TGA, validate_framebuffer
from rastercodec.imaging.reorder import to_tga_order
from rastercodec.imaging.rle import encode_rle
from rastercodec.imaging.stream import require_destination, write_chunks

TGA_HEADER_SIZE = 18
IMAGE_TYPE_RLE_TRUECOLOR = 10
IMAGE_TYPE_RLE_GRAYSCALE = 11
DESCRIPTOR_TOP_LEFT = 0x20
DESCRIPTOR_ALPHA_8 = 0x08

# id length, colour map type, image type, colour map spec (5 bytes),
# x/y origin, width, height, pixel depth, descriptor.
_HEADER_STRUCT = struct.Struct("<BBB5xHHHHBB")


def build_tga_header(width: int, height: int, bpp: int) -> bytes:
    """Build the 18-byte header for an RLE grayscale, RGB or RGBA image."""
    image_type = IMAGE_TYPE_RLE_GRAYSCALE if bpp == 1 else IMAGE_TYPE_RLE_TRUECOLOR
    descriptor = DESCRIPTOR_TOP_LEFT
    if bpp == 4:
        descriptor |= DESCRIPTOR_ALPHA_8
    return _HEADER_STRUCT.pack(0, 0, image_type, 0, 0, width, height, bpp * 8, descriptor)


def encode_tga(
    destination: BinaryIO,
    framebuffer: Any,
    width: int,
    height: int,
    bpp: int,
) -> None:
    """Write ``framebuffer`` to ``destination`` as an RLE TGA image.

    ``bpp`` is bytes per pixel: 1 (gray), 3 (RGB) or 4 (RGBA). Rows are
    stored top to bottom. The caller owns ``destination`` and closes it.
    """
    require_destination(destination)
    view = validate_framebuffer(framebuffer, width, height, bpp, TGA)

    header = build_tga_header(width, height, bpp)
    body = encode_rle(to_tga_order(view, bpp), bpp)
    write_chunks(destination, header, body)


__all__ = ["TGA_HEADER_SIZE", "build_tga_header", "encode_tga"]
