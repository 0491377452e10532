"""Binary PPM (P6) encoder."""

from __future__ import annotations

from typing import Any, BinaryIO

import numpy as np

from rastercodec.imaging.framebuffer import PPM, validate_framebuffer
from rastercodec.imaging.stream import require_destination, write_chunks


def build_ppm_header(width: int, height: int) -> bytes:
    # Always P6: grayscale input is expanded to RGB triplets.
    return f"P6\n{width} {height}\n255\n".encode("ascii")


def encode_ppm(
    destination: BinaryIO,
    framebuffer: Any,
    width: int,
    height: int,
    bpp: int,
) -> None:
    """Write ``framebuffer`` to ``destination`` as a 24-bit P6 image.

    ``bpp`` must be 1 (gray, expanded to RGB) or 3 (RGB, written verbatim).
    """
    require_destination(destination)
    view = validate_framebuffer(framebuffer, width, height, bpp, PPM)

    if bpp == 1:
        body = np.repeat(np.frombuffer(view, dtype=np.uint8), 3).tobytes()
    else:
        body = view
    write_chunks(destination, build_ppm_header(width, height), body)


__all__ = ["build_ppm_header", "encode_ppm"]
