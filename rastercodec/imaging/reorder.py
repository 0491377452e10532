"""Channel reordering from framebuffer order to TGA on-disk order."""

from __future__ import annotations

from typing import Any

import numpy as np

from rastercodec.imaging.framebuffer import as_byte_view

# Source channels are R,G,B[,A]; TGA stores B,G,R[,A].
TGA_CHANNEL_ORDER = {
    3: (2, 1, 0),
    4: (2, 1, 0, 3),
}


def to_tga_order(framebuffer: Any, bpp: int) -> bytes:
    """Return the framebuffer with each pixel's channels in TGA order."""
    view = as_byte_view(framebuffer)
    if bpp == 1:
        return view.tobytes()

    order = TGA_CHANNEL_ORDER.get(bpp)
    if order is None:
        raise ValueError(f"No TGA channel order for bpp {bpp}.")
    pixels = np.frombuffer(view, dtype=np.uint8).reshape(-1, bpp)
    return pixels[:, order].tobytes()


__all__ = ["TGA_CHANNEL_ORDER", "to_tga_order"]
