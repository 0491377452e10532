"""Framebuffer value type and Pillow adapter."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from PIL import Image

MODE_BPP = {
    "L": 1,
    "RGB": 3,
    "RGBA": 4,
}


@dataclass(frozen=True)
class Frame:
    """Row-major pixel bytes with their geometry."""

    data: bytes
    width: int
    height: int
    bpp: int  # bytes per pixel: 1, 3 or 4

    @classmethod
    def from_image(cls, image: Image.Image) -> Frame:
        """Capture a Pillow image as L, RGB or RGBA bytes."""
        if image.mode not in MODE_BPP:
            has_alpha = "A" in image.getbands() or "transparency" in image.info
            image = image.convert("RGBA" if has_alpha else "RGB")
        pixels = np.asarray(image, dtype=np.uint8)
        width, height = image.size
        return cls(data=pixels.tobytes(), width=width, height=height, bpp=MODE_BPP[image.mode])

    def without_alpha(self) -> Frame:
        """Return an RGB copy of an RGBA frame; other frames are returned as-is."""
        if self.bpp != 4:
            return self
        pixels = np.frombuffer(self.data, dtype=np.uint8).reshape(-1, 4)
        return Frame(data=pixels[:, :3].tobytes(), width=self.width, height=self.height, bpp=3)


__all__ = ["Frame", "MODE_BPP"]
