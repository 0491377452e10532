"""Render a colour swatch and save it as PPM or TGA for viewer checks."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

from PIL import Image, ImageDraw

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from rastercodec.imaging import Frame, save_frame


def _build_swatch(width: int, height: int, bands: int, alpha: bool) -> Image.Image:
    mode = "RGBA" if alpha else "RGB"
    image = Image.new(mode, (width, height), (0, 0, 0, 0) if alpha else (0, 0, 0))
    draw = ImageDraw.Draw(image)

    colors = [
        (255, 0, 0, 255),
        (0, 255, 0, 192),
        (0, 0, 255, 128),
        (255, 255, 0, 64),
    ]
    band_width = max(1, width // bands)
    for idx in range(bands):
        left = idx * band_width
        right = min(left + band_width, width) - 1
        color = colors[idx % len(colors)]
        draw.rectangle((left, 0, right, height - 1), fill=color if alpha else color[:3])

    return image


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("output", nargs="?", default="output/swatch.tga")
    parser.add_argument("--width", type=int, default=192)
    parser.add_argument("--height", type=int, default=64)
    parser.add_argument("--bands", type=int, default=4)
    parser.add_argument("--alpha", action="store_true")
    parser.add_argument("--gray", action="store_true")
    args = parser.parse_args()

    if args.alpha and Path(args.output).suffix.lower() == ".ppm":
        raise SystemExit("--alpha is not supported for PPM output")

    image = _build_swatch(args.width, args.height, args.bands, args.alpha)
    if args.gray:
        image = image.convert("L")
    frame = Frame.from_image(image)
    path = save_frame(frame, args.output)
    print("swatch_written", {"path": str(path), "bpp": frame.bpp}, flush=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
