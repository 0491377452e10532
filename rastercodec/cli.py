"""Convert an image file or raw framebuffer dump to PPM or TGA."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from PIL import Image

from rastercodec.config import AppConfig, default_config, load_config
from rastercodec.errors import EncodeError
from rastercodec.imaging import PPM, TGA, Frame, format_for_path, save_frame
from rastercodec.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rastercodec-encode", description=__doc__)
    parser.add_argument("input", help="Image readable by Pillow, or a raw framebuffer with --raw")
    parser.add_argument("--output", "-o", default=None)
    parser.add_argument("--format", choices=(PPM, TGA), default=None)
    parser.add_argument("--config", default=None, help="YAML config file")
    parser.add_argument("--raw", action="store_true", help="Treat input as raw row-major pixel bytes")
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--bpp", type=int, default=None, help="Bytes per pixel for --raw input")
    return parser


def _load_frame(args: argparse.Namespace) -> Frame:
    path = Path(args.input)
    if not args.raw:
        with Image.open(path) as image:
            return Frame.from_image(image)

    if args.width is None or args.height is None or args.bpp is None:
        raise ValueError("--raw input requires --width, --height and --bpp")
    return Frame(data=path.read_bytes(), width=args.width, height=args.height, bpp=args.bpp)


def _resolve_output(args: argparse.Namespace, config: AppConfig) -> tuple[Path, str]:
    if args.output:
        output = Path(args.output)
        fmt = args.format or format_for_path(output)
        return output, fmt
    fmt = args.format or config.output.default_format
    return Path(config.output.directory) / f"{Path(args.input).stem}.{fmt}", fmt


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        config = load_config(args.config) if args.config else default_config()
        configure_logging(config.log)
    except (ValueError, OSError) as exc:
        logging.getLogger(__name__).error("Configuration error: %s", exc)
        return 2

    try:
        output, fmt = _resolve_output(args, config)
        frame = _load_frame(args)
        if fmt == PPM and frame.bpp == 4:
            logger.info("PPM has no alpha channel; dropping alpha from %s", args.input)
            frame = frame.without_alpha()
        written = save_frame(frame, output, fmt)
    except (EncodeError, ValueError, OSError) as exc:
        logger.error("Failed to encode %s: %s", args.input, exc)
        return 1

    logger.info("Wrote %dx%d %s image to %s", frame.width, frame.height, fmt.upper(), written)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
