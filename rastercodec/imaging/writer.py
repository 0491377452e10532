"""File output helpers: format selection and atomic writes."""

from __future__ import annotations

import logging
import os
from pathlib import Path
import stat
import tempfile
from typing import Any, BinaryIO

from rastercodec.errors import EncodeIOError, UnsupportedFormatError
from rastercodec.imaging.frame import Frame
from rastercodec.imaging.framebuffer import PPM, TGA, validate_framebuffer
from rastercodec.imaging.ppm import encode_ppm
from rastercodec.imaging.tga import encode_tga

logger = logging.getLogger(__name__)

ENCODERS = {
    PPM: encode_ppm,
    TGA: encode_tga,
}

SUFFIX_FORMATS = {
    ".ppm": PPM,
    ".tga": TGA,
}


def encode(
    destination: BinaryIO,
    framebuffer: Any,
    width: int,
    height: int,
    bpp: int,
    fmt: str,
) -> None:
    """Encode to ``destination`` with the encoder registered for ``fmt``."""
    encoder = ENCODERS.get(fmt)
    if encoder is None:
        raise UnsupportedFormatError(f"Unsupported image format '{fmt}'")
    encoder(destination, framebuffer, width, height, bpp)


def format_for_path(path: str | os.PathLike[str]) -> str:
    suffix = Path(path).suffix.lower()
    if suffix not in SUFFIX_FORMATS:
        raise UnsupportedFormatError(f"Cannot infer image format from suffix '{suffix}'")
    return SUFFIX_FORMATS[suffix]


def _output_mode(path: Path) -> int:
    """Mode for a new image: keep an existing file's mode, else 0o666 minus the umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def save_image(
    path: str | os.PathLike[str],
    framebuffer: Any,
    width: int,
    height: int,
    bpp: int,
    fmt: str | None = None,
) -> Path:
    """Encode a framebuffer to ``path``, replacing the file only on success.

    The image is written to a temporary file beside ``path`` and renamed into
    place, so a failed write never leaves a truncated image behind.
    """
    output_path = Path(path)
    fmt = (fmt or format_for_path(output_path)).lower()
    if fmt not in ENCODERS:
        raise UnsupportedFormatError(f"Unsupported image format '{fmt}'")
    validate_framebuffer(framebuffer, width, height, bpp, fmt)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(
            prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent
        )
    except OSError as exc:
        raise EncodeIOError(f"Cannot create output file for {output_path}: {exc}") from exc

    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            encode(handle, framebuffer, width, height, bpp, fmt)
        os.chmod(temp_path, _output_mode(output_path))
        os.replace(temp_path, output_path)
    except EncodeIOError:
        temp_path.unlink(missing_ok=True)
        raise
    except OSError as exc:
        temp_path.unlink(missing_ok=True)
        raise EncodeIOError(f"Image write failed for {output_path}: {exc}") from exc
    except Exception:
        temp_path.unlink(missing_ok=True)
        raise

    logger.debug("Wrote %s image %dx%d (bpp=%d) to %s", fmt, width, height, bpp, output_path)
    return output_path


def save_frame(frame: Frame, path: str | os.PathLike[str], fmt: str | None = None) -> Path:
    """Save a :class:`Frame` to disk as PPM or TGA."""
    return save_image(path, frame.data, frame.width, frame.height, frame.bpp, fmt)


__all__ = ["ENCODERS", "encode", "format_for_path", "save_frame", "save_image"]
