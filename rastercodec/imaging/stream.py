"""Destination stream helpers for the encoders."""

from __future__ import annotations

from typing import Any

from rastercodec.errors import EncodeIOError, NullArgumentError


def require_destination(destination: Any) -> None:
    if destination is None:
        raise NullArgumentError("destination must not be None")


def write_chunks(destination: Any, *chunks: bytes) -> None:
    """Write header and body chunks in order, wrapping stream failures."""
    try:
        for chunk in chunks:
            destination.write(chunk)
    except OSError as exc:
        raise EncodeIOError(f"Image write failed: {exc}") from exc


__all__ = ["require_destination", "write_chunks"]
