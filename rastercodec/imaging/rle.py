"""Greedy run-length packet encoder used by the TGA writer.

Each packet starts with one header byte. A set high bit marks a run packet
that stores a single pixel repeated ``(header & 0x7F) + 1`` times; a clear
high bit marks a raw packet followed by ``header + 1`` literal pixels.

A run of two or more identical pixels at the cursor always wins over
extending a raw packet, even where that is not the smallest encoding.
Packet boundaries are part of the output contract and must not change.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from rastercodec.imaging.framebuffer import as_byte_view

MAX_PACKET_LENGTH = 128
RUN_FLAG = 0x80


@dataclass(frozen=True)
class Packet:
    """One run or raw packet covering ``count`` pixels from pixel ``start``."""

    is_run: bool
    start: int
    count: int

    @property
    def header(self) -> int:
        if self.is_run:
            return RUN_FLAG | (self.count - 1)
        return self.count - 1


def iter_packets(pixels: Any, pixel_size: int) -> Iterator[Packet]:
    """Yield packets in encounter order, partitioning the whole pixel stream."""
    if pixel_size <= 0:
        raise ValueError(f"Pixel size must be positive, got {pixel_size}.")
    view = as_byte_view(pixels)
    if view.nbytes % pixel_size != 0:
        raise ValueError(
            f"Pixel stream of {view.nbytes} bytes is not a multiple of pixel size {pixel_size}."
        )

    def pixel(index: int) -> memoryview:
        offset = index * pixel_size
        return view[offset : offset + pixel_size]

    pixel_count = view.nbytes // pixel_size
    index = 0
    while index < pixel_count:
        max_length = min(MAX_PACKET_LENGTH, pixel_count - index)
        first = pixel(index)

        run_length = 1
        while run_length < max_length and pixel(index + run_length) == first:
            run_length += 1

        if run_length > 1:
            yield Packet(is_run=True, start=index, count=run_length)
            index += run_length
            continue

        raw_length = 1
        while raw_length < max_length:
            current = index + raw_length - 1
            if pixel(current) == pixel(current + 1):
                break
            raw_length += 1

        yield Packet(is_run=False, start=index, count=raw_length)
        index += raw_length


def encode_rle(pixels: Any, pixel_size: int) -> bytes:
    """Encode a pixel stream into concatenated TGA RLE packets."""
    view = as_byte_view(pixels)
    out = bytearray()
    for packet in iter_packets(view, pixel_size):
        offset = packet.start * pixel_size
        out.append(packet.header)
        if packet.is_run:
            out += view[offset : offset + pixel_size]
        else:
            out += view[offset : offset + packet.count * pixel_size]
    return bytes(out)


__all__ = ["MAX_PACKET_LENGTH", "Packet", "encode_rle", "iter_packets"]
