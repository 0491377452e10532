from __future__ import annotations

import io
from unittest.mock import Mock

from PIL import Image
import pytest

from rastercodec.errors import EncodeIOError, SizeMismatchError, UnsupportedBppError
from rastercodec.imaging.ppm import build_ppm_header, encode_ppm


def _encode(framebuffer: bytes, width: int, height: int, bpp: int) -> bytes:
    stream = io.BytesIO()
    encode_ppm(stream, framebuffer, width, height, bpp)
    return stream.getvalue()


def test_header_text() -> None:
    assert build_ppm_header(640, 480) == b"P6\n640 480\n255\n"


def test_rgb_written_verbatim() -> None:
    framebuffer = bytes(range(18))

    data = _encode(framebuffer, 3, 2, 3)

    assert data == b"P6\n3 2\n255\n" + framebuffer


def test_grayscale_expanded_to_rgb() -> None:
    data = _encode(bytes([0, 128, 255]), 3, 1, 1)

    assert data == b"P6\n3 1\n255\n" + bytes([0, 0, 0, 128, 128, 128, 255, 255, 255])


@pytest.mark.parametrize("bpp", [1, 3])
def test_output_length(bpp: int) -> None:
    width, height = 5, 4
    header = build_ppm_header(width, height)

    data = _encode(bytes(width * height * bpp), width, height, bpp)

    assert len(data) == len(header) + width * height * 3


def test_readable_by_pillow() -> None:
    framebuffer = bytes((x * 7) % 256 for x in range(4 * 3 * 3))

    data = _encode(framebuffer, 4, 3, 3)

    with Image.open(io.BytesIO(data), formats=["PPM"]) as image:
        assert image.mode == "RGB"
        assert image.size == (4, 3)
        assert image.tobytes() == framebuffer


def test_rgba_not_accepted() -> None:
    with pytest.raises(UnsupportedBppError):
        _encode(bytes(4), 1, 1, 4)


def test_size_mismatch_writes_nothing() -> None:
    stream = io.BytesIO()

    with pytest.raises(SizeMismatchError):
        encode_ppm(stream, bytes(5), 2, 3, 1)

    assert stream.getvalue() == b""


def test_write_failure_wrapped() -> None:
    destination = Mock()
    destination.write.side_effect = OSError("broken pipe")

    with pytest.raises(EncodeIOError):
        encode_ppm(destination, bytes(3), 1, 1, 3)
