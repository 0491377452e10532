from __future__ import annotations

import numpy as np
import pytest

from rastercodec.errors import (
    InvalidDimensionError,
    NullArgumentError,
    SizeMismatchError,
    UnsupportedBppError,
    UnsupportedFormatError,
)
from rastercodec.imaging.framebuffer import PPM, TGA, validate_framebuffer
from rastercodec.imaging.reorder import to_tga_order


def test_valid_buffer_returns_byte_view() -> None:
    view = validate_framebuffer(bytes(12), 2, 2, 3, PPM)

    assert isinstance(view, memoryview)
    assert view.nbytes == 12


def test_numpy_frame_accepted() -> None:
    pixels = np.zeros((2, 3, 4), dtype=np.uint8)

    view = validate_framebuffer(pixels, 3, 2, 4, TGA)

    assert view.nbytes == 24
    assert view.ndim == 1


@pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-2, 3)])
def test_non_positive_dimensions_rejected(width: int, height: int) -> None:
    with pytest.raises(InvalidDimensionError):
        validate_framebuffer(b"", width, height, 1, TGA)


def test_tga_dimension_limit() -> None:
    with pytest.raises(InvalidDimensionError):
        validate_framebuffer(bytes(65536), 65536, 1, 1, TGA)

    view = validate_framebuffer(bytes(65536), 65536, 1, 1, PPM)
    assert view.nbytes == 65536


@pytest.mark.parametrize("fmt,bpp", [(PPM, 4), (PPM, 2), (TGA, 2), (TGA, 0)])
def test_unsupported_bpp_rejected(fmt: str, bpp: int) -> None:
    with pytest.raises(UnsupportedBppError):
        validate_framebuffer(bytes(4 * max(bpp, 1)), 2, 2, bpp, fmt)


def test_size_mismatch_rejected() -> None:
    with pytest.raises(SizeMismatchError) as exc_info:
        validate_framebuffer(bytes(11), 2, 2, 3, TGA)

    assert "11" in str(exc_info.value)
    assert "12" in str(exc_info.value)


def test_none_framebuffer_rejected() -> None:
    with pytest.raises(NullArgumentError):
        validate_framebuffer(None, 1, 1, 1, TGA)


def test_unknown_format_rejected() -> None:
    with pytest.raises(UnsupportedFormatError):
        validate_framebuffer(bytes(3), 1, 1, 3, "bmp")


def test_error_types_are_value_errors() -> None:
    with pytest.raises(ValueError):
        validate_framebuffer(bytes(2), 1, 1, 3, PPM)


def test_reorder_rgb_to_bgr() -> None:
    assert to_tga_order(bytes([1, 2, 3, 4, 5, 6]), 3) == bytes([3, 2, 1, 6, 5, 4])


def test_reorder_keeps_alpha_last() -> None:
    assert to_tga_order(bytes([1, 2, 3, 4]), 4) == bytes([3, 2, 1, 4])


def test_reorder_grayscale_is_identity() -> None:
    assert to_tga_order(bytearray([9, 8, 7]), 1) == bytes([9, 8, 7])


@pytest.mark.parametrize("width,height", [(2.0, 1), (1, "1"), (True, 1)])
def test_non_integer_dimensions_rejected(width, height) -> None:
    with pytest.raises(InvalidDimensionError):
        validate_framebuffer(bytes(2), width, height, 1, TGA)


@pytest.mark.parametrize("bpp", [True, 3.0])
def test_non_integer_bpp_rejected(bpp) -> None:
    with pytest.raises(UnsupportedBppError):
        validate_framebuffer(bytes(3), 1, 1, bpp, TGA)


def test_numpy_integer_dimensions_accepted() -> None:
    view = validate_framebuffer(bytes(6), np.int64(2), np.uint16(1), np.int32(3), TGA)

    assert view.nbytes == 6
