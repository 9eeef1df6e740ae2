"""Tests for caption text drawn before filtering."""

import numpy as np

from imgfx.core.pixel_buffer import PixelBuffer
from imgfx.io.caption import overlay_caption


def test_blank_captions_return_an_equal_copy() -> None:
    buffer = PixelBuffer.filled(20, 10, (5, 5, 5, 255))
    result = overlay_caption(buffer, "  ", "")
    assert result == buffer


def test_top_caption_only_touches_the_upper_half() -> None:
    buffer = PixelBuffer.filled(120, 80, (0, 0, 0, 255))
    result = overlay_caption(buffer, "HELLO", font_size=14)

    changed = np.any(result.as_array() != buffer.as_array(), axis=2)
    assert changed[:40].any()
    assert not changed[40:].any()
    assert buffer == PixelBuffer.filled(120, 80, (0, 0, 0, 255))


def test_bottom_caption_only_touches_the_lower_half() -> None:
    buffer = PixelBuffer.filled(120, 80, (0, 0, 0, 255))
    result = overlay_caption(buffer, bottom_text="WORLD", font_size=14)

    changed = np.any(result.as_array() != buffer.as_array(), axis=2)
    assert changed[40:].any()
    assert not changed[:40].any()


def test_caption_keeps_dimensions() -> None:
    buffer = PixelBuffer.filled(64, 48, (30, 60, 90, 255))
    result = overlay_caption(buffer, "TOP", "BOTTOM")
    assert (result.width, result.height) == (64, 48)
