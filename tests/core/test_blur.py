"""Tests for the blur step."""

from imgfx.core.blur import blur_pixels
from imgfx.core.pixel_buffer import PixelBuffer


def test_zero_radius_returns_the_same_buffer() -> None:
    buffer = PixelBuffer.filled(3, 3, (1, 2, 3, 255))
    assert blur_pixels(buffer, 0) is buffer
    assert blur_pixels(buffer, -2) is buffer


def test_uniform_image_stays_uniform() -> None:
    buffer = PixelBuffer.filled(8, 6, (90, 140, 30, 255))
    blurred = blur_pixels(buffer, 3)
    assert blurred == buffer


def test_blur_spreads_a_bright_pixel() -> None:
    buffer = PixelBuffer.filled(9, 9, (0, 0, 0, 255))
    array = buffer.as_array().copy()
    array[4, 4] = (255, 255, 255, 255)
    buffer = PixelBuffer.from_array(array)

    blurred = blur_pixels(buffer, 2)

    assert (blurred.width, blurred.height) == (9, 9)
    assert blurred.pixel(4, 4)[0] < 255
    assert blurred.pixel(5, 4)[0] > 0
    assert blurred.pixel(4, 4)[3] == 255
    assert buffer.pixel(4, 4) == (255, 255, 255, 255)
