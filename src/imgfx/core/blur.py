"""Blur step applied to the filtered pixels before presentation."""

from __future__ import annotations

import numpy as np
from PIL import Image, ImageFilter

from .parameters import resolve_blur_radius
from .pixel_buffer import PixelBuffer


def blur_pixels(buffer: PixelBuffer, radius: int) -> PixelBuffer:
    """Return *buffer* blurred across all four RGBA channels.

    A radius of zero or less returns *buffer* itself.
    """

    if radius <= 0:
        return buffer

    image = Image.frombytes("RGBA", (buffer.width, buffer.height), buffer.tobytes())
    blurred = image.filter(ImageFilter.GaussianBlur(radius))
    data = np.asarray(blurred, dtype=np.uint8)
    return PixelBuffer.from_array(data)


__all__ = ["blur_pixels", "resolve_blur_radius"]
