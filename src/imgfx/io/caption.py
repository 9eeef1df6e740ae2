"""Top and bottom caption text drawn onto a copy of the original pixels.

Captions are composited before the filter pass, so the filters treat the
text like any other part of the image.
"""

from __future__ import annotations

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from ..config import DEFAULT_CAPTION_MARGIN
from ..core.pixel_buffer import PixelBuffer


def _default_font_size(buffer: PixelBuffer) -> int:
    return max(12, buffer.height // 10)


def overlay_caption(
    buffer: PixelBuffer,
    top_text: str = "",
    bottom_text: str = "",
    font_size: int | None = None,
    margin: int = DEFAULT_CAPTION_MARGIN,
) -> PixelBuffer:
    """Return a copy of *buffer* with white, black-outlined captions.

    The top caption is centred against the upper edge and the bottom caption
    against the lower edge.  Blank captions are skipped.
    """

    top_text = top_text.strip()
    bottom_text = bottom_text.strip()
    if not top_text and not bottom_text:
        return buffer.copy()

    size = font_size if font_size is not None else _default_font_size(buffer)
    stroke = max(1, size // 12)
    font = ImageFont.load_default(size=size)

    image = Image.frombytes("RGBA", (buffer.width, buffer.height), buffer.tobytes())
    draw = ImageDraw.Draw(image)

    for text, anchor_y, anchor in (
        (top_text, margin, "ma"),
        (bottom_text, buffer.height - margin, "md"),
    ):
        if not text:
            continue
        draw.text(
            (buffer.width / 2, anchor_y),
            text,
            font=font,
            fill=(255, 255, 255, 255),
            stroke_width=stroke,
            stroke_fill=(0, 0, 0, 255),
            anchor=anchor,
            align="center",
        )

    return PixelBuffer.from_array(np.asarray(image, dtype=np.uint8))


__all__ = ["overlay_caption"]
