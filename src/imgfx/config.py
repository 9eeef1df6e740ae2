"""Static configuration values for imgfx."""

from __future__ import annotations

DISPLAY_FIT_RATIO = 0.9
"""Fraction of the display region an acquired image may occupy."""

BORDER_MAX_DIVISOR = 3
"""The border slider tops out at one third of the image's limiting side."""

DEFAULT_EXPORT_NAME = "newfile.png"

DEFAULT_CAPTION_MARGIN = 10
"""Pixels kept free between a caption and the image edge."""

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
