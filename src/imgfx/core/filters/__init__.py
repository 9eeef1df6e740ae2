"""Per-pixel colour filters.

This package separates the filter pass into:
- algorithms: Numba-compiled scalar maths for every filter and their order
- filter_set: conditional per-filter functions driven by ``FilterParameters``
- jit_executor: the buffer kernel walking a whole RGBA array
"""

from __future__ import annotations

from .filter_set import (
    COMPOSITION_ORDER,
    brightness,
    contrast,
    grayscale,
    hue,
    invert,
    opacity,
    saturate,
    sepia,
    transform_rgb,
)
from .jit_executor import apply_filters

__all__ = [
    "COMPOSITION_ORDER",
    "apply_filters",
    "brightness",
    "contrast",
    "grayscale",
    "hue",
    "invert",
    "opacity",
    "saturate",
    "sepia",
    "transform_rgb",
]
