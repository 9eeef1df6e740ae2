"""Conditional per-filter entry points.

Each function receives a triple by value together with the full
:class:`~imgfx.core.parameters.FilterParameters` and returns a new triple.  A
filter whose value equals its default returns the input untouched.
"""

from __future__ import annotations

from typing import Iterable

from ..parameters import FilterParameters
from .algorithms import (
    _brightness,
    _compose_pixel,
    _contrast,
    _grayscale,
    _hue,
    _invert,
    _opacity,
    _saturate,
    _sepia,
)

Triple = tuple[float, float, float]

HSL_FILTERS = ("saturate", "hue")
RGB_FILTERS = ("brightness", "contrast", "grayscale", "invert", "sepia")
COMPOSITION_ORDER = HSL_FILTERS + RGB_FILTERS + ("opacity",)
"""Order in which the per-pixel pass applies the filters."""


def _triple(values: Iterable[float]) -> Triple:
    a, b, c = values
    return float(a), float(b), float(c)


def brightness(rgb: Iterable[float], params: FilterParameters) -> Triple:
    if not params.is_active("brightness"):
        return tuple(rgb)  # type: ignore[return-value]
    return _brightness(*_triple(rgb), params.value("brightness"))


def contrast(rgb: Iterable[float], params: FilterParameters) -> Triple:
    if not params.is_active("contrast"):
        return tuple(rgb)  # type: ignore[return-value]
    return _contrast(*_triple(rgb), params.value("contrast"))


def grayscale(rgb: Iterable[float], params: FilterParameters) -> Triple:
    if not params.is_active("grayscale"):
        return tuple(rgb)  # type: ignore[return-value]
    return _grayscale(*_triple(rgb), params.value("grayscale"))


def invert(rgb: Iterable[float], params: FilterParameters) -> Triple:
    if not params.is_active("invert"):
        return tuple(rgb)  # type: ignore[return-value]
    return _invert(*_triple(rgb), params.value("invert"))


def sepia(rgb: Iterable[float], params: FilterParameters) -> Triple:
    if not params.is_active("sepia"):
        return tuple(rgb)  # type: ignore[return-value]
    return _sepia(*_triple(rgb), params.value("sepia"))


def saturate(hsl: Iterable[float], params: FilterParameters) -> Triple:
    if not params.is_active("saturate"):
        return tuple(hsl)  # type: ignore[return-value]
    return _saturate(*_triple(hsl), params.value("saturate"))


def hue(hsl: Iterable[float], params: FilterParameters) -> Triple:
    if not params.is_active("hue"):
        return tuple(hsl)  # type: ignore[return-value]
    return _hue(*_triple(hsl), params.value("hue"))


def opacity(alpha: float, params: FilterParameters) -> float:
    """Scale *alpha*; the result is rounded and clamped only when stored."""

    if not params.is_active("opacity"):
        return alpha
    return _opacity(float(alpha), params.value("opacity"))


def kernel_arguments(params: FilterParameters) -> tuple:
    """Return the value and activity arguments expected by ``_compose_pixel``.

    Activity is resolved once per pass here so the kernel only branches on
    booleans.  Values come first, in composition order, followed by the flags.
    """

    chain = HSL_FILTERS + RGB_FILTERS
    values = tuple(params.value(name) for name in chain)
    flags = tuple(params.is_active(name) for name in chain)
    return values + flags


def transform_rgb(rgb: Iterable[float], params: FilterParameters) -> Triple:
    """Run the complete filter chain on a single RGB triple."""

    return _compose_pixel(*_triple(rgb), *kernel_arguments(params))


__all__ = [
    "COMPOSITION_ORDER",
    "HSL_FILTERS",
    "RGB_FILTERS",
    "brightness",
    "contrast",
    "grayscale",
    "hue",
    "invert",
    "kernel_arguments",
    "opacity",
    "saturate",
    "sepia",
    "transform_rgb",
]
