"""Pure filter maths shared by every executor.

The functions in this module are compiled with Numba and operate on plain
floats so they can be inlined into the buffer kernel.  None of them checks
whether its filter is active; :mod:`imgfx.core.filters.filter_set` and the
kernel arguments decide that.  RGB channels live in ``[0, 255]`` and HSL
components in ``[0, 1]``.
"""

from __future__ import annotations

from numba import jit

from ..color_space import hsl_to_rgb, rgb_to_hsl


@jit(nopython=True, inline="always")
def _clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp *value* to the inclusive range [min_val, max_val]."""
    if value < min_val:
        return min_val
    if value > max_val:
        return max_val
    return value


@jit(nopython=True, inline="always")
def _float_to_channel(value: float) -> int:
    """Round *value* to the nearest integer and clamp it to ``[0, 255]``."""

    scaled = round(value)
    if scaled < 0:
        return 0
    if scaled > 255:
        return 255
    return int(scaled)


@jit(nopython=True, inline="always")
def _brightness(r: float, g: float, b: float, value: float) -> tuple[float, float, float]:
    """Shift every channel by ``(value - 1) * 255``."""

    offset = (value - 1.0) * 255.0
    return (
        _clamp(r + offset, 0.0, 255.0),
        _clamp(g + offset, 0.0, 255.0),
        _clamp(b + offset, 0.0, 255.0),
    )


@jit(nopython=True, inline="always")
def _contrast_channel(channel: float, factor: float) -> float:
    return _clamp(factor * (channel - 128.0) + 128.0, 0.0, 255.0)


@jit(nopython=True, inline="always")
def _threshold(channel: float) -> float:
    if channel > 128.0:
        return 255.0
    if channel < 128.0:
        return 0.0
    return 128.0


@jit(nopython=True, inline="always")
def _contrast(r: float, g: float, b: float, value: float) -> tuple[float, float, float]:
    """Scale the distance of each channel from the mid-point 128."""

    c = (value - 1.0) * 255.0
    denominator = 255.0 * (259.0 - c)
    if denominator == 0.0:
        # The factor diverges here; the curve degenerates into a hard threshold.
        return _threshold(r), _threshold(g), _threshold(b)
    factor = 259.0 * (c + 255.0) / denominator
    return (
        _contrast_channel(r, factor),
        _contrast_channel(g, factor),
        _contrast_channel(b, factor),
    )


@jit(nopython=True, inline="always")
def _grayscale(r: float, g: float, b: float, value: float) -> tuple[float, float, float]:
    """Blend each channel towards the plain channel mean."""

    average = (r + g + b) / 3.0
    keep = 1.0 - value
    return (
        r * keep + average * value,
        g * keep + average * value,
        b * keep + average * value,
    )


@jit(nopython=True, inline="always")
def _invert(r: float, g: float, b: float, value: float) -> tuple[float, float, float]:
    """Blend each channel towards its complement.

    ``value == 0.5`` maps every colour to 127.5 grey.
    """

    keep = 1.0 - value
    return (
        r * keep + (255.0 - r) * value,
        g * keep + (255.0 - g) * value,
        b * keep + (255.0 - b) * value,
    )


@jit(nopython=True, inline="always")
def _sepia(r: float, g: float, b: float, value: float) -> tuple[float, float, float]:
    """Mix in the sepia tone matrix, halving the result."""

    rs = 0.393 * r + 0.769 * g + 0.189 * b
    gs = 0.349 * r + 0.686 * g + 0.168 * b
    bs = 0.272 * r + 0.534 * g + 0.131 * b
    keep = 1.0 - value
    return (
        (value * rs + keep * r) / 2.0,
        (value * gs + keep * g) / 2.0,
        (value * bs + keep * b) / 2.0,
    )


@jit(nopython=True, inline="always")
def _saturate(h: float, s: float, l: float, value: float) -> tuple[float, float, float]:
    """Scale saturation, capping it at 1 (there is no lower bound)."""

    s = s * value
    if s > 1.0:
        s = 1.0
    return h, s, l


@jit(nopython=True, inline="always")
def _hue(h: float, s: float, l: float, value: float) -> tuple[float, float, float]:
    """Rotate the hue by *value* degrees.

    Only one full turn is subtracted, so rotations that push the hue past 2
    stay above 1.
    """

    h = h + value / 360.0
    if h > 1.0:
        h -= 1.0
    return h, s, l


@jit(nopython=True, inline="always")
def _opacity(alpha: float, value: float) -> float:
    return alpha * value


@jit(nopython=True, inline="always")
def _compose_pixel(
    r: float,
    g: float,
    b: float,
    saturate: float,
    hue: float,
    brightness: float,
    contrast: float,
    grayscale: float,
    invert: float,
    sepia: float,
    apply_saturate: bool,
    apply_hue: bool,
    apply_brightness: bool,
    apply_contrast: bool,
    apply_grayscale: bool,
    apply_invert: bool,
    apply_sepia: bool,
) -> tuple[float, float, float]:
    """Run the fixed filter chain on one RGB triple.

    The order is part of the output contract: HSL filters (saturate, hue) run
    first, then brightness, contrast, grayscale, invert and sepia in RGB.  The
    HSL round trip happens even when no HSL filter is active.
    """

    h, s, l = rgb_to_hsl(r, g, b)
    if apply_saturate:
        h, s, l = _saturate(h, s, l, saturate)
    if apply_hue:
        h, s, l = _hue(h, s, l, hue)
    r, g, b = hsl_to_rgb(h, s, l)

    if apply_brightness:
        r, g, b = _brightness(r, g, b, brightness)
    if apply_contrast:
        r, g, b = _contrast(r, g, b, contrast)
    if apply_grayscale:
        r, g, b = _grayscale(r, g, b, grayscale)
    if apply_invert:
        r, g, b = _invert(r, g, b, invert)
    if apply_sepia:
        r, g, b = _sepia(r, g, b, sepia)
    return r, g, b
