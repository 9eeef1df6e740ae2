"""RGB and HSL conversions used by the per-pixel filter pass.

Both functions are compiled with Numba so the buffer kernel can inline them,
but they remain ordinary callables for Python code and tests.  Channels are
plain floats: RGB in ``[0, 255]`` and HSL in ``[0, 1]``.  Neither function
clamps its output; callers round and clamp before storing a channel.
"""

from __future__ import annotations

from numba import jit

_ONE_THIRD = 1.0 / 3.0
_ONE_SIXTH = 1.0 / 6.0
_TWO_THIRDS = 2.0 / 3.0


@jit(nopython=True, inline="always")
def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Return the ``(h, s, l)`` representation of an RGB triple.

    Equal channels take the achromatic branch (hue and saturation are zero),
    so ``max == min`` never divides by zero.  When several channels share the
    maximum, red wins over green and green over blue.
    """

    rn = r / 255.0
    gn = g / 255.0
    bn = b / 255.0
    high = max(rn, gn, bn)
    low = min(rn, gn, bn)
    lightness = (high + low) / 2.0

    if high == low:
        return 0.0, 0.0, lightness

    delta = high - low
    if lightness > 0.5:
        saturation = delta / (2.0 - high - low)
    else:
        saturation = delta / (high + low)

    if high == rn:
        hue = (gn - bn) / delta + (6.0 if gn < bn else 0.0)
    elif high == gn:
        hue = (bn - rn) / delta + 2.0
    else:
        hue = (rn - gn) / delta + 4.0
    return hue / 6.0, saturation, lightness


@jit(nopython=True, inline="always")
def _hue_to_channel(p: float, q: float, t: float) -> float:
    """Evaluate one RGB channel of the HSL hexcone at hue offset *t*."""

    # A single wrap is enough because callers only shift by one third.
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < _ONE_SIXTH:
        return p + (q - p) * 6.0 * t
    if t < 0.5:
        return q
    if t < _TWO_THIRDS:
        return p + (q - p) * (_TWO_THIRDS - t) * 6.0
    return p


@jit(nopython=True, inline="always")
def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """Return the ``(r, g, b)`` triple, scaled to ``[0, 255]``, for an HSL colour."""

    if s == 0.0:
        grey = l * 255.0
        return grey, grey, grey

    if l < 0.5:
        q = l * (1.0 + s)
    else:
        q = l + s - l * s
    p = 2.0 * l - q
    r = _hue_to_channel(p, q, h + _ONE_THIRD)
    g = _hue_to_channel(p, q, h)
    b = _hue_to_channel(p, q, h - _ONE_THIRD)
    return r * 255.0, g * 255.0, b * 255.0


__all__ = ["hsl_to_rgb", "rgb_to_hsl"]
