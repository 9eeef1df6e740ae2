"""JIT-compiled buffer kernel for the filter pass.

The kernel walks a flat RGBA ``uint8`` array in row-major order, reads every
pixel from the source array and writes the filtered channels into a separate
destination array, so the source can be reused for the next pass.
"""

from __future__ import annotations

import numpy as np
from numba import jit

from ..parameters import FilterParameters
from .algorithms import _compose_pixel, _float_to_channel, _opacity
from .filter_set import kernel_arguments


def apply_filters(
    source: np.ndarray, params: FilterParameters
) -> tuple[np.ndarray, float, float, float]:
    """Filter *source* into a new array.

    Returns the destination array together with the sums of the filtered red,
    green and blue channels.  The sums are taken before rounding, so they
    match the values the filter chain produced rather than the stored bytes.
    """

    if source.dtype != np.uint8 or source.ndim != 1:
        raise TypeError("apply_filters expects a flat uint8 array")

    destination = np.empty_like(source)
    sum_r, sum_g, sum_b = _apply_filters_kernel(
        source,
        destination,
        *kernel_arguments(params),
        params.value("opacity"),
        params.is_active("opacity"),
    )
    return destination, float(sum_r), float(sum_g), float(sum_b)


@jit(nopython=True, cache=True)
def _apply_filters_kernel(
    source: np.ndarray,
    destination: np.ndarray,
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
    opacity: float,
    apply_opacity: bool,
) -> tuple[float, float, float]:
    """JIT-compiled pixel processing kernel."""

    sum_r = 0.0
    sum_g = 0.0
    sum_b = 0.0
    for offset in range(0, source.size, 4):
        r, g, b = _compose_pixel(
            float(source[offset]),
            float(source[offset + 1]),
            float(source[offset + 2]),
            saturate,
            hue,
            brightness,
            contrast,
            grayscale,
            invert,
            sepia,
            apply_saturate,
            apply_hue,
            apply_brightness,
            apply_contrast,
            apply_grayscale,
            apply_invert,
            apply_sepia,
        )
        out_r = _float_to_channel(r)
        out_g = _float_to_channel(g)
        out_b = _float_to_channel(b)
        destination[offset] = out_r
        destination[offset + 1] = out_g
        destination[offset + 2] = out_b

        alpha = source[offset + 3]
        if apply_opacity:
            destination[offset + 3] = _float_to_channel(_opacity(float(alpha), opacity))
        else:
            destination[offset + 3] = alpha

        sum_r += r
        sum_g += g
        sum_b += b
    return sum_r, sum_g, sum_b
