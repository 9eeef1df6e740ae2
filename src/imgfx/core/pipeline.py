"""Single pass of the colour filter chain over a whole image.

A pass reads every pixel of the input buffer, runs the fixed filter chain,
writes a new buffer and accumulates the sums of the filtered colour channels.
The border colour is derived from those sums once the pass has finished.
Nothing survives between passes: callers re-run the pipeline from the
untouched original every time a parameter changes.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, NamedTuple, Sequence

from ..errors import EmptyImageError
from .filters.algorithms import _float_to_channel
from .filters.filter_set import opacity, transform_rgb
from .filters.jit_executor import apply_filters
from .parameters import FilterParameters
from .pixel_buffer import PixelBuffer

_LOGGER = logging.getLogger(__name__)

_HEX_PATTERN = re.compile(r"^#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def _complement(mean: float) -> int:
    # Negative saturation can push channels outside [0, 255] before storage.
    return min(255, max(0, 255 - math.floor(mean)))


@dataclass(frozen=True)
class BorderColor:
    """Solid RGB colour used to paint the frame around the image."""

    red: int
    green: int
    blue: int

    @property
    def hex(self) -> str:
        """Return the colour as ``#rrggbb`` with two digits per channel."""

        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    @classmethod
    def from_hex(cls, value: str) -> "BorderColor":
        match = _HEX_PATTERN.match(value.strip())
        if match is None:
            raise ValueError(f"Expected a #rrggbb colour, got {value!r}")
        red, green, blue = (int(part, 16) for part in match.groups())
        return cls(red, green, blue)

    def __str__(self) -> str:
        return self.hex


@dataclass(frozen=True)
class AggregateStats:
    """Running sums of the filtered colour channels of one pass.

    The sums hold the channel values the filter chain produced, before they
    are rounded and clamped into the output buffer.
    """

    sum_r: float = 0.0
    sum_g: float = 0.0
    sum_b: float = 0.0
    count: int = 0

    def add(self, rgb: Sequence[float]) -> "AggregateStats":
        r, g, b = rgb
        return AggregateStats(self.sum_r + r, self.sum_g + g, self.sum_b + b, self.count + 1)

    def merge(self, other: "AggregateStats") -> "AggregateStats":
        """Combine two partial results; the order of merging does not matter."""

        return AggregateStats(
            self.sum_r + other.sum_r,
            self.sum_g + other.sum_g,
            self.sum_b + other.sum_b,
            self.count + other.count,
        )

    def border_color(self) -> BorderColor:
        """Return the complement of the mean colour.

        Raises :class:`EmptyImageError` when no pixel has been accumulated.
        """

        if self.count == 0:
            raise EmptyImageError("Cannot derive a border colour from zero pixels")
        return BorderColor(
            _complement(self.sum_r / self.count),
            _complement(self.sum_g / self.count),
            _complement(self.sum_b / self.count),
        )


class PipelineResult(NamedTuple):
    """Filtered pixels together with the border colour derived from them."""

    pixels: PixelBuffer
    border_color: BorderColor


def run(buffer: PixelBuffer | Any, params: FilterParameters) -> PipelineResult:
    """Apply the filter chain to every pixel of *buffer*.

    *buffer* is never modified.  Anything that is not a :class:`PixelBuffer`
    goes through :meth:`PixelBuffer.from_array` first, so malformed input fails
    with :class:`InvalidInputError` before any pixel is processed.
    """

    if not isinstance(buffer, PixelBuffer):
        buffer = PixelBuffer.from_array(buffer)

    _LOGGER.debug(
        "Filtering %dx%d pixels, active filters: %s",
        buffer.width,
        buffer.height,
        ", ".join(params.active_filters()) or "none",
    )
    data, sum_r, sum_g, sum_b = apply_filters(buffer.data, params)
    stats = AggregateStats(sum_r, sum_g, sum_b, buffer.pixel_count)
    pixels = PixelBuffer(data, buffer.width, buffer.height)
    return PipelineResult(pixels, stats.border_color())


def transform_pixel(rgba: Sequence[int], params: FilterParameters) -> tuple[int, int, int, int]:
    """Return the RGBA quad that :func:`run` writes for a single input pixel."""

    r, g, b, a = rgba
    fr, fg, fb = transform_rgb((r, g, b), params)
    return (
        _float_to_channel(fr),
        _float_to_channel(fg),
        _float_to_channel(fb),
        _float_to_channel(opacity(float(a), params)),
    )


__all__ = [
    "AggregateStats",
    "BorderColor",
    "PipelineResult",
    "run",
    "transform_pixel",
]
