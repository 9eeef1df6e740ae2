"""Decode image files into pixel buffers sized for the display region."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..config import BORDER_MAX_DIVISOR, DISPLAY_FIT_RATIO
from ..core.pixel_buffer import PixelBuffer
from ..errors import ImageLoadError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class FitResult:
    """Display size of an image and the largest border it accepts."""

    width: int
    height: int
    max_border: float


@dataclass(frozen=True)
class LoadedImage:
    """Decoded pixels ready to be used as the untouched original."""

    buffer: PixelBuffer
    max_border: float


def fit_to_region(
    image_width: float,
    image_height: float,
    region_width: float,
    region_height: float,
    ratio: float = DISPLAY_FIT_RATIO,
) -> FitResult:
    """Scale an image so it fits inside *ratio* of the display region.

    Only the dominant side is checked: a landscape image is limited by the
    maximum width, anything else by the maximum height.  Images that already
    fit keep their size.  The maximum border is a third of the remaining
    short side.
    """

    if image_width <= 0 or image_height <= 0:
        raise ImageLoadError(f"Image has no pixels ({image_width}x{image_height})")

    max_width = region_width * ratio
    max_height = region_height * ratio
    width = float(image_width)
    height = float(image_height)

    if width > height:
        if width > max_width:
            height *= max_width / width
            width = max_width
        max_border = height / BORDER_MAX_DIVISOR
    else:
        if height > max_height:
            width *= max_height / height
            height = max_height
        max_border = width / BORDER_MAX_DIVISOR

    return FitResult(max(1, int(width)), max(1, int(height)), max_border)


def load_image(path: Path | str, region: tuple[float, float] | None = None) -> LoadedImage:
    """Decode *path* into RGBA pixels, resized to fit *region* when given."""

    source = Path(path)
    try:
        with Image.open(source) as handle:
            image = handle.convert("RGBA")
    except (FileNotFoundError, UnidentifiedImageError, OSError) as exc:
        raise ImageLoadError(f"Cannot read image {source}: {exc}") from exc

    if region is not None:
        fit = fit_to_region(image.width, image.height, region[0], region[1])
        if (fit.width, fit.height) != image.size:
            image = image.resize((fit.width, fit.height), Image.Resampling.BILINEAR)
        max_border = fit.max_border
    else:
        max_border = min(image.width, image.height) / BORDER_MAX_DIVISOR

    _LOGGER.info("Loaded %s (%dx%d)", source.name, image.width, image.height)
    buffer = PixelBuffer.from_array(np.asarray(image, dtype=np.uint8))
    return LoadedImage(buffer, max_border)


__all__ = ["FitResult", "LoadedImage", "fit_to_region", "load_image"]
