"""Move filtered pixels onto a ``QImage`` surface and export it."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PySide6.QtGui import QImage

from ..config import DEFAULT_EXPORT_NAME
from ..errors import ExportError, InvalidInputError
from ..utils.qimage import _resolve_pixel_buffer
from .blur import blur_pixels
from .border import draw_border
from .parameters import FilterParameters
from .pipeline import PipelineResult
from .pixel_buffer import PixelBuffer

_LOGGER = logging.getLogger(__name__)


def buffer_to_qimage(buffer: PixelBuffer) -> QImage:
    """Return a new ``Format_RGBA8888`` image holding a copy of *buffer*."""

    raw = buffer.tobytes()
    image = QImage(raw, buffer.width, buffer.height, buffer.width * 4, QImage.Format.Format_RGBA8888)
    # ``QImage`` only borrows *raw*; ``copy`` detaches it into Qt-owned memory.
    return image.copy()


def qimage_to_buffer(image: QImage) -> PixelBuffer:
    """Read *image* into a :class:`PixelBuffer`, dropping any scan-line padding."""

    if image.isNull():
        raise InvalidInputError("Cannot read pixels from a null image")
    if image.format() != QImage.Format.Format_RGBA8888:
        image = image.convertToFormat(QImage.Format.Format_RGBA8888)

    width = image.width()
    height = image.height()
    bytes_per_line = image.bytesPerLine()
    view, guard = _resolve_pixel_buffer(image)
    _ = guard

    surface = np.frombuffer(view, dtype=np.uint8, count=bytes_per_line * height)
    rows = surface.reshape((height, bytes_per_line))[:, : width * 4]
    return PixelBuffer.from_array(rows.reshape((height, width, 4)))


def render_surface(result: PipelineResult, params: FilterParameters) -> QImage:
    """Blur, place and frame the filtered pixels of *result*.

    The pixels replace the surface content at ``(0, 0)`` rather than being
    blended over it; the border is painted afterwards when active.
    """

    pixels = result.pixels
    radius = params.blur_radius()
    if radius > 0:
        pixels = blur_pixels(pixels, radius)

    surface = buffer_to_qimage(pixels)
    if params.is_active("border"):
        draw_border(surface, params.border_width(), result.border_color)
    return surface


def export_surface(surface: QImage, path: Path | str | None = None) -> Path:
    """Write *surface* to *path*; the format follows the file suffix."""

    target = Path(path) if path is not None else Path(DEFAULT_EXPORT_NAME)
    if surface.isNull():
        raise ExportError("Nothing to export: the surface is empty")
    target.parent.mkdir(parents=True, exist_ok=True)
    if not surface.save(str(target)):
        raise ExportError(f"Failed to write image to {target}")
    _LOGGER.info("Exported %dx%d image to %s", surface.width(), surface.height(), target)
    return target


__all__ = [
    "buffer_to_qimage",
    "export_surface",
    "qimage_to_buffer",
    "render_surface",
]
