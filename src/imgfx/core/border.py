"""Paint the solid frame around the presented image."""

from __future__ import annotations

from PySide6.QtCore import QRectF
from PySide6.QtGui import QColor, QImage, QPainter

from .parameters import FILTER_DEFAULTS
from .pipeline import BorderColor

Rect = tuple[float, float, float, float]


def border_rects(surface_width: float, surface_height: float, width: float) -> tuple[Rect, ...]:
    """Return the four ``(x, y, w, h)`` strips making up the frame.

    The bottom and right strips start at the border width and reach past the
    surface edge; the painter clips the overflow.  The strips overlap near the
    corners, which is the intended frame geometry.
    """

    return (
        (0.0, 0.0, float(surface_width), float(width)),
        (0.0, float(width), float(width), float(surface_height)),
        (float(width), float(surface_height - width), float(surface_width), float(surface_height)),
        (float(surface_width - width), float(width), float(surface_width), float(surface_height - width)),
    )


def draw_border(surface: QImage, width: float, color: BorderColor | str) -> None:
    """Fill the frame strips of *surface* with *color*.

    Nothing is painted when *width* equals the border default.
    """

    if width == FILTER_DEFAULTS["border"] or surface.isNull():
        return

    name = color.hex if isinstance(color, BorderColor) else str(color)
    fill = QColor(name)
    if not fill.isValid():
        raise ValueError(f"Invalid border colour: {name!r}")

    painter = QPainter(surface)
    try:
        for x, y, w, h in border_rects(surface.width(), surface.height(), width):
            painter.fillRect(QRectF(x, y, w, h), fill)
    finally:
        painter.end()


__all__ = ["border_rects", "draw_border"]
