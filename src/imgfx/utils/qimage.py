"""Helpers for reading and writing ``QImage`` pixel memory."""

from __future__ import annotations

from PySide6.QtGui import QImage


def _resolve_pixel_buffer(image: QImage) -> tuple[memoryview, object]:
    """Return a 1-D unsigned byte :class:`memoryview` over *image*'s pixels.

    The tuple's second element is the object returned by ``QImage.bits()``.
    Callers keep it referenced for as long as they use the view; dropping it
    lets the wrapper owning the memory be collected while the view is still
    alive.
    """

    bytes_per_line = image.bytesPerLine()
    height = image.height()
    buffer = image.bits()
    expected_size = bytes_per_line * height

    guard: object = buffer

    if isinstance(buffer, memoryview):
        view = buffer
    else:
        try:
            view = memoryview(buffer)
        except TypeError:
            if hasattr(buffer, "setsize"):
                buffer.setsize(expected_size)
                view = memoryview(buffer)
            else:
                raise RuntimeError("Unsupported QImage.bits() buffer wrapper") from None

    try:
        view = view.cast("B")
    except TypeError:
        # Multi-dimensional views need the explicit shape argument.
        view = view.cast("B", (view.nbytes,))

    if len(view) > expected_size:
        view = view[:expected_size]

    return view, guard
