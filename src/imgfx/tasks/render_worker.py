"""Worker that runs a filter pass on a background thread."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QRunnable, Signal
from PySide6.QtGui import QImage

from ..core.parameters import FilterParameters
from ..core import pipeline
from ..core.pixel_buffer import PixelBuffer
from ..core.presentation import render_surface

_LOGGER = logging.getLogger(__name__)


class FilterRenderSignals(QObject):
    """Signals emitted by :class:`FilterRenderWorker`."""

    finished = Signal(QImage, str, int)
    """Emitted with the rendered surface, the border colour and the job identifier."""

    error = Signal(int, str)
    """Emitted with the job identifier when the pass fails."""


class FilterRenderWorker(QRunnable):
    """Render *source* with *params* off the GUI thread.

    The worker only produces a finished surface; the receiver decides through
    :meth:`EditSession.accept` whether the job is still current, so a stale
    result is dropped as a whole.
    """

    def __init__(self, source: PixelBuffer, params: FilterParameters, job_id: int) -> None:
        super().__init__()
        self._source = source
        self._params = params
        self._job_id = job_id
        self.signals = FilterRenderSignals()

    @property
    def job_id(self) -> int:
        return self._job_id

    def run(self) -> None:  # type: ignore[override]
        """Filter the source and notify listeners when done."""

        try:
            result = pipeline.run(self._source, self._params)
            surface = render_surface(result, self._params)
        except Exception as exc:
            _LOGGER.exception("Filter render %d failed", self._job_id)
            self.signals.error.emit(self._job_id, str(exc))
            return
        self.signals.finished.emit(surface, result.border_color.hex, self._job_id)


__all__ = ["FilterRenderSignals", "FilterRenderWorker"]
