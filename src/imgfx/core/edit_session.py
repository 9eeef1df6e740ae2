"""Editing state for one image: the untouched original plus slider values."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from PySide6.QtGui import QImage

from ..io.caption import overlay_caption
from .parameters import FilterParameters
from .pipeline import BorderColor, run
from .pixel_buffer import PixelBuffer
from .presentation import export_surface, render_surface

_LOGGER = logging.getLogger(__name__)


class EditSession:
    """Re-render the whole image from the original whenever a value changes.

    The original buffer is never written to.  Each change runs a complete pass
    over the original (or over a captioned copy of it), so the result never
    depends on the previous output.
    """

    def __init__(
        self,
        original: PixelBuffer,
        params: FilterParameters | None = None,
        *,
        max_border: float | None = None,
    ) -> None:
        self._original = original
        self._max_border = max_border
        self._params = self._bounded(params if params is not None else FilterParameters())
        self._top_text = ""
        self._bottom_text = ""
        self._surface: QImage | None = None
        self._border_color: BorderColor | None = None
        self._job_id = 0

    # ------------------------------------------------------------------
    @property
    def original(self) -> PixelBuffer:
        return self._original

    @property
    def params(self) -> FilterParameters:
        return self._params

    @property
    def max_border(self) -> float | None:
        """Largest border width accepted for this image, when known.

        Wider values handed to :meth:`set_value` or :meth:`update` are capped.
        """

        return self._max_border

    @property
    def surface(self) -> QImage | None:
        """The most recently rendered surface, ``None`` before the first render."""

        return self._surface

    @property
    def border_color(self) -> BorderColor | None:
        return self._border_color

    # ------------------------------------------------------------------
    def set_value(self, name: str, value: Any) -> QImage:
        """Update one filter and re-render."""

        self._params = self._bounded(self._params.with_value(name, value))
        return self.render()

    def update(self, values: Mapping[str, Any]) -> QImage:
        """Apply several filter values at once and re-render a single time."""

        self._params = self._bounded(self._params.with_values(values))
        return self.render()

    def reset(self) -> QImage:
        """Return every filter to its default and re-render."""

        self._params = self._params.reset()
        return self.render()

    def set_caption(self, top_text: str = "", bottom_text: str = "") -> QImage:
        """Replace the captions drawn onto the original before filtering."""

        self._top_text = top_text
        self._bottom_text = bottom_text
        return self.render()

    def _bounded(self, params: FilterParameters) -> FilterParameters:
        if self._max_border is not None and params.value("border") > self._max_border:
            return params.with_value("border", self._max_border)
        return params

    def source_buffer(self) -> PixelBuffer:
        """Return the buffer the filter pass reads: the original plus captions."""

        if self._top_text.strip() or self._bottom_text.strip():
            return overlay_caption(self._original, self._top_text, self._bottom_text)
        return self._original

    def render(self) -> QImage:
        """Run a full pass and store the presented surface."""

        result = run(self.source_buffer(), self._params)
        surface = render_surface(result, self._params)
        self._surface = surface
        self._border_color = result.border_color
        _LOGGER.debug("Rendered surface, border colour %s", result.border_color.hex)
        return surface

    def export(self, path: Path | str | None = None) -> Path:
        """Write the current surface, rendering first if nothing was drawn yet."""

        surface = self._surface if self._surface is not None else self.render()
        return export_surface(surface, path)

    # ------------------------------------------------------------------
    def begin_job(self) -> int:
        """Return the identifier for a new background render.

        Only the newest job's result should be shown; see :meth:`is_current`.
        """

        self._job_id += 1
        return self._job_id

    def is_current(self, job_id: int) -> bool:
        """Return ``True`` if *job_id* belongs to the latest requested render."""

        return job_id == self._job_id

    def accept(self, job_id: int, surface: QImage, border_color: BorderColor) -> bool:
        """Adopt a background result unless a newer job has been requested."""

        if not self.is_current(job_id):
            _LOGGER.debug("Discarding stale render %d (latest is %d)", job_id, self._job_id)
            return False
        self._surface = surface
        self._border_color = border_color
        return True


__all__ = ["EditSession"]
