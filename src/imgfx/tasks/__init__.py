"""Background workers used by interactive front ends."""

from .render_worker import FilterRenderSignals, FilterRenderWorker

__all__ = ["FilterRenderSignals", "FilterRenderWorker"]
