"""imgfx: a composable chain of per-pixel colour filters for raster images."""

from __future__ import annotations

__version__ = "1.0.0"
