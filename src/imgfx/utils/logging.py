"""Logging helpers for imgfx."""

from __future__ import annotations

import logging
from typing import Optional

from ..config import LOG_FORMAT

_LOGGER: Optional[logging.Logger] = None


def get_logger() -> logging.Logger:
    """Return a package-level logger configured for imgfx."""

    global _LOGGER
    if _LOGGER is None:
        _LOGGER = logging.getLogger("imgfx")
        if not _LOGGER.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(LOG_FORMAT)
            handler.setFormatter(formatter)
            _LOGGER.addHandler(handler)
        _LOGGER.setLevel(logging.INFO)
    return _LOGGER
