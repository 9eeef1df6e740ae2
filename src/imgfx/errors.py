"""Exception hierarchy shared by the imgfx packages."""

from __future__ import annotations


class ImgFxError(Exception):
    """Base class for all errors raised by imgfx."""


class InvalidInputError(ImgFxError, ValueError):
    """Raised when a pixel buffer is empty or its shape does not add up."""


class InvalidParameterError(ImgFxError, ValueError):
    """Raised for unknown filter names or values that are not finite numbers."""


class EmptyImageError(ImgFxError, ZeroDivisionError):
    """Raised when aggregate statistics are finalised without any pixels."""


class ImageLoadError(ImgFxError):
    """Raised when an image file cannot be decoded."""


class ExportError(ImgFxError):
    """Raised when the presented surface cannot be written to disk."""


class PresetInvalidError(ImgFxError):
    """Raised when a preset file is missing or malformed."""
