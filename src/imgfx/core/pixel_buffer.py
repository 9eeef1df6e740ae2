"""Validated RGBA pixel storage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from ..errors import InvalidInputError


def _as_uint8(data: Any) -> np.ndarray:
    """Return *data* as a new ``uint8`` array, rejecting values outside a byte."""

    try:
        values = np.asarray(data)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Cannot interpret pixel data: {exc}") from exc

    if values.dtype == np.uint8:
        return values.copy()
    if values.size == 0:
        return values.astype(np.uint8)
    if values.dtype.kind not in "iu":
        raise InvalidInputError(f"Pixel data must hold integers, got dtype {values.dtype}")
    if values.min() < 0 or values.max() > 255:
        raise InvalidInputError("Pixel values must lie within [0, 255]")
    return values.astype(np.uint8)


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """Row-major RGBA pixels with 8-bit channels.

    ``data`` is a flat, read-only ``uint8`` array of ``width * height * 4``
    entries.  The buffer owns its memory: constructing one copies the input, so
    the array handed in by the caller can change without affecting it.
    """

    data: np.ndarray
    width: int
    height: int

    def __post_init__(self) -> None:
        width = self.width
        height = self.height
        if isinstance(width, bool) or isinstance(height, bool):
            raise InvalidInputError("Image dimensions must be integers")
        if int(width) != width or int(height) != height:
            raise InvalidInputError(f"Image dimensions must be integers, got {width}x{height}")
        if width <= 0 or height <= 0:
            raise InvalidInputError(f"Image dimensions must be positive, got {width}x{height}")

        data = _as_uint8(self.data).reshape(-1)
        if data.size == 0:
            raise InvalidInputError("Pixel buffer is empty")
        if data.size % 4:
            raise InvalidInputError(
                f"Pixel buffer length {data.size} is not a multiple of 4"
            )
        expected = int(width) * int(height) * 4
        if data.size != expected:
            raise InvalidInputError(
                f"Pixel buffer length {data.size} does not match {width}x{height}x4 = {expected}"
            )
        data.setflags(write=False)
        object.__setattr__(self, "data", data)
        object.__setattr__(self, "width", int(width))
        object.__setattr__(self, "height", int(height))

    @classmethod
    def from_array(
        cls,
        array: Any,
        width: int | None = None,
        height: int | None = None,
    ) -> "PixelBuffer":
        """Build a buffer from an ``(H, W, 4)`` array or a flat sequence.

        Flat input needs explicit *width* and *height*.  Values must be integers
        in ``[0, 255]``.
        """

        if isinstance(array, PixelBuffer):
            return array
        values = _as_uint8(array)
        if width is None or height is None:
            if values.ndim != 3 or values.shape[2] != 4:
                raise InvalidInputError(
                    f"Expected an (H, W, 4) array when no dimensions are given, got {values.shape}"
                )
            height, width = values.shape[0], values.shape[1]
        return cls(values, width, height)

    @classmethod
    def filled(cls, width: int, height: int, rgba: Sequence[int]) -> "PixelBuffer":
        """Return a buffer where every pixel equals *rgba*."""

        if width <= 0 or height <= 0:
            raise InvalidInputError(f"Image dimensions must be positive, got {width}x{height}")
        pixel = np.asarray(rgba)
        if pixel.shape != (4,):
            raise InvalidInputError(f"Expected one RGBA quad, got {rgba!r}")
        return cls.from_array(np.tile(pixel, width * height), width, height)

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def as_array(self) -> np.ndarray:
        """Return a read-only ``(H, W, 4)`` view of the pixels."""

        return self.data.reshape((self.height, self.width, 4))

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return the RGBA quad at column *x*, row *y*."""

        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height}")
        offset = (y * self.width + x) * 4
        r, g, b, a = self.data[offset : offset + 4]
        return int(r), int(g), int(b), int(a)

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.data, self.width, self.height)

    def tobytes(self) -> bytes:
        return self.data.tobytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and bool(np.array_equal(self.data, other.data))
        )

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return self.pixel_count


__all__ = ["PixelBuffer"]
