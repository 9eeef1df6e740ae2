"""Tests for decoding image files and fitting them to the display region."""

import numpy as np
import pytest

from imgfx.errors import ImageLoadError
from imgfx.io.loader import FitResult, fit_to_region, load_image


def test_landscape_is_limited_by_width() -> None:
    assert fit_to_region(2000, 1000, 1000, 800) == FitResult(900, 450, 150.0)


def test_portrait_is_limited_by_height() -> None:
    assert fit_to_region(1000, 2000, 1000, 800) == FitResult(360, 720, 120.0)


def test_square_is_treated_like_portrait() -> None:
    assert fit_to_region(500, 500, 400, 400) == FitResult(360, 360, 120.0)


def test_small_images_keep_their_size() -> None:
    fit = fit_to_region(100, 50, 1000, 800)
    assert (fit.width, fit.height) == (100, 50)
    assert fit.max_border == pytest.approx(50 / 3)


def test_landscape_only_checks_the_width() -> None:
    # Taller than the region allows, but the width fits, so nothing changes.
    assert fit_to_region(1000, 900, 2000, 500) == FitResult(1000, 900, 300.0)


def test_sizes_are_truncated() -> None:
    fit = fit_to_region(1000, 333, 500, 500)
    assert (fit.width, fit.height) == (450, 149)


def test_empty_image_is_rejected() -> None:
    with pytest.raises(ImageLoadError):
        fit_to_region(0, 10, 100, 100)


def test_load_image_returns_rgba_pixels(write_png) -> None:
    array = np.zeros((4, 6, 4), dtype=np.uint8)
    array[..., 0] = 200
    array[..., 3] = 255
    loaded = load_image(write_png(array))

    assert (loaded.buffer.width, loaded.buffer.height) == (6, 4)
    assert loaded.buffer.pixel(5, 3) == (200, 0, 0, 255)
    assert loaded.max_border == pytest.approx(4 / 3)


def test_load_image_fits_region(write_png) -> None:
    array = np.full((100, 200, 4), 255, dtype=np.uint8)
    loaded = load_image(write_png(array), region=(100, 100))

    assert (loaded.buffer.width, loaded.buffer.height) == (90, 45)
    assert loaded.max_border == pytest.approx(15.0)


def test_load_missing_file(tmp_path) -> None:
    with pytest.raises(ImageLoadError):
        load_image(tmp_path / "missing.png")


def test_load_non_image_file(tmp_path) -> None:
    path = tmp_path / "notes.png"
    path.write_text("not an image", encoding="utf-8")
    with pytest.raises(ImageLoadError):
        load_image(path)
