"""Tests for moving pixels onto ``QImage`` surfaces and exporting them."""

import numpy as np
import pytest
from PIL import Image
from PySide6.QtGui import QColor, QImage

from imgfx.core.parameters import FilterParameters
from imgfx.core.pipeline import run
from imgfx.core.pixel_buffer import PixelBuffer
from imgfx.core.presentation import (
    buffer_to_qimage,
    export_surface,
    qimage_to_buffer,
    render_surface,
)
from imgfx.errors import ExportError, InvalidInputError


def test_qimage_round_trip(qapp) -> None:
    rng = np.random.default_rng(1)
    buffer = PixelBuffer.from_array(rng.integers(0, 256, size=(5, 3, 4), dtype=np.uint8))

    image = buffer_to_qimage(buffer)

    assert image.format() == QImage.Format.Format_RGBA8888
    assert (image.width(), image.height()) == (3, 5)
    assert qimage_to_buffer(image) == buffer


def test_qimage_to_buffer_converts_other_formats(qapp) -> None:
    image = QImage(3, 2, QImage.Format.Format_RGB888)
    image.fill(QColor("#102030"))
    buffer = qimage_to_buffer(image)
    assert buffer.pixel(2, 1) == (0x10, 0x20, 0x30, 255)


def test_null_image_is_rejected(qapp) -> None:
    with pytest.raises(InvalidInputError):
        qimage_to_buffer(QImage())


def test_render_surface_without_border_or_blur(qapp) -> None:
    buffer = PixelBuffer.filled(4, 4, (10, 20, 30, 255))
    params = FilterParameters()
    surface = render_surface(run(buffer, params), params)
    assert qimage_to_buffer(surface) == buffer


def test_render_surface_paints_the_border(qapp) -> None:
    buffer = PixelBuffer.filled(10, 10, (250, 250, 250, 255))
    params = FilterParameters().with_value("border", 2.0)
    surface = render_surface(run(buffer, params), params)
    assert surface.pixelColor(0, 0).name() == "#050505"
    assert surface.pixelColor(9, 9).name() == "#050505"
    assert surface.pixelColor(5, 5).name() == "#fafafa"


def test_render_surface_blurs_before_framing(qapp) -> None:
    buffer = PixelBuffer.filled(6, 6, (120, 60, 200, 255))
    params = FilterParameters().with_value("blur", 2.0)
    surface = render_surface(run(buffer, params), params)
    assert qimage_to_buffer(surface) == buffer


def test_export_surface_writes_png(qapp, tmp_path) -> None:
    surface = buffer_to_qimage(PixelBuffer.filled(7, 3, (1, 2, 3, 255)))
    target = export_surface(surface, tmp_path / "nested" / "out.png")
    assert target.exists()
    with Image.open(target) as image:
        assert image.size == (7, 3)
        assert image.convert("RGBA").getpixel((0, 0)) == (1, 2, 3, 255)


def test_export_null_surface_fails(qapp, tmp_path) -> None:
    with pytest.raises(ExportError):
        export_surface(QImage(), tmp_path / "out.png")
