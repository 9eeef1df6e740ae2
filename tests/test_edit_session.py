"""Tests for the editing session that re-renders from the original."""

from imgfx.core.edit_session import EditSession
from imgfx.core.parameters import FilterParameters
from imgfx.core.pipeline import BorderColor, run
from imgfx.core.pixel_buffer import PixelBuffer
from imgfx.core.presentation import qimage_to_buffer


def _session() -> EditSession:
    return EditSession(PixelBuffer.filled(12, 8, (100, 150, 200, 255)), max_border=8 / 3)


def test_rendering_never_accumulates(qapp) -> None:
    session = _session()
    session.set_value("invert", 1.0)
    session.set_value("invert", 1.0)
    assert qimage_to_buffer(session.surface).pixel(0, 0) == (155, 105, 55, 255)

    session.set_value("invert", 0.0)
    assert qimage_to_buffer(session.surface) == session.original


def test_original_is_never_modified(qapp) -> None:
    session = _session()
    before = session.original.data.copy()
    session.update({"brightness": 1.5, "sepia": 0.7, "border": 2.0})
    assert (session.original.data == before).all()


def test_update_and_reset(qapp) -> None:
    session = _session()
    session.update({"hue": 90.0, "contrast": 1.3})
    assert session.params.active_filters() == ("contrast", "hue")

    session.reset()
    assert session.params.active_filters() == ()
    assert qimage_to_buffer(session.surface) == session.original


def test_border_colour_follows_last_render(qapp) -> None:
    session = _session()
    assert session.border_color is None
    session.render()
    assert session.border_color == run(session.original, session.params).border_color
    assert session.max_border == 8 / 3


def test_captions_are_drawn_onto_a_copy(qapp) -> None:
    session = _session()
    session.set_caption("TOP", "")
    assert session.source_buffer() != session.original
    assert session.original == PixelBuffer.filled(12, 8, (100, 150, 200, 255))

    session.set_caption("", "")
    assert session.source_buffer() is session.original


def test_export_renders_when_needed(qapp, tmp_path) -> None:
    session = _session()
    target = session.export(tmp_path / "out.png")
    assert target.exists()
    assert session.surface is not None


def test_stale_jobs_are_discarded(qapp) -> None:
    session = _session()
    first = session.begin_job()
    second = session.begin_job()
    assert not session.is_current(first)
    assert session.is_current(second)

    surface = session.render()
    rendered = session.border_color
    assert not session.accept(first, surface, BorderColor(1, 2, 3))
    assert session.border_color == rendered

    assert session.accept(second, surface, BorderColor(1, 2, 3))
    assert session.border_color == BorderColor(1, 2, 3)


def test_border_is_capped_at_the_maximum(qapp) -> None:
    session = _session()
    session.set_value("border", 10.0)
    assert session.params.value("border") == 8 / 3

    session.update({"border": 1.5, "invert": 1.0})
    assert session.params.value("border") == 1.5


def test_initial_parameters_are_capped(qapp) -> None:
    params = FilterParameters().with_value("border", 50.0)
    session = EditSession(PixelBuffer.filled(6, 6, (0, 0, 0, 255)), params, max_border=2.0)
    assert session.params.value("border") == 2.0


def test_border_is_unbounded_without_a_maximum(qapp) -> None:
    session = EditSession(PixelBuffer.filled(6, 6, (0, 0, 0, 255)))
    session.set_value("border", 40.0)
    assert session.params.value("border") == 40.0
