"""Tests for the RGB/HSL conversions."""

import pytest

from imgfx.core.color_space import hsl_to_rgb, rgb_to_hsl


def test_primary_red():
    assert rgb_to_hsl(255.0, 0.0, 0.0) == pytest.approx((0.0, 1.0, 0.5))


def test_primary_green_hue_is_one_third():
    h, s, l = rgb_to_hsl(0.0, 255.0, 0.0)
    assert h == pytest.approx(1.0 / 3.0)
    assert s == pytest.approx(1.0)
    assert l == pytest.approx(0.5)


def test_achromatic_branch_has_no_hue_or_saturation():
    h, s, l = rgb_to_hsl(128.0, 128.0, 128.0)
    assert h == 0.0
    assert s == 0.0
    assert l == pytest.approx(128.0 / 255.0)


def test_red_wins_ties_for_maximum():
    # Yellow: red and green share the maximum, red's branch is used.
    h, _, _ = rgb_to_hsl(255.0, 255.0, 0.0)
    assert h == pytest.approx(1.0 / 6.0)

    # Magenta: green < blue adds a full turn before dividing by six.
    h, _, _ = rgb_to_hsl(255.0, 0.0, 255.0)
    assert h == pytest.approx(5.0 / 6.0)


def test_bright_colours_use_upper_saturation_formula():
    h, s, l = rgb_to_hsl(255.0, 200.0, 200.0)
    assert l > 0.5
    high, low = 1.0, 200.0 / 255.0
    assert s == pytest.approx((high - low) / (2.0 - high - low))
    assert h == 0.0


def test_hsl_to_rgb_achromatic_short_circuit():
    assert hsl_to_rgb(0.7, 0.0, 0.5) == pytest.approx((127.5, 127.5, 127.5))


def test_hsl_to_rgb_red():
    assert hsl_to_rgb(0.0, 1.0, 0.5) == pytest.approx((255.0, 0.0, 0.0), abs=1e-9)


def test_round_trip_reproduces_rgb():
    steps = range(0, 256, 51)
    for r in steps:
        for g in steps:
            for b in steps:
                rgb = hsl_to_rgb(*rgb_to_hsl(float(r), float(g), float(b)))
                assert rgb == pytest.approx((r, g, b), abs=1e-6), (r, g, b)


def test_round_trip_off_grid_colours():
    for rgb in [(1.0, 2.0, 3.0), (254.0, 17.0, 99.0), (12.0, 250.0, 133.0), (77.0, 77.0, 78.0)]:
        assert hsl_to_rgb(*rgb_to_hsl(*rgb)) == pytest.approx(rgb, abs=1e-6)
