"""Tests for ColorSample and the color-space helpers."""

import dataclasses

import pytest

from season_picker.palette.colors import (
    ColorSample,
    distance_squared,
    hex_to_rgb,
    hsl_to_rgb,
    rgb_to_hsl,
)


class TestHexToRgb:
    def test_with_and_without_hash(self):
        assert hex_to_rgb("#FF5733") == (255, 87, 51)
        assert hex_to_rgb("FF5733") == (255, 87, 51)

    def test_lowercase(self):
        assert hex_to_rgb("2b2c2e") == (43, 44, 46)

    def test_wrong_length_rejected(self):
        with pytest.raises(ValueError):
            hex_to_rgb("FFF")


class TestRgbToHsl:
    def test_primaries(self):
        assert rgb_to_hsl(255, 0, 0) == (0.0, 100.0, 50.0)
        assert rgb_to_hsl(0, 255, 0) == pytest.approx((120.0, 100.0, 50.0))
        assert rgb_to_hsl(0, 0, 255) == pytest.approx((240.0, 100.0, 50.0))

    def test_achromatic_has_zero_hue_and_saturation(self):
        h, s, l = rgb_to_hsl(128, 128, 128)
        assert (h, s) == (0.0, 0.0)
        assert l == pytest.approx(50.196, abs=1e-3)

    def test_red_sector_wraps_when_green_below_blue(self):
        """Magenta-leaning reds land near 330, not at a negative hue."""
        h, s, l = rgb_to_hsl(255, 0, 128)
        assert h == pytest.approx(329.88, abs=0.01)

    def test_light_colors_use_upper_saturation_formula(self):
        # l > 0.5 branch: s = d / (2 - max - min)
        h, s, l = rgb_to_hsl(255, 128, 128)
        assert l > 50
        assert s == pytest.approx(100.0)

    def test_from_hex(self):
        c = ColorSample.from_hex("FFD700")
        assert c.hue == pytest.approx(50.588, abs=1e-3)
        assert c.saturation == pytest.approx(100.0)
        assert c.lightness == pytest.approx(50.0)


class TestHslToRgb:
    def test_primaries(self):
        assert hsl_to_rgb(0, 100, 50) == (255, 0, 0)
        assert hsl_to_rgb(240, 100, 50) == (0, 0, 255)

    def test_grays(self):
        assert hsl_to_rgb(123, 0, 100) == (255, 255, 255)
        assert hsl_to_rgb(0, 0, 0) == (0, 0, 0)

    def test_out_of_range_clamped_for_display(self):
        assert hsl_to_rgb(0, 150, 50) == (255, 0, 0)
        assert hsl_to_rgb(360, 100, 50) == (255, 0, 0)

    def test_roundtrip_through_hex(self):
        for hex_code in ("2C816A", "F3A8BC", "603C14"):
            assert ColorSample.from_hex(hex_code).to_rgb() == hex_to_rgb(hex_code)


class TestColorSample:
    def test_css(self):
        assert ColorSample(180, 50, 50).css() == "hsl(180, 50%, 50%)"
        assert ColorSample(10.5, 20.0, 30).css() == "hsl(10.5, 20%, 30%)"

    def test_immutable(self):
        c = ColorSample(1, 2, 3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.hue = 5

    def test_structural_equality(self):
        assert ColorSample(1, 2, 3) == ColorSample(1.0, 2.0, 3.0)
        assert hash(ColorSample(1, 2, 3)) == hash(ColorSample(1, 2, 3))


class TestDistance:
    def test_raw_axes_no_hue_wrap(self):
        """359 and 1 are far apart: hue is compared linearly, not on a circle."""
        assert distance_squared(ColorSample(359, 0, 0), ColorSample(1, 0, 0)) == 358 ** 2

    def test_sum_of_squares(self):
        a = ColorSample(0, 100, 50)
        b = ColorSample(100, 90, 45)
        assert distance_squared(a, b) == 100 ** 2 + 10 ** 2 + 5 ** 2

    def test_symmetric(self):
        a, b = ColorSample(12.5, 3, 90), ColorSample(300, 40, 2)
        assert distance_squared(a, b) == distance_squared(b, a)
