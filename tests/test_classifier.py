"""Tests for nearest-palette classification."""

import numpy as np
import pytest

from season_picker.errors import EmptyCatalogError
from season_picker.palette.colors import ColorSample
from season_picker.regions.classifier import classify, classify_levels


class TestClassify:
    def test_warm_cool_end_to_end(self):
        """Plain dicts work as catalogs."""
        catalog = {"warm": [ColorSample(0, 100, 50)], "cool": [ColorSample(200, 100, 50)]}
        assert classify(ColorSample(10, 100, 50), catalog) == "warm"
        assert classify(ColorSample(190, 100, 50), catalog) == "cool"
        # 90^2 < 100^2
        assert classify(ColorSample(100, 100, 50), catalog) == "warm"

    def test_returns_catalog_name(self, seasons):
        rng = np.random.default_rng(7)
        for h, s, l in zip(rng.uniform(0, 360, 200), rng.uniform(0, 100, 200), rng.uniform(0, 100, 200)):
            assert classify(ColorSample(h, s, l), seasons) in seasons

    def test_deterministic(self, seasons):
        sample = ColorSample(123.4, 56.7, 89.0)
        assert classify(sample, seasons) == classify(sample, seasons)

    def test_exact_reference_matches_its_palette(self, seasons):
        assert classify(ColorSample.from_hex("FFD700"), seasons) == "summer"
        assert classify(ColorSample.from_hex("603C14"), seasons) == "autumn"

    def test_out_of_range_input_is_classified(self, warm_cool):
        assert classify(ColorSample(-500, 300, -20), warm_cool) == "warm"
        assert classify(ColorSample(9000, 0, 0), warm_cool) == "cool"

    def test_empty_catalog(self):
        with pytest.raises(EmptyCatalogError):
            classify(ColorSample(0, 0, 0), {})


class TestTieBreak:
    def test_first_palette_wins_exact_tie(self):
        probe = ColorSample(20, 50, 50)
        a = [ColorSample(10, 50, 50)]
        b = [ColorSample(30, 50, 50)]
        assert classify(probe, {"first": a, "second": b}) == "first"
        assert classify(probe, {"second": b, "first": a}) == "second"

    def test_tie_against_later_color_in_earlier_palette(self):
        """Ties are decided by palette order even when the earlier palette's match is its last color."""
        catalog = {
            "a": [ColorSample(0, 0, 0), ColorSample(50, 0, 0)],
            "b": [ColorSample(40, 0, 0)],
        }
        assert classify(ColorSample(45, 0, 0), catalog) == "a"

    def test_shared_reference_goes_to_earlier_season(self, seasons):
        # AB55A0 is in cool_winter and clear_winter, 2B2C2E in cool_winter and deep_winter
        assert classify(ColorSample.from_hex("AB55A0"), seasons) == "cool_winter"
        assert classify(ColorSample.from_hex("2B2C2E"), seasons) == "cool_winter"


class TestClassifyLevels:
    def test_matches_scalar_classify(self, seasons):
        sats = np.arange(0, 101, 5, dtype=np.float64)
        lights = np.arange(100, -1, -10, dtype=np.float64)
        for hue in (0, 45, 180, 271.5, 359):
            table = classify_levels(hue, sats, lights, seasons)
            assert table.shape == (len(lights), len(sats))
            for j, l in enumerate(lights):
                for i, s in enumerate(sats):
                    expected = classify(ColorSample(hue, s, l), seasons)
                    assert seasons.names[table[j, i]] == expected

    def test_tie_resolves_to_first_palette(self, warm_cool):
        # hue 100 is equidistant from warm (0) and cool (200)
        table = classify_levels(100, np.array([100.0]), np.array([50.0]), warm_cool)
        assert warm_cool.names[table[0, 0]] == "warm"
