"""Shared fixtures for season_picker tests."""

import pytest

from season_picker.palette.catalog import PaletteCatalog, default_catalog
from season_picker.palette.colors import ColorSample


@pytest.fixture
def warm_cool():
    """Two single-color palettes a hue apart: warm at 0 degrees, cool at 200."""
    return PaletteCatalog(
        {
            "warm": [ColorSample(0, 100, 50)],
            "cool": [ColorSample(200, 100, 50)],
        },
        {"warm": (220, 80, 40, 255), "cool": (40, 90, 220, 255)},
    )


@pytest.fixture(scope="session")
def seasons():
    return default_catalog()
