"""
Region grid: palette label per (saturation, lightness) cell at a fixed hue.

Columns map to saturation (left = 0%), rows map to lightness with row 0 at
the top (100%). Only up to 101 distinct levels exist per axis, so each
distinct (s, l) pair is classified once and broadcast back over the grid.
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from season_picker.errors import InvalidGridDimensionsError
from season_picker.palette.catalog import PaletteCatalog, as_catalog
from season_picker.regions.classifier import classify_levels

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegionGrid:
    hue: float
    labels: np.ndarray          # (height, width) palette positions into `names`
    names: Tuple[str, ...]

    @property
    def width(self) -> int:
        return int(self.labels.shape[1])

    @property
    def height(self) -> int:
        return int(self.labels.shape[0])

    def label_at(self, x: int, y: int) -> str:
        return self.names[int(self.labels[y, x])]

    @classmethod
    def from_names(cls, rows: Sequence[Sequence[str]], names: Sequence[str], hue: float = 0.0) -> "RegionGrid":
        """Build a grid directly from rows of palette names (row 0 = top)."""
        names = tuple(names)
        rows = [list(row) for row in rows]
        if not rows or not rows[0] or any(len(row) != len(rows[0]) for row in rows):
            raise InvalidGridDimensionsError("grid rows must be non-empty and of equal length")
        index = {n: i for i, n in enumerate(names)}
        labels = np.array([[index[n] for n in row] for row in rows], dtype=np.uint16)
        labels.setflags(write=False)
        return cls(hue=hue, labels=labels, names=names)


def check_dimensions(width, height) -> None:
    for label, v in (("width", width), ("height", height)):
        if isinstance(v, bool) or not isinstance(v, (int, np.integer)) or v <= 0:
            raise InvalidGridDimensionsError(f"{label} must be a positive integer, got {v!r}")


def round_half_up(v: np.ndarray) -> np.ndarray:
    return np.floor(v + 0.5)


def saturation_levels(width: int) -> np.ndarray:
    """Saturation per column: round(x / width * 100)."""
    return round_half_up(np.arange(width) / width * 100)


def lightness_levels(height: int) -> np.ndarray:
    """Lightness per row: round((1 - y / height) * 100); row 0 is the lightest."""
    return round_half_up((1 - np.arange(height) / height) * 100)


def build_grid(hue: float, width: int, height: int, catalog: PaletteCatalog) -> RegionGrid:
    check_dimensions(width, height)
    catalog = as_catalog(catalog)
    t0 = time.perf_counter()

    s_levels, s_index = np.unique(saturation_levels(width), return_inverse=True)
    l_levels, l_index = np.unique(lightness_levels(height), return_inverse=True)
    table = classify_levels(hue, s_levels, l_levels, catalog)

    labels = table[l_index.reshape(-1)[:, None], s_index.reshape(-1)[None, :]].astype(np.uint16)
    labels.setflags(write=False)

    logger.debug(
        "Region grid hue=%s %dx%d: %d levels classified in %.1f ms",
        hue, width, height, table.size, (time.perf_counter() - t0) * 1000.0,
    )
    return RegionGrid(hue=hue, labels=labels, names=catalog.names)
