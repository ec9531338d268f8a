"""
Nearest-palette classification.

Palettes are scanned in catalog order and reference colors in list order;
a candidate replaces the current best only when strictly closer, so the
first palette to reach the minimum distance wins ties. The vectorized
level classifier relies on np.argmin returning the first minimum, which
gives the same answer for the same scan order.
"""

from __future__ import annotations
from typing import Iterable, Mapping

import numpy as np

from season_picker.errors import EmptyCatalogError
from season_picker.palette.catalog import PaletteCatalog
from season_picker.palette.colors import ColorSample, distance_squared


def classify(sample: ColorSample, catalog: Mapping[str, Iterable[ColorSample]]) -> str:
    """Return the name of the palette holding the reference color nearest to `sample`."""
    best_name = None
    best_dist = float("inf")
    for name, colors in catalog.items():
        for ref in colors:
            d = distance_squared(sample, ref)
            if d < best_dist:
                best_dist = d
                best_name = name
    if best_name is None:
        raise EmptyCatalogError("cannot classify against an empty catalog")
    return best_name


def classify_levels(
    hue: float,
    saturations: np.ndarray,
    lightnesses: np.ndarray,
    catalog: PaletteCatalog,
) -> np.ndarray:
    """
    Classify every (saturation, lightness) pair at a fixed hue.

    Returns an int array of shape (len(lightnesses), len(saturations)) holding
    palette positions in catalog.names. Same arithmetic as distance_squared,
    evaluated in the same order, so results match classify() exactly.
    """
    refs = catalog.references
    dh2 = (hue - refs[:, 0]) ** 2                                                   # (K,)
    ds2 = (np.asarray(saturations, dtype=np.float64)[:, None] - refs[None, :, 1]) ** 2  # (S, K)
    dl2 = (np.asarray(lightnesses, dtype=np.float64)[:, None] - refs[None, :, 2]) ** 2  # (L, K)

    dist = (dh2[None, None, :] + ds2[None, :, :]) + dl2[:, None, :]  # (L, S, K)
    nearest = np.argmin(dist, axis=-1)
    return catalog.owners[nearest]
