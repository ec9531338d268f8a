"""Region grid -> RGBA pixels, with border pixels wherever neighbouring labels differ."""

from __future__ import annotations
from typing import Sequence

import cv2
import numpy as np

from season_picker.palette.catalog import PaletteCatalog, to_rgba
from season_picker.regions.grid import RegionGrid

BORDER_COLOR = (0, 0, 0, 255)

# up/left/right/down neighbourhood
_CROSS = cv2.getStructuringElement(cv2.MORPH_CROSS, (3, 3))


def border_mask(labels: np.ndarray) -> np.ndarray:
    """
    True where any existing 4-neighbour carries a different label.

    A cell differs from some neighbour iff the neighbourhood max or min
    (self included) differs from it. OpenCV's default constant border for
    dilate/erode never wins the max/min, so cells past the grid edge are
    ignored rather than counted as different.
    """
    src = np.ascontiguousarray(labels, dtype=np.uint16).copy()
    hi = cv2.dilate(src, _CROSS)
    lo = cv2.erode(src, _CROSS)
    return (hi != src) | (lo != src)


def rasterize(
    grid: RegionGrid,
    catalog: PaletteCatalog,
    border_color: Sequence[int] = BORDER_COLOR,
) -> np.ndarray:
    """(height, width, 4) uint8 image: each cell in its palette's fill color, or the border color."""
    border = np.asarray(to_rgba(border_color, "border color"), dtype=np.uint8)
    pixels = catalog.fill_table(grid.names)[grid.labels]
    pixels[border_mask(grid.labels)] = border
    return pixels
