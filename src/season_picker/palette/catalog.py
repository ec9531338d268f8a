# catalog.py
# Read-only, ordered mapping of palette name -> reference ColorSamples,
# paired with the fill color each palette's region is drawn in.

from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, Optional, Sequence, Tuple

import numpy as np

from season_picker.errors import EmptyCatalogError, PaletteError
from season_picker.palette.colors import ColorSample
from season_picker.palette.seasonal_palettes import SEASONS

logger = logging.getLogger(__name__)

RGBA = Tuple[int, int, int, int]

# Fallback fill colors for catalogs built without explicit display colors.
DEFAULT_FILL_COLORS: Tuple[RGBA, ...] = (
    (230, 25, 75, 255),
    (60, 180, 75, 255),
    (255, 225, 25, 255),
    (0, 130, 200, 255),
    (245, 130, 48, 255),
    (145, 30, 180, 255),
    (70, 240, 240, 255),
    (240, 50, 230, 255),
    (210, 245, 60, 255),
    (250, 190, 212, 255),
    (0, 128, 128, 255),
    (170, 110, 40, 255),
)


def to_rgba(color: Sequence[int], what: str = "color") -> RGBA:
    """RGB or RGBA -> RGBA; RGB becomes opaque."""
    rgba = tuple(int(v) for v in color)
    if len(rgba) == 3:
        rgba = rgba + (255,)
    if len(rgba) != 4 or not all(0 <= v <= 255 for v in rgba):
        raise PaletteError(f"{what} must be RGB or RGBA in 0..255, got {tuple(color)}")
    return rgba


class PaletteCatalog(Mapping):
    """
    Fixed palette table. Iteration order is construction order, which is
    also the tie-break order used by the classifier.
    """

    def __init__(
        self,
        palettes: Mapping[str, Iterable[ColorSample]],
        display_colors: Optional[Mapping[str, Sequence[int]]] = None,
    ):
        self._palettes: Dict[str, Tuple[ColorSample, ...]] = {
            name: tuple(colors) for name, colors in palettes.items()
        }
        if not self._palettes:
            raise EmptyCatalogError("catalog needs at least one palette")
        for name, colors in self._palettes.items():
            if not colors:
                raise EmptyCatalogError(f"palette {name!r} has no reference colors")

        self._display = self._resolve_display_colors(display_colors)
        self.names: Tuple[str, ...] = tuple(self._palettes)

        # Flattened (K, 3) reference table in scan order, plus owning palette index per row.
        refs = [(c.hue, c.saturation, c.lightness) for colors in self._palettes.values() for c in colors]
        owners = [i for i, colors in enumerate(self._palettes.values()) for _ in colors]
        self.references = np.array(refs, dtype=np.float64)
        self.owners = np.array(owners, dtype=np.intp)
        self.references.setflags(write=False)
        self.owners.setflags(write=False)

        logger.debug("Catalog built: %d palettes, %d reference colors", len(self.names), len(refs))

    def _resolve_display_colors(self, display_colors) -> Dict[str, RGBA]:
        if display_colors is None:
            # Palettes past the default table get no fill; only rasterizing needs one.
            return {name: DEFAULT_FILL_COLORS[i] for i, name in zip(range(len(DEFAULT_FILL_COLORS)), self._palettes)}

        resolved = {}
        for name in self._palettes:
            if name not in display_colors:
                raise PaletteError(f"no display color for palette {name!r}")
            resolved[name] = to_rgba(display_colors[name], f"display color for {name!r}")
        if len(set(resolved.values())) != len(resolved):
            raise PaletteError("display colors must be distinct per palette")
        return resolved

    # Mapping protocol
    def __getitem__(self, name: str) -> Tuple[ColorSample, ...]:
        return self._palettes[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._palettes)

    def __len__(self) -> int:
        return len(self._palettes)

    def __repr__(self) -> str:
        return f"PaletteCatalog({list(self.names)})"

    def display_color(self, name: str) -> RGBA:
        if name not in self._display:
            if name not in self._palettes:
                raise KeyError(name)
            raise PaletteError(
                f"no fill color for palette {name!r}: {len(self._palettes)} palettes but only "
                f"{len(DEFAULT_FILL_COLORS)} default fill colors; pass display_colors explicitly"
            )
        return self._display[name]

    def fill_table(self, names: Optional[Sequence[str]] = None) -> np.ndarray:
        """(len(names), 4) uint8 lookup table indexed by label position; defaults to catalog order."""
        names = self.names if names is None else names
        return np.array([self.display_color(n) for n in names], dtype=np.uint8)


def default_catalog() -> PaletteCatalog:
    """The six seasonal palettes, in their tie-break order."""
    return PaletteCatalog(
        {season.name: season.palette for season in SEASONS},
        {season.name: season.display_color for season in SEASONS},
    )


def as_catalog(palettes: Mapping[str, Iterable[ColorSample]]) -> PaletteCatalog:
    """Wrap a plain name -> colors mapping; PaletteCatalog instances pass through."""
    if isinstance(palettes, PaletteCatalog):
        return palettes
    return PaletteCatalog(palettes)
