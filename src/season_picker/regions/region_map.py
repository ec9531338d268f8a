"""
Hue-keyed region map images.

RegionMap is the entry point the picker UI uses: it returns the rasterized
palette-region image for a hue at the configured resolution, computing it
once per hue and serving later requests from HueImageCache.
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass, replace
from typing import Callable, Dict, Optional, Tuple

import numpy as np
from PIL import Image

from season_picker.palette.catalog import PaletteCatalog, default_catalog, to_rgba
from season_picker.regions.grid import build_grid, check_dimensions
from season_picker.regions.rasterizer import BORDER_COLOR, rasterize

logger = logging.getLogger(__name__)

_NAN_KEY = float("nan")


# ----------------------- Config -----------------------

@dataclass
class RegionMapConfig:
    width: int = 580                                           # saturation axis, px
    height: int = 580                                          # lightness axis, px
    border_color: Tuple[int, int, int, int] = BORDER_COLOR     # drawn between regions


# ----------------------- Cache -----------------------

class HueImageCache:
    """
    Append-only hue -> image store. Keys compare by exact value, so 10 and
    10.001 are separate entries. Hue is bounded to 0..359 by the picker,
    which bounds the cache; nothing is evicted. Every NaN hue shares one entry.
    """

    def __init__(self, render: Callable[[float], np.ndarray]):
        self._render = render
        self._images: Dict[float, np.ndarray] = {}
        self.hits = 0
        self.misses = 0

    @staticmethod
    def _key(hue: float) -> float:
        # NaN != NaN; one shared object lets dict identity matching find it
        return _NAN_KEY if hue != hue else hue

    def get_image(self, hue: float) -> np.ndarray:
        key = self._key(hue)
        image = self._images.get(key)
        if image is not None:
            self.hits += 1
            return image

        self.misses += 1
        t0 = time.perf_counter()
        image = self._render(hue)
        image.setflags(write=False)
        self._images[key] = image
        logger.debug("Region image for hue=%s rendered in %.1f ms", hue, (time.perf_counter() - t0) * 1000.0)
        return image

    def invalidate_all(self) -> None:
        self._images.clear()

    def __contains__(self, hue: float) -> bool:
        return self._key(hue) in self._images

    def __len__(self) -> int:
        return len(self._images)


# ----------------------- Facade -----------------------

class RegionMap:
    def __init__(self, catalog: Optional[PaletteCatalog] = None, config: Optional[RegionMapConfig] = None):
        self.catalog = catalog if catalog is not None else default_catalog()
        cfg = config or RegionMapConfig()
        check_dimensions(cfg.width, cfg.height)
        self.cfg = replace(cfg, border_color=to_rgba(cfg.border_color, "border color"))
        self._size = (self.cfg.width, self.cfg.height)
        self.cache = HueImageCache(self._render)

    def _render(self, hue: float) -> np.ndarray:
        width, height = self._size
        grid = build_grid(hue, width, height, self.catalog)
        return rasterize(grid, self.catalog, self.cfg.border_color)

    def get_region_image(self, hue: float, width: Optional[int] = None, height: Optional[int] = None) -> np.ndarray:
        """
        Read-only (height, width, 4) RGBA buffer for `hue`.

        Width/height default to the configured resolution. Asking for a
        different resolution drops every cached image first.
        """
        size = (self.cfg.width if width is None else width, self.cfg.height if height is None else height)
        check_dimensions(*size)
        if size != self._size:
            logger.info("Region map resolution %s -> %s, dropping %d cached images", self._size, size, len(self.cache))
            self.cache.invalidate_all()
            self._size = size
        return self.cache.get_image(hue)

    def invalidate_all(self) -> None:
        self.cache.invalidate_all()

    def to_pil(self, hue: float) -> Image.Image:
        return Image.fromarray(np.array(self.get_region_image(hue)))

    def save(self, hue: float, path: str) -> str:
        self.to_pil(hue).save(path)
        logger.info("Region map for hue=%s saved to %s", hue, path)
        return path
