"""
Picker selection state.

Owns the currently selected color and its closest palette; the UI layer
holds one of these and passes picks in explicitly.
"""

from __future__ import annotations
import logging
from dataclasses import replace
from typing import Optional, Tuple

import numpy as np

from season_picker.palette.colors import ColorSample
from season_picker.regions.classifier import classify
from season_picker.regions.region_map import RegionMap

logger = logging.getLogger(__name__)

DEFAULT_COLOR = ColorSample(180, 50, 50)


class PickerState:
    def __init__(self, region_map: RegionMap, color: ColorSample = DEFAULT_COLOR, show_regions: bool = True):
        self.region_map = region_map
        self.color = color
        self.closest = classify(color, region_map.catalog)
        self.show_regions = show_regions

    def hue_picked(self, hue: float) -> str:
        self.color = replace(self.color, hue=hue)
        return self._reclassify()

    def sl_picked(self, saturation: float, lightness: float) -> str:
        self.color = replace(self.color, saturation=saturation, lightness=lightness)
        return self._reclassify()

    def toggle_regions(self, value: bool) -> None:
        self.show_regions = value

    def _reclassify(self) -> str:
        self.closest = classify(self.color, self.region_map.catalog)
        logger.debug("Picked %s -> %s", self.color.css(), self.closest)
        return self.closest

    def region_image(self) -> Optional[np.ndarray]:
        """Region map for the current hue, or None while regions are hidden."""
        if not self.show_regions:
            return None
        return self.region_map.get_region_image(self.color.hue)

    def describe(self) -> Tuple[str, str]:
        return self.color.css(), self.closest
