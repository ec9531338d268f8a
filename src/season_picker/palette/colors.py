# colors.py
# HSL color samples, the distance metric used for palette matching,
# and the hex -> RGB -> HSL conversion used to build the static palettes.

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ColorSample:
    """A point in HSL space: hue in degrees, saturation/lightness in percent."""
    hue: float
    saturation: float
    lightness: float

    @classmethod
    def from_hex(cls, hex_code: str) -> "ColorSample":
        return cls(*rgb_to_hsl(*hex_to_rgb(hex_code)))

    def css(self) -> str:
        """CSS notation, e.g. 'hsl(180, 50%, 50%)'."""
        return f"hsl({_fmt(self.hue)}, {_fmt(self.saturation)}%, {_fmt(self.lightness)}%)"

    def to_rgb(self) -> Tuple[int, int, int]:
        return hsl_to_rgb(self.hue, self.saturation, self.lightness)


def distance_squared(a: ColorSample, b: ColorSample) -> float:
    # Raw axes, no hue wrap-around: existing palette tables depend on it.
    return (a.hue - b.hue) ** 2 + (a.saturation - b.saturation) ** 2 + (a.lightness - b.lightness) ** 2


def _fmt(v: float) -> str:
    return str(int(v)) if float(v).is_integer() else f"{v:g}"


# ----------------------- Conversion helpers -----------------------

def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """Convert hex string (e.g., '#FF5733' or 'FF5733') to an RGB tuple."""
    hex_code = hex_code.lstrip("#")
    if len(hex_code) != 6:
        raise ValueError(f"expected 6 hex digits, got {hex_code!r}")
    value = int(hex_code, 16)
    return (value >> 16) & 255, (value >> 8) & 255, value & 255


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """uint8 RGB -> (h 0..360, s 0..100, l 0..100)."""
    r, g, b = r / 255, g / 255, b / 255
    mx, mn = max(r, g, b), min(r, g, b)
    l = (mx + mn) / 2
    if mx == mn:
        return 0.0, 0.0, l * 100  # achromatic

    d = mx - mn
    s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
    if mx == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif mx == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    h /= 6
    return h * 360, s * 100, l * 100


def _hue_to_channel(p: float, q: float, t: float) -> float:
    t %= 1.0
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[int, int, int]:
    """(h degrees, s %, l %) -> uint8 RGB. Out-of-range s/l are clamped for display."""
    s = min(max(s, 0.0), 100.0) / 100
    l = min(max(l, 0.0), 100.0) / 100
    if s == 0:
        v = round(l * 255)
        return v, v, v
    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    h = (h % 360) / 360
    return tuple(round(_hue_to_channel(p, q, h + off) * 255) for off in (1 / 3, 0.0, -1 / 3))
