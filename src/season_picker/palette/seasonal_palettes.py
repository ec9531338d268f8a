# seasonal_palettes.py
# Reference colors for the six seasonal palettes the picker classifies against.
# Each class holds its hex reference colors (converted to HSL samples) and the
# fill color used when the palette's region is drawn on a region map.

from season_picker.palette.colors import ColorSample


def _samples(hex_codes: list[str]) -> list[ColorSample]:
    return [ColorSample.from_hex(c) for c in hex_codes]


class CoolWinter:
    name = "cool_winter"
    display_color = (70, 90, 170, 255)
    palette = _samples([
        "F4ED83",  # pale lemon
        "2C816A",  # pine green
        "2F509F",  # cobalt
        "8D4366",  # berry
        "AB55A0",  # orchid
        "4E3B7B",  # violet
        "333B5F",  # navy slate
        "2B2C2E",  # charcoal
    ])


class ClearWinter:
    name = "clear_winter"
    display_color = (60, 170, 220, 255)
    palette = _samples([
        "F4F170",  # icy yellow
        "2B8F4F",  # emerald
        "3B8CCB",  # bright azure
        "84343D",  # garnet
        "AB55A0",  # orchid
        "825CA5",  # amethyst
        "374284",  # royal navy
        "28292B",  # near black
    ])


class DeepWinter:
    name = "deep_winter"
    display_color = (120, 40, 110, 255)
    palette = _samples([
        "D2DE3C",  # chartreuse
        "347847",  # forest green
        "25A3B9",  # deep turquoise
        "9C373D",  # burgundy
        "C03A52",  # raspberry
        "764B9B",  # royal purple
        "373F7E",  # midnight blue
        "2B2C2E",  # charcoal
    ])


class Spring:
    name = "spring"
    display_color = (250, 200, 120, 255)
    palette = _samples([
        "F3A8BC",  # blush pink
        "F5AD94",  # peach
        "FFF1AB",  # butter yellow
        "B4F9A5",  # mint
        "9EE7F5",  # sky
    ])


class Autumn:
    name = "autumn"
    display_color = (190, 100, 40, 255)
    palette = _samples([
        "603C14",  # chocolate
        "9C2706",  # rust
        "D45B12",  # pumpkin
        "F3BC2E",  # marigold
        "5F5426",  # olive
    ])


class Summer:
    name = "summer"
    display_color = (110, 200, 150, 255)
    palette = _samples([
        "236E96",  # denim
        "15B2D3",  # lagoon
        "FFD700",  # sunflower
        "F3872F",  # tangerine
        "FF598F",  # watermelon
    ])


# Catalog order; earlier seasons win distance ties.
SEASONS = [CoolWinter, ClearWinter, DeepWinter, Spring, Autumn, Summer]
