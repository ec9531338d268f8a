"""Palette classification errors."""


class PaletteError(Exception):
    """Base class for palette classification errors."""
    pass


class EmptyCatalogError(PaletteError, ValueError):
    """Catalog has no palettes, or a palette has no reference colors."""
    pass


class InvalidGridDimensionsError(PaletteError, ValueError):
    """Region grid width or height is not a positive integer."""
    pass
