"""
Palette and color-scheme errors.

All of these indicate caller misconfiguration and propagate to the caller.
Classification code never raises them for bad data; it falls through instead.
"""


class PaletteError(ValueError):
    """Base class for color-scheme resolution failures."""


class MalformedPaletteSpec(PaletteError):
    """A palette name that is not of the form ``<catalog>::<palette>``."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Bad palette name '{name}'. Should be in format: <catalog>::<palette>"
        )


class UnknownCatalogError(PaletteError):
    """The catalog part of a qualified palette name is not known."""

    def __init__(self, catalog: str):
        self.catalog = catalog
        super().__init__(f"Unknown catalog '{catalog}'")


class UnknownPaletteError(PaletteError):
    """The catalog is known but has no palette of the requested name."""

    def __init__(self, catalog: str, palette: str):
        self.catalog = catalog
        self.palette = palette
        super().__init__(f"Unknown palette '{palette}' for catalog '{catalog}'")


class InvalidPaletteSize(PaletteError):
    """An explicit palette with fewer than two colors."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(
            f"An explicit palette needs at least 2 colors to interpolate, got {size}"
        )


__all__ = [
    'PaletteError',
    'MalformedPaletteSpec',
    'UnknownCatalogError',
    'UnknownPaletteError',
    'InvalidPaletteSize',
]
