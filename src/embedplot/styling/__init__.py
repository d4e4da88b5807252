"""
Color parsing, palette catalogs and palette resolution.
"""

from .color_utils import (
    STANDARD_PALETTE,
    is_missing,
    parse_color,
    is_color,
    to_rgba_string,
    to_plot_color,
    interpolate_colors,
    rainbow,
)
from .catalog import (
    PaletteKind,
    PaletteEntry,
    PaletteCatalog,
    default_catalog,
)
from .palettes import (
    GeneratorSpec,
    ExplicitPalette,
    QualifiedName,
    as_palette_spec,
    make_palette_function,
    resolve_palette,
)

__all__ = [
    'STANDARD_PALETTE',
    'is_missing',
    'parse_color',
    'is_color',
    'to_rgba_string',
    'to_plot_color',
    'interpolate_colors',
    'rainbow',
    'PaletteKind',
    'PaletteEntry',
    'PaletteCatalog',
    'default_catalog',
    'GeneratorSpec',
    'ExplicitPalette',
    'QualifiedName',
    'as_palette_spec',
    'make_palette_function',
    'resolve_palette',
]
