"""
embedplot: color and plot 2D embeddings.

Derives one color per point from whatever describes the observations (a data
frame, a categorical, a text or numeric vector, or colors), using generator
functions, explicit color lists or named palettes from matplotlib, plotly and
seaborn, and draws the result with matplotlib or plotly.

Subpackages
===========
- styling : color parsing, palette catalog and palette resolution
- mapping : column/table classification and data-to-color mapping
- plotting : `embed_plot`, `embed_plotly`
"""

from .errors import (
    PaletteError,
    MalformedPaletteSpec,
    UnknownCatalogError,
    UnknownPaletteError,
    InvalidPaletteSize,
)
from .styling import (
    rainbow,
    PaletteCatalog,
    default_catalog,
    resolve_palette,
    make_palette_function,
)
from .mapping import (
    ColorResult,
    classify_column,
    classify_table,
    numeric_to_colors,
    resolve_colors,
)
from .plotting import embed_plot, embed_plotly, pc_rotate

__all__ = [
    'PaletteError',
    'MalformedPaletteSpec',
    'UnknownCatalogError',
    'UnknownPaletteError',
    'InvalidPaletteSize',
    'rainbow',
    'PaletteCatalog',
    'default_catalog',
    'resolve_palette',
    'make_palette_function',
    'ColorResult',
    'classify_column',
    'classify_table',
    'numeric_to_colors',
    'resolve_colors',
    'embed_plot',
    'embed_plotly',
    'pc_rotate',
]
