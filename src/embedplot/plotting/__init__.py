"""
Embedding plots with matplotlib and plotly.

Modules
=======
- embedding : `embed_plot` (matplotlib) and `embed_plotly` (plotly)
- rotation : coordinate coercion and principal-axis rotation
- style : StyleSpec configuration
- ir / renderers : backend-agnostic figure description and its renderers
"""

from .embedding import embed_plot, embed_plotly, save_figure
from .rotation import extract_coords, pc_rotate
from .style import StyleSpec, default_style

__all__ = [
    'embed_plot',
    'embed_plotly',
    'save_figure',
    'extract_coords',
    'pc_rotate',
    'StyleSpec',
    'default_style',
]
