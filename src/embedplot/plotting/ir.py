"""
Intermediate representation for embedding plots.

Pure dataclasses. Renderers consume these; nothing here knows about a backend.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class ScatterTrace:
    """A set of points drawn together (one legend entry in plotly)."""
    x: np.ndarray
    y: np.ndarray
    colors: List[str]
    name: Optional[str] = None
    # Drawn instead of markers in text mode
    text: Optional[List[str]] = None
    # Hover text (plotly only)
    hover: Optional[List[str]] = None
    # Continuous coloring (plotly only): values mapped through colorscale
    color_values: Optional[np.ndarray] = None
    colorscale: Optional[List[str]] = None


@dataclass
class EmbeddingFigure:
    """The complete plot, agnostic of backend."""
    traces: List[ScatterTrace] = field(default_factory=list)
    mode: str = 'markers'  # 'markers' or 'text'
    cex: float = 1.0
    title: Optional[str] = None
    subtitle: Optional[str] = None
    xlim: Optional[Tuple[float, float]] = None
    ylim: Optional[Tuple[float, float]] = None
    show_legend: bool = False
