"""
Embedding plots: scatter plots of 2D coordinates colored by data.

`embed_plot` draws with matplotlib, `embed_plotly` with plotly. Both find
point colors the same way:

- `colors` given: used directly.
- `x` is a data frame: the last color column, else the last categorical
  column, else the last text column that looks categorical; otherwise one
  color per point.
- `x` is a vector: colors are used as-is, numbers are binned over the color
  scheme, categorical and categorical-looking text map one color per level,
  anything else gets one color per point.
- nothing given: one color per point.
"""

import logging
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
import plotly.graph_objects as go

from ..mapping.classify import as_series, is_categorical, is_numeric
from ..mapping.resolve import resolve_colors
from ..styling.catalog import PaletteCatalog
from ..styling.color_utils import rainbow, to_plot_color
from ..styling.palettes import ColorScheme, resolve_palette
from .ir import EmbeddingFigure, ScatterTrace
from .renderers import render_matplotlib, render_plotly
from .rotation import data_range, extract_coords, pc_rotate
from .style import StyleSpec, default_style

logger = logging.getLogger(__name__)


# ==============================================================================
# Helpers
# ==============================================================================

def _check_length(values: Sequence[Any], n: int, what: str) -> List[Any]:
    values = list(values)
    if len(values) != n:
        raise ValueError(f"{what} has {len(values)} entries but there are {n} points")
    return values


def _explicit_colors(colors: Union[str, Sequence[Any]], n: int) -> List[Any]:
    if isinstance(colors, str):
        return [colors] * n
    return _check_length(colors, n, "colors")


def _group_indices(labels: Sequence[Any]) -> List[Tuple[str, np.ndarray]]:
    """Split point indices by label, in level order for categoricals and
    first-appearance order otherwise. Missing labels form an "NA" group."""
    s = as_series(labels)
    if is_categorical(s):
        order = [c for c in s.cat.categories if (s == c).any()]
    else:
        order = list(pd.unique(s.dropna()))
    groups = [(str(v), np.flatnonzero((s == v).to_numpy())) for v in order]
    missing = np.flatnonzero(s.isna().to_numpy())
    if len(missing):
        groups.append(("NA", missing))
    return groups


def _visible_trace(
    xy: np.ndarray,
    idx: np.ndarray,
    colors: List[Optional[str]],
    name: Optional[str] = None,
    text: Optional[List[str]] = None,
    hover: Optional[List[str]] = None,
) -> Optional[ScatterTrace]:
    """Trace over the points in `idx` that have a color, or None if none do."""
    keep = [i for i in idx if colors[i] is not None]
    if not keep:
        return None
    return ScatterTrace(
        x=xy[keep, 0],
        y=xy[keep, 1],
        colors=[colors[i] for i in keep],
        name=name,
        text=[text[i] for i in keep] if text is not None else None,
        hover=[hover[i] for i in keep] if hover is not None else None,
    )


def save_figure(fig: Union[plt.Figure, go.Figure], output_path: Union[str, Path]) -> Path:
    """Save a figure, creating parent directories.

    Plotly figures go to HTML unless the suffix names an image format
    (which needs kaleido); matplotlib figures go through `savefig`.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(fig, go.Figure):
        if output_path.suffix.lower() in ('', '.html', '.htm'):
            output_path = output_path.with_suffix('.html')
            fig.write_html(str(output_path))
        else:
            fig.write_image(str(output_path))
    else:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
    logger.info("Saved figure to %s", output_path)
    return output_path


# ==============================================================================
# Matplotlib
# ==============================================================================

def embed_plot(
    coords: Any,
    x: Any = None,
    colors: Optional[Union[str, Sequence[Any]]] = None,
    color_scheme: ColorScheme = rainbow,
    num_colors: int = 15,
    limits: Optional[Tuple[float, float]] = None,
    top: Optional[int] = None,
    cex: float = 1.0,
    title: Optional[str] = None,
    text: Optional[Sequence[Any]] = None,
    sub: Optional[str] = None,
    equal_axes: bool = False,
    pc_axes: bool = False,
    verbose: bool = False,
    catalog: Optional[PaletteCatalog] = None,
    style: Optional[StyleSpec] = None,
    ax: Optional[plt.Axes] = None,
    output_path: Optional[Union[str, Path]] = None,
) -> plt.Figure:
    """
    Plot embedded coordinates with matplotlib, each point colored.

    Parameters
    ----------
    coords : array-like, shape (N, >=2), or mapping with a "coords" entry
        Embedded coordinates. Only the first two columns are used.
    x : DataFrame or sequence, optional
        Data to derive colors from (see module docstring). Ignored if
        `colors` is given.
    colors : str or sequence, optional
        One color per point, or a single color for all of them.
    color_scheme : palette function, list of colors or "<catalog>::<palette>"
        E.g. `rainbow`, ``["red", "green", "blue"]``, ``"colorbrewer::Dark2"``
        or ``"matplotlib::viridis"``. Interpolated when more colors are
        needed than the scheme has. Ignored if `colors` is given.
    num_colors : int, default=15
        Number of colors to bin a numeric `x` into.
    limits : (low, high), optional
        Range a numeric `x` is mapped over. Defaults to the range of `x`.
    top : int, optional
        With a numeric `x`, only show the points with the `top` highest values.
    cex : float, default=1.0
        Point (or text) size multiplier.
    title, sub : str, optional
        Figure title and subtitle.
    text : sequence, optional
        Labels to draw instead of points.
    equal_axes : bool, default=False
        Give the X and Y axes the same extents.
    pc_axes : bool, default=False
        Rotate the coordinates onto their principal axes first.
    verbose : bool, default=False
        Log which column was picked for coloring and palette interpolation.
    ax : matplotlib Axes, optional
        Draw into an existing axes.
    output_path : str or Path, optional
        If provided, save the figure there.

    Returns
    -------
    matplotlib.figure.Figure
    """
    style = style or default_style()
    xy = extract_coords(coords)
    n = len(xy)

    if colors is None:
        colors = resolve_colors(
            n, x=x, color_scheme=color_scheme, num_colors=num_colors,
            limits=limits, top=top, catalog=catalog, verbose=verbose,
        ).colors
    plot_colors = [to_plot_color(c) for c in _explicit_colors(colors, n)]

    if pc_axes:
        xy = pc_rotate(xy)
    lims = data_range(xy) if equal_axes else None

    labels = None
    if text is not None:
        labels = [str(t) for t in _check_length(text, n, "text")]

    trace = _visible_trace(xy, np.arange(n), plot_colors, text=labels)
    data = EmbeddingFigure(
        traces=[trace] if trace is not None else [],
        mode='text' if labels is not None else 'markers',
        cex=cex,
        title=title,
        subtitle=sub,
        xlim=lims,
        ylim=lims,
    )
    fig = render_matplotlib(data, style, ax=ax)

    if output_path is not None:
        save_figure(fig, output_path)
    return fig


# ==============================================================================
# Plotly
# ==============================================================================

def embed_plotly(
    coords: Any,
    x: Any = None,
    colors: Optional[Union[str, Sequence[Any]]] = None,
    color_scheme: ColorScheme = rainbow,
    num_colors: int = 15,
    title: Optional[str] = None,
    show_legend: bool = True,
    cex: float = 1.0,
    text: Optional[Sequence[Any]] = None,
    tooltip: Optional[Sequence[Any]] = None,
    equal_axes: bool = False,
    pc_axes: bool = False,
    verbose: bool = False,
    catalog: Optional[PaletteCatalog] = None,
    style: Optional[StyleSpec] = None,
    output_path: Optional[Union[str, Path]] = None,
) -> go.Figure:
    """
    Interactive plot of embedded coordinates with plotly.

    Points are grouped into one legend entry per label: the categorical
    values colors were derived from if there are any, else the colors
    themselves. A numeric `x` is drawn with a continuous color scale built
    from `num_colors` colors of `color_scheme`. Hover text is prefixed with
    the 1-based index of the point, to find it in the original data.

    Parameters
    ----------
    coords, x, colors, color_scheme, cex, text, equal_axes, pc_axes, verbose
        As for `embed_plot`.
    title : str, optional
        Plot title.
    show_legend : bool, default=True
        Show the legend. Always hidden when neither `x` nor `colors` is given.
    tooltip : sequence, optional
        Hover text per point. Defaults to `text`, then to the labels.

    Returns
    -------
    plotly.graph_objects.Figure
    """
    style = style or default_style()
    xy = extract_coords(coords)
    n = len(xy)

    display_text = None
    if text is not None:
        display_text = [str(t) for t in _check_length(text, n, "text")]
    labels: Optional[List[Any]] = list(display_text) if display_text is not None else None
    continuous: Optional[np.ndarray] = None
    scale: Optional[List[str]] = None

    if colors is not None:
        colors = _explicit_colors(colors, n)
        if labels is None:
            labels = list(colors)
    elif x is not None:
        if not isinstance(x, pd.DataFrame) and is_numeric(x):
            continuous = as_series(_check_length(x, n, "x")).to_numpy(dtype=float, na_value=np.nan)
            labels = list(continuous)
            scale = resolve_palette(color_scheme, num_colors, catalog=catalog, verbose=verbose)
            display_text = None
        else:
            res = resolve_colors(n, x=x, color_scheme=color_scheme, catalog=catalog, verbose=verbose)
            colors = _check_length(res.colors, n, "colors")
            labels = res.labels if res.labels is not None else list(colors)
    else:
        res = resolve_colors(n, color_scheme=color_scheme, catalog=catalog, verbose=verbose)
        colors = res.colors
        labels = list(colors)
        show_legend = res.show_legend

    if pc_axes:
        xy = pc_rotate(xy)
    xlim = ylim = None
    if equal_axes:
        low, high = data_range(xy)
        xlim = (low * style.x_range_margin, high * style.x_range_margin)
        ylim = (low * style.y_range_margin, high * style.y_range_margin)

    if tooltip is not None:
        hover_source = list(_check_length(tooltip, n, "tooltip"))
    elif text is not None:
        hover_source = [str(t) for t in text]
    else:
        hover_source = list(labels)
    hover = [f"{i}: {t}" for i, t in enumerate(hover_source, start=1)]

    if continuous is not None:
        traces = [ScatterTrace(
            x=xy[:, 0], y=xy[:, 1], colors=[],
            hover=hover, color_values=continuous, colorscale=scale,
        )]
        mode = 'markers'
    else:
        plot_colors = [to_plot_color(c) for c in colors]
        traces = []
        for name, idx in _group_indices(labels):
            trace = _visible_trace(xy, idx, plot_colors, name=name, text=display_text, hover=hover)
            if trace is not None:
                traces.append(trace)
        mode = 'text' if display_text is not None else 'markers'

    data = EmbeddingFigure(
        traces=traces,
        mode=mode,
        cex=cex,
        title=title,
        xlim=xlim,
        ylim=ylim,
        show_legend=show_legend,
    )
    fig = render_plotly(data, style)

    if output_path is not None:
        save_figure(fig, output_path)
    return fig
