"""
Resolve point colors from whatever the caller supplied.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

import pandas as pd

from ..styling.catalog import PaletteCatalog
from ..styling.color_utils import rainbow
from ..styling.palettes import ColorScheme
from .classify import (
    ColorResult,
    as_series,
    classify_column,
    classify_table,
    is_categorical,
    one_color_per_point,
)


def resolve_colors(
    n_points: int,
    x: Any = None,
    colors: Optional[Sequence[Any]] = None,
    color_scheme: ColorScheme = rainbow,
    num_colors: int = 15,
    limits: Optional[Tuple[float, float]] = None,
    top: Optional[int] = None,
    catalog: Optional[PaletteCatalog] = None,
    verbose: bool = False,
) -> ColorResult:
    """
    Work out one color per point.

    Parameters
    ----------
    n_points : int
        Number of points being plotted.
    x : DataFrame or sequence, optional
        Source of colors. A data frame is searched for a suitable column,
        a vector is mapped directly (see `classify_column`). Ignored if
        `colors` is given.
    colors : sequence, optional
        Explicit colors, returned unchanged.
    color_scheme : palette function, list of colors or "<catalog>::<palette>"
        Palette used for mapping. Ignored if `colors` is given.
    num_colors, limits, top
        Numeric mapping options, only used when `x` is a numeric vector.

    Returns
    -------
    ColorResult
        `labels` holds the categorical values the colors were derived from,
        when there are any. `show_legend` is False when nothing was given and
        every point simply got its own color.
    """
    if colors is not None:
        return ColorResult(colors=list(colors))

    if x is not None:
        if isinstance(x, pd.DataFrame):
            return classify_table(x, color_scheme=color_scheme, catalog=catalog, verbose=verbose)
        labels = as_series(x) if is_categorical(x) else None
        return ColorResult(
            colors=classify_column(
                x, color_scheme=color_scheme, num_colors=num_colors,
                limits=limits, top=top, catalog=catalog, verbose=verbose,
            ),
            labels=labels,
        )

    return ColorResult(
        colors=one_color_per_point(n_points, color_scheme=color_scheme, catalog=catalog, verbose=verbose),
        show_legend=False,
    )


__all__ = ["resolve_colors"]
