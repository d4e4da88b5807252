"""
Map numbers to colors.

The value range is split into equal-width bins, one per palette color, and
each value takes the color of its bin. For numeric scales a sequential or
diverging palette works best, e.g. ``"colorbrewer::Blues"`` or
``"colorbrewer::RdBu"``.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ..styling.catalog import PaletteCatalog
from ..styling.palettes import ColorScheme, resolve_palette

logger = logging.getLogger(__name__)


def bin_indices(
    values: np.ndarray,
    n_bins: int,
    low: float,
    high: float,
) -> np.ndarray:
    """
    0-based bin index of each value on ``[low, high]`` split into `n_bins`.

    Values at or beyond either end go into the first/last bin. A zero-width
    range puts everything into the middle bin.
    """
    if high == low:
        return np.full(len(values), (n_bins - 1) // 2, dtype=int)
    breaks = np.linspace(low, high, n_bins + 1)
    idx = np.searchsorted(breaks, values, side="right")
    return np.clip(idx, 1, n_bins) - 1


def mask_below_top(
    values: np.ndarray,
    colors: List[Optional[str]],
    top: int,
) -> List[Optional[str]]:
    """
    Blank out colors for everything below the `top`-th highest value.

    Ties at the cutoff are kept, so more than `top` points can remain.
    """
    if top < 1:
        raise ValueError(f"top must be >= 1, got {top}")
    ranked = np.sort(values[~np.isnan(values)])[::-1]
    if top > len(ranked):
        return list(colors)
    threshold = ranked[top - 1]
    return [None if v < threshold else c for v, c in zip(values, colors)]


def numeric_to_colors(
    x: Sequence[float],
    color_scheme: ColorScheme = "colorbrewer::Blues",
    n: int = 15,
    limits: Optional[Tuple[float, float]] = None,
    top: Optional[int] = None,
    catalog: Optional[PaletteCatalog] = None,
    verbose: bool = False,
) -> List[Optional[str]]:
    """
    Map a numeric vector to colors from a color scheme.

    Parameters
    ----------
    x : sequence of float
        Values to map. NaN values get no color.
    color_scheme : palette function, list of colors or "<catalog>::<palette>"
        Palette to take the bin colors from.
    n : int, default=15
        Number of bins (and palette colors).
    limits : (low, high), optional
        Range the colors should span. Defaults to the range of `x`; useful
        when there is an external absolute scale.
    top : int, optional
        Only keep colors for the `top` highest values.

    Returns
    -------
    list
        One color per value, None where the point should not be shown.
    """
    if isinstance(x, pd.Series):
        values = x.to_numpy(dtype=float, na_value=np.nan)
    else:
        values = np.asarray(x, dtype=float)
    if n < 1:
        raise ValueError(f"Number of colors must be >= 1, got {n}")

    missing = np.isnan(values)
    if limits is None:
        if missing.all():
            return [None] * len(values)
        low, high = float(np.nanmin(values)), float(np.nanmax(values))
    else:
        low, high = (float(v) for v in limits)
        if low > high:
            raise ValueError(f"limits must be (low, high) with low <= high, got {limits}")

    palette = resolve_palette(color_scheme, n, catalog=catalog, verbose=verbose)
    if high == low:
        logger.debug("Zero-width color range at %g, using the middle color", low)
    idx = bin_indices(values, len(palette), low, high)
    colors: List[Optional[str]] = [
        None if m else palette[i] for i, m in zip(idx, missing)
    ]

    if top is not None:
        colors = mask_below_top(values, colors, top)
    return colors


__all__ = [
    "bin_indices",
    "mask_below_top",
    "numeric_to_colors",
]
