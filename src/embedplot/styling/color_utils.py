"""
Generic color utilities for embedding plots.

These helpers are plotting-backend agnostic. Color parsing is delegated to
matplotlib, with the matplotlib-only shorthands switched off so that ordinary
text labels are not mistaken for colors.
"""

import numbers
import re
from typing import Any, Iterable, List, Optional, Sequence

import numpy as np
import pandas as pd
import matplotlib.colors as mcolors
from pandas.api import types as ptypes


# palette indices 1..10 address this table, as in the default matplotlib cycle
STANDARD_PALETTE = [
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#7f7f7f",
    "#bcbd22",
    "#17becf",
]

_HEX_RE = re.compile(r'^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$')
_CYCLE_RE = re.compile(r'^C[0-9]+$')


def is_missing(value: Any) -> bool:
    """None, NaN, NaT or pd.NA (scalars only)."""
    if value is None:
        return True
    if isinstance(value, str) or not ptypes.is_scalar(value):
        return False
    return bool(pd.isna(value))


def parse_color(value: Any) -> bool:
    """
    Return True if `value` can be used as a single color.

    Accepted: named colors (CSS4, ``tab:``, ``xkcd:``), hex strings with or
    without alpha, and palette indices (any number, or a string of digits).
    Missing values count as colors since they render as transparent.
    Surrounding whitespace is not stripped, so " red" is not a color.
    Never raises.
    """
    if is_missing(value):
        return True
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, numbers.Number):
        return True
    if not isinstance(value, str):
        return False

    s = value
    if not s or s != s.strip():
        return False
    if s.startswith('#'):
        return _HEX_RE.match(s) is not None
    if s.isdigit():
        return True
    # single-letter shorthands, cycle refs and grey-level strings are
    # matplotlib-only and would swallow short labels like "b" or "C1"
    if len(s) == 1 or _CYCLE_RE.match(s):
        return False
    try:
        float(s)
        return False
    except ValueError:
        pass

    try:
        return mcolors.is_color_like(s)
    except Exception:
        return False


def is_color(values: Iterable[Any]) -> List[bool]:
    """Element-wise `parse_color`."""
    return [parse_color(v) for v in values]


def to_rgba_string(color: Any, alpha: float = 1.0) -> str:
    """Convert any supported color to `rgba(r,g,b,a)` string."""
    try:
        r, g, b, _ = mcolors.to_rgba(color)
        return f"rgba({int(r*255)},{int(g*255)},{int(b*255)},{alpha})"
    except (ValueError, TypeError):
        return f"rgba(128,128,128,{alpha})"


def to_plot_color(color: Any) -> Optional[str]:
    """
    Hex string a plotting backend can draw, or None for "do not draw".

    Numbers and digit strings are 1-based indices into `STANDARD_PALETTE`
    (wrapping around); index 0 and missing values are not drawn.
    """
    if is_missing(color):
        return None
    if isinstance(color, str) and color.isdigit():
        color = int(color)
    if isinstance(color, numbers.Number) and not isinstance(color, (bool, np.bool_)):
        if np.isnan(color) or int(color) <= 0:
            return None
        return STANDARD_PALETTE[(int(color) - 1) % len(STANDARD_PALETTE)]
    rgba = mcolors.to_rgba(color)
    return mcolors.to_hex(rgba, keep_alpha=rgba[3] < 1.0)


def interpolate_colors(colors: Sequence[Any], n: int) -> List[str]:
    """
    Build an `n`-color ramp through an ordered list of colors.

    Channels are interpolated linearly in RGB(A) space with the input colors
    evenly spaced along the ramp, so the first and last colors are always
    reproduced exactly. Alpha is only kept in the output when some input
    color is not fully opaque.
    """
    if n < 1:
        return []
    rgba = mcolors.to_rgba_array(list(colors))
    stops = np.linspace(0.0, 1.0, len(rgba))
    positions = np.linspace(0.0, 1.0, n)
    ramp = np.column_stack(
        [np.interp(positions, stops, rgba[:, i]) for i in range(4)]
    )
    keep_alpha = bool(np.any(rgba[:, 3] < 1.0))
    return [mcolors.to_hex(c, keep_alpha=keep_alpha) for c in ramp]


def rainbow(n: int) -> List[str]:
    """`n` fully saturated colors evenly spaced around the hue circle from red."""
    if n < 1:
        return []
    hsv = np.column_stack([np.arange(n) / n, np.ones(n), np.ones(n)])
    return [mcolors.to_hex(c) for c in mcolors.hsv_to_rgb(hsv)]


__all__ = [
    "STANDARD_PALETTE",
    "is_missing",
    "parse_color",
    "is_color",
    "to_rgba_string",
    "to_plot_color",
    "interpolate_colors",
    "rainbow",
]
