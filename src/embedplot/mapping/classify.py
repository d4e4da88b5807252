"""
Column and table classification.

Decides what in a vector or data frame should drive point colors:

- a vector is checked, in order, for being colors already, numeric,
  categorical, or text that looks categorical ("factorish"); anything else
  gets one color per element.
- a data frame is searched for a color column, then a categorical column,
  then a factorish text column. When several columns qualify the rightmost
  one wins, so appending a column overrides what is already there. Numeric
  columns are never picked from a data frame.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple

import numpy as np
import pandas as pd
from pandas.api import types as ptypes

from ..styling.catalog import PaletteCatalog
from ..styling.color_utils import is_color, rainbow
from ..styling.palettes import ColorScheme, resolve_palette
from .numeric import numeric_to_colors

logger = logging.getLogger(__name__)


class ColumnKind(Enum):
    COLOR = "color"
    NUMERIC = "numeric"
    CATEGORICAL = "categorical"
    FACTORISH = "factorish"
    OPAQUE = "opaque"


@dataclass(frozen=True)
class ColorResult:
    """Per-point colors, plus the categorical labels they came from if any."""
    colors: List[Optional[str]]
    labels: Optional[pd.Series] = None
    show_legend: bool = True


# ==============================================================================
# Sequence type checks
# ==============================================================================

def as_series(seq: Any) -> pd.Series:
    """Wrap any 1D sequence as a positionally indexed Series."""
    if isinstance(seq, pd.Series):
        return seq.reset_index(drop=True)
    if isinstance(seq, (pd.Categorical, np.ndarray, pd.Index)):
        return pd.Series(seq)
    return pd.Series(list(seq))


def is_categorical(seq: Any) -> bool:
    return isinstance(getattr(seq, "dtype", None), pd.CategoricalDtype)


# inferred kinds of object-dtype sequences that hold plain numbers
_NUMERIC_INFERRED = {"integer", "floating", "mixed-integer-float", "decimal"}


def is_numeric(seq: Any) -> bool:
    """
    True for numeric sequences, including numbers held in an object
    container (missing values such as ``pd.NA`` allowed). Booleans are
    not numeric.
    """
    s = as_series(seq)
    if ptypes.is_bool_dtype(s):
        return False
    if ptypes.is_numeric_dtype(s):
        return True
    if ptypes.is_object_dtype(s) and s.notna().any():
        return ptypes.infer_dtype(s, skipna=True) in _NUMERIC_INFERRED
    return False


def is_text(seq: Any) -> bool:
    s = as_series(seq)
    if is_categorical(s):
        return False
    return ptypes.infer_dtype(s, skipna=True) == "string"


# ==============================================================================
# Predicates
# ==============================================================================

def is_color_column(seq: Any) -> bool:
    """
    True if every element is a color and the sequence is not numeric.

    Numbers are valid colors on their own (palette indices), so a plain
    numeric vector must not be taken as already holding colors.
    """
    s = as_series(seq)
    if is_numeric(s):
        return False
    return all(is_color(s.tolist()))


def is_factorish(seq: Any) -> bool:
    """
    Could a text vector be usefully treated as categorical?

    It must have more than one level, but fewer levels than observations
    (one level per observation looks more like an identifier).
    """
    if not is_text(seq):
        return False
    s = as_series(seq)
    n_levels = len(pd.Categorical(s).categories)
    return 1 < n_levels < len(s)


def classify_kind(seq: Any) -> ColumnKind:
    """Classify a vector. The order of the checks is significant."""
    s = as_series(seq)
    if is_color_column(s):
        return ColumnKind.COLOR
    if is_numeric(s):
        return ColumnKind.NUMERIC
    if is_categorical(s):
        return ColumnKind.CATEGORICAL
    if is_factorish(s):
        return ColumnKind.FACTORISH
    return ColumnKind.OPAQUE


# ==============================================================================
# Mapping
# ==============================================================================

def factor_to_colors(
    seq: Any,
    color_scheme: ColorScheme = rainbow,
    catalog: Optional[PaletteCatalog] = None,
    verbose: bool = False,
) -> List[Optional[str]]:
    """
    Map each categorical value to a color, one palette entry per level.

    Levels keep the categorical's own order; plain vectors are converted
    first, which sorts their levels. Missing values get no color.
    """
    s = as_series(seq)
    cat = s.cat if is_categorical(s) else as_series(pd.Categorical(s)).cat
    n_levels = len(cat.categories)
    if n_levels == 0:
        return [None] * len(s)
    palette = resolve_palette(color_scheme, n_levels, catalog=catalog, verbose=verbose)
    if len(palette) < n_levels:
        name = getattr(color_scheme, "__name__", repr(color_scheme))
        raise ValueError(
            f"Color scheme {name} returned {len(palette)} colors for {n_levels} levels"
        )
    return [palette[code] if code >= 0 else None for code in cat.codes]


def one_color_per_point(
    n: int,
    color_scheme: ColorScheme = rainbow,
    catalog: Optional[PaletteCatalog] = None,
    verbose: bool = False,
) -> List[str]:
    if n == 0:
        return []
    return resolve_palette(color_scheme, n, catalog=catalog, verbose=verbose)


def classify_column(
    x: Any,
    color_scheme: ColorScheme = rainbow,
    num_colors: int = 15,
    limits: Optional[Tuple[float, float]] = None,
    top: Optional[int] = None,
    catalog: Optional[PaletteCatalog] = None,
    verbose: bool = False,
) -> List[Optional[str]]:
    """
    Turn a single vector into one color per element.

    Parameters
    ----------
    x : sequence
        Colors, numbers, a categorical, or text.
    color_scheme : palette function, list of colors or "<catalog>::<palette>"
        Ignored when `x` already holds colors.
    num_colors : int, default=15
        Number of color bins for a numeric `x`.
    limits : (low, high), optional
        Fixed range for a numeric `x`. Defaults to the range of `x`.
    top : int, optional
        For a numeric `x`, only keep colors for the `top` highest values.

    Returns
    -------
    list
        Same length as `x`; None marks a point that should not be shown.
    """
    s = as_series(x)
    kind = classify_kind(s)

    if kind is ColumnKind.COLOR:
        return s.tolist()
    if kind is ColumnKind.NUMERIC:
        return numeric_to_colors(
            s, color_scheme=color_scheme, n=num_colors, limits=limits, top=top,
            catalog=catalog, verbose=verbose,
        )
    if kind in (ColumnKind.CATEGORICAL, ColumnKind.FACTORISH):
        return factor_to_colors(s, color_scheme=color_scheme, catalog=catalog, verbose=verbose)
    return one_color_per_point(len(s), color_scheme=color_scheme, catalog=catalog, verbose=verbose)


# ==============================================================================
# Data frames
# ==============================================================================

def filter_column_positions(df: pd.DataFrame, pred: Callable[[pd.Series], bool]) -> List[int]:
    """Positions of the columns for which `pred` is True, in declared order."""
    return [i for i in range(df.shape[1]) if pred(df.iloc[:, i])]


def _last_position(df: pd.DataFrame, pred: Callable[[pd.Series], bool]) -> Optional[int]:
    positions = filter_column_positions(df, pred)
    return positions[-1] if positions else None


def _name_at(df: pd.DataFrame, pos: Optional[int]) -> Optional[Any]:
    return None if pos is None else df.columns[pos]


def last_color_column_name(df: pd.DataFrame) -> Optional[Any]:
    return _name_at(df, _last_position(df, is_color_column))


def last_categorical_column_name(df: pd.DataFrame) -> Optional[Any]:
    return _name_at(df, _last_position(df, is_categorical))


def last_text_column_name(df: pd.DataFrame) -> Optional[Any]:
    return _name_at(df, _last_position(df, is_text))


def classify_table(
    df: pd.DataFrame,
    color_scheme: ColorScheme = rainbow,
    catalog: Optional[PaletteCatalog] = None,
    verbose: bool = False,
) -> ColorResult:
    """
    Find the most suitable column of a data frame to color points by.

    Search order: the last color column (used as-is), then the last
    categorical column, then the last text column if it is factorish (each
    level mapped to a color). Without any of these every row gets its own
    color. Labels are returned for the categorical and factorish cases.
    """
    pos = _last_position(df, is_color_column)
    if pos is not None:
        if verbose:
            logger.info("Found color column '%s'", df.columns[pos])
        return ColorResult(colors=df.iloc[:, pos].tolist())

    pos = _last_position(df, is_categorical)
    if pos is None:
        text_pos = _last_position(df, is_text)
        if text_pos is not None and is_factorish(df.iloc[:, text_pos]):
            pos = text_pos
            if verbose:
                logger.info("Found a character column '%s' for mapping to colors", df.columns[pos])
    elif verbose:
        logger.info("Found a factor '%s' for mapping to colors", df.columns[pos])

    if pos is not None:
        labels = df.iloc[:, pos].reset_index(drop=True)
        colors = factor_to_colors(labels, color_scheme=color_scheme, catalog=catalog, verbose=verbose)
        return ColorResult(colors=colors, labels=labels)

    if verbose:
        logger.info("Using one color per point")
    return ColorResult(
        colors=one_color_per_point(len(df), color_scheme=color_scheme, catalog=catalog, verbose=verbose)
    )


__all__ = [
    "ColumnKind",
    "ColorResult",
    "is_categorical",
    "is_numeric",
    "is_text",
    "is_color_column",
    "is_factorish",
    "classify_kind",
    "factor_to_colors",
    "classify_column",
    "filter_column_positions",
    "last_color_column_name",
    "last_categorical_column_name",
    "last_text_column_name",
    "classify_table",
]
