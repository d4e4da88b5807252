"""
Mapping from data to per-point colors.
"""

from .numeric import numeric_to_colors, mask_below_top
from .classify import (
    ColumnKind,
    ColorResult,
    is_color_column,
    is_factorish,
    classify_kind,
    factor_to_colors,
    classify_column,
    last_color_column_name,
    last_categorical_column_name,
    last_text_column_name,
    classify_table,
)
from .resolve import resolve_colors

__all__ = [
    'numeric_to_colors',
    'mask_below_top',
    'ColumnKind',
    'ColorResult',
    'is_color_column',
    'is_factorish',
    'classify_kind',
    'factor_to_colors',
    'classify_column',
    'last_color_column_name',
    'last_categorical_column_name',
    'last_text_column_name',
    'classify_table',
    'resolve_colors',
]
