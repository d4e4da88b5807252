"""
Color schemes and palette resolution.

A color scheme is one of:

- a generator: any callable taking a count `n` and returning `n` colors
  (e.g. `rainbow`),
- an explicit palette: an ordered list of at least two colors, interpolated
  to whatever size is requested,
- a qualified name ``"<catalog>::<palette>"`` looked up in a `PaletteCatalog`
  (e.g. ``"colorbrewer::Blues"``, ``"matplotlib::viridis"``). When more colors
  are requested than the palette natively has, its full native set is
  interpolated up to the requested size.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from ..errors import InvalidPaletteSize, MalformedPaletteSpec
from .catalog import PaletteCatalog, default_catalog
from .color_utils import interpolate_colors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratorSpec:
    """A palette generator, called with the number of colors wanted."""
    fn: Callable[[int], Sequence[str]]


@dataclass(frozen=True)
class ExplicitPalette:
    """An ordered list of colors to interpolate through."""
    colors: Tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "colors", tuple(self.colors))
        if len(self.colors) < 2:
            raise InvalidPaletteSize(len(self.colors))


@dataclass(frozen=True)
class QualifiedName:
    """A ``<catalog>::<palette>`` reference into a palette catalog."""
    catalog: str
    palette: str

    @classmethod
    def parse(cls, name: str) -> "QualifiedName":
        parts = name.split("::")
        if len(parts) != 2 or not all(parts):
            raise MalformedPaletteSpec(name)
        return cls(parts[0], parts[1])

    def __str__(self) -> str:
        return f"{self.catalog}::{self.palette}"


PaletteSpec = Union[GeneratorSpec, ExplicitPalette, QualifiedName]
ColorScheme = Union[PaletteSpec, Callable[[int], Sequence[str]], str, Sequence[str]]


def as_palette_spec(scheme: Any) -> PaletteSpec:
    """Coerce a caller-supplied color scheme into a `PaletteSpec`."""
    if isinstance(scheme, (GeneratorSpec, ExplicitPalette, QualifiedName)):
        return scheme
    if isinstance(scheme, str):
        return QualifiedName.parse(scheme)
    if callable(scheme):
        return GeneratorSpec(scheme)
    if isinstance(scheme, (list, tuple, np.ndarray, pd.Series)):
        return ExplicitPalette(tuple(scheme))
    raise TypeError(
        f"Unsupported color scheme {scheme!r}: expected a palette function, "
        "a list of colors or a '<catalog>::<palette>' name"
    )


def make_palette_function(
    scheme: ColorScheme,
    catalog: Optional[PaletteCatalog] = None,
    verbose: bool = False,
) -> Callable[[int], List[str]]:
    """
    Resolve a color scheme once and return an ``n -> colors`` function.

    Catalog lookups and validation happen here, so errors surface before any
    colors are requested.

    Raises
    ------
    MalformedPaletteSpec, UnknownCatalogError, UnknownPaletteError,
    InvalidPaletteSize
    """
    spec = as_palette_spec(scheme)

    if isinstance(spec, GeneratorSpec):
        def generated(n: int) -> List[str]:
            return list(spec.fn(n))
        return generated

    if isinstance(spec, ExplicitPalette):
        colors = spec.colors

        def ramped(n: int) -> List[str]:
            if n > len(colors) and verbose:
                logger.info("Interpolating palette for %d colors", n)
            return interpolate_colors(colors, n)
        return ramped

    entry = (catalog or default_catalog()).lookup(spec.catalog, spec.palette)

    def from_catalog(n: int) -> List[str]:
        if n <= entry.max_native_size:
            return entry.query(n)
        if verbose:
            logger.info("Interpolating palette for %d colors", n)
        return interpolate_colors(entry.query(int(entry.max_native_size)), n)
    return from_catalog


def resolve_palette(
    scheme: ColorScheme,
    n: int,
    catalog: Optional[PaletteCatalog] = None,
    verbose: bool = False,
) -> List[str]:
    """Return exactly `n` colors from a color scheme (``n >= 1``)."""
    if n < 1:
        raise ValueError(f"Number of colors must be >= 1, got {n}")
    return make_palette_function(scheme, catalog=catalog, verbose=verbose)(n)


__all__ = [
    "GeneratorSpec",
    "ExplicitPalette",
    "QualifiedName",
    "PaletteSpec",
    "ColorScheme",
    "as_palette_spec",
    "make_palette_function",
    "resolve_palette",
]
