"""
Palette catalog: named color schemes addressable as ``<catalog>::<palette>``.

The catalog is an explicitly constructed, read-only service. The default one
is assembled once per process from the installed plotting stack:

- ``matplotlib::<cmap>`` : every registered colormap. Short listed maps
  (``tab10``, ``Dark2``, ``Set1``, ...) are discrete, the rest continuous.
- ``plotly::<name>`` : ``plotly.colors.qualitative`` sequences (discrete).
- ``colorbrewer::<name>`` : ``plotly.colors.colorbrewer`` sequences (discrete).
- ``seaborn::<name>`` : the named seaborn palettes (discrete) and the
  ``husl``/``hls`` hue-circle generators (dynamic).
"""

from __future__ import annotations

import functools
import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Sequence

import numpy as np
import pandas as pd
import matplotlib
import matplotlib.colors as mcolors

from ..errors import UnknownCatalogError, UnknownPaletteError

logger = logging.getLogger(__name__)

# listed colormaps at least this long are sampled like continuous ones
_CONTINUOUS_LISTED_MIN = 256

SEABORN_NAMED_PALETTES = ("deep", "muted", "pastel", "bright", "dark", "colorblind")
SEABORN_DYNAMIC_PALETTES = ("husl", "hls")
# one color per hue degree
SEABORN_DYNAMIC_MAX = 360


class PaletteKind(str, Enum):
    CONTINUOUS = "continuous"
    DISCRETE = "discrete"
    DYNAMIC = "dynamic"


@dataclass(frozen=True)
class PaletteEntry:
    """One named palette.

    `query_fn(n)` returns `n` colors for any ``n <= max_native_size``;
    continuous palettes have an unbounded native size.
    """
    catalog: str
    name: str
    kind: PaletteKind
    max_native_size: float
    query_fn: Callable[[int], List[str]] = field(compare=False, repr=False)

    @property
    def qualified_name(self) -> str:
        return f"{self.catalog}::{self.name}"

    def query(self, n: int) -> List[str]:
        if n > self.max_native_size:
            raise ValueError(
                f"{self.qualified_name} supports at most {self.max_native_size} "
                f"colors, {n} requested"
            )
        return list(self.query_fn(n))


# ==============================================================================
# Query functions, one per palette kind
# ==============================================================================

def continuous_query(cmap: mcolors.Colormap) -> Callable[[int], List[str]]:
    """Sample `n` evenly spaced colors along a colormap."""
    def query(n: int) -> List[str]:
        return [mcolors.to_hex(c) for c in cmap(np.linspace(0.0, 1.0, n))]
    return query


def discrete_query(colors: Sequence[str]) -> Callable[[int], List[str]]:
    """Take the first `n` colors of a fixed list."""
    colors = tuple(colors)

    def query(n: int) -> List[str]:
        return list(colors[:n])
    return query


def dynamic_query(generator: Callable[[int], Iterable]) -> Callable[[int], List[str]]:
    """Generate `n` colors with a size-aware generator."""
    def query(n: int) -> List[str]:
        return [mcolors.to_hex(c) for c in generator(n)]
    return query


# ==============================================================================
# Catalog
# ==============================================================================

class PaletteCatalog:
    """Read-only index of palettes, keyed by catalog then palette name."""

    def __init__(self, entries: Iterable[PaletteEntry]):
        table: Dict[str, Dict[str, PaletteEntry]] = {}
        for entry in entries:
            table.setdefault(entry.catalog, {})[entry.name] = entry
        self._table: Mapping[str, Mapping[str, PaletteEntry]] = MappingProxyType(
            {name: MappingProxyType(palettes) for name, palettes in table.items()}
        )

    @classmethod
    def from_palettes(
        cls,
        catalog: str,
        palettes: Mapping[str, Sequence[str]],
    ) -> "PaletteCatalog":
        """Build a catalog of discrete palettes from plain color lists."""
        return cls(
            PaletteEntry(
                catalog, name, PaletteKind.DISCRETE, len(colors),
                discrete_query(colors),
            )
            for name, colors in palettes.items()
        )

    def lookup(self, catalog: str, palette: str) -> PaletteEntry:
        palettes = self._table.get(catalog)
        if palettes is None:
            raise UnknownCatalogError(catalog)
        entry = palettes.get(palette)
        if entry is None:
            raise UnknownPaletteError(catalog, palette)
        return entry

    def catalogs(self) -> List[str]:
        return sorted(self._table)

    def palettes(self, catalog: str) -> List[str]:
        if catalog not in self._table:
            raise UnknownCatalogError(catalog)
        return sorted(self._table[catalog])

    def __iter__(self) -> Iterator[PaletteEntry]:
        for catalog in self.catalogs():
            for name in self.palettes(catalog):
                yield self._table[catalog][name]

    def __len__(self) -> int:
        return sum(len(p) for p in self._table.values())

    def __contains__(self, qualified_name: object) -> bool:
        if not isinstance(qualified_name, str):
            return False
        parts = qualified_name.split("::")
        return len(parts) == 2 and parts[1] in self._table.get(parts[0], {})

    def to_frame(self) -> pd.DataFrame:
        """Flat listing with one row per palette."""
        return pd.DataFrame(
            [
                {
                    "catalog": e.catalog,
                    "palette": e.name,
                    "length": e.max_native_size,
                    "kind": e.kind.value,
                }
                for e in self
            ],
            columns=["catalog", "palette", "length", "kind"],
        )


# ==============================================================================
# Default catalog
# ==============================================================================

def _plotly_color_to_hex(color: str) -> str:
    from plotly.colors import unlabel_rgb

    if color.startswith("rgb"):
        r, g, b = unlabel_rgb(color)[:3]
        return mcolors.to_hex((r / 255.0, g / 255.0, b / 255.0))
    return mcolors.to_hex(color)


def matplotlib_entries() -> Iterator[PaletteEntry]:
    for name in sorted(matplotlib.colormaps):
        cmap = matplotlib.colormaps[name]
        if isinstance(cmap, mcolors.ListedColormap) and cmap.N < _CONTINUOUS_LISTED_MIN:
            colors = [mcolors.to_hex(c) for c in cmap.colors]
            yield PaletteEntry(
                "matplotlib", name, PaletteKind.DISCRETE, len(colors),
                discrete_query(colors),
            )
        else:
            yield PaletteEntry(
                "matplotlib", name, PaletteKind.CONTINUOUS, math.inf,
                continuous_query(cmap),
            )


def plotly_entries() -> Iterator[PaletteEntry]:
    from plotly.colors import colorbrewer, qualitative

    for catalog, module in (("plotly", qualitative), ("colorbrewer", colorbrewer)):
        for name, seq in sorted(vars(module).items()):
            if name.startswith("_") or not isinstance(seq, list):
                continue
            colors = [_plotly_color_to_hex(c) for c in seq]
            yield PaletteEntry(
                catalog, name, PaletteKind.DISCRETE, len(colors),
                discrete_query(colors),
            )


def seaborn_entries() -> Iterator[PaletteEntry]:
    import seaborn as sns

    for name in SEABORN_NAMED_PALETTES:
        colors = [mcolors.to_hex(c) for c in sns.color_palette(name)]
        yield PaletteEntry(
            "seaborn", name, PaletteKind.DISCRETE, len(colors),
            discrete_query(colors),
        )
    for name in SEABORN_DYNAMIC_PALETTES:
        yield PaletteEntry(
            "seaborn", name, PaletteKind.DYNAMIC, SEABORN_DYNAMIC_MAX,
            dynamic_query(functools.partial(sns.color_palette, name)),
        )


@functools.lru_cache(maxsize=None)
def default_catalog() -> PaletteCatalog:
    """Catalog of every palette shipped with matplotlib, plotly and seaborn."""
    catalog = PaletteCatalog(
        [*matplotlib_entries(), *plotly_entries(), *seaborn_entries()]
    )
    logger.debug("Loaded palette catalog with %d palettes", len(catalog))
    return catalog


__all__ = [
    "PaletteKind",
    "PaletteEntry",
    "PaletteCatalog",
    "continuous_query",
    "discrete_query",
    "dynamic_query",
    "default_catalog",
]
