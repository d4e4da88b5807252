"""Shared pytest setup: headless matplotlib and small palette catalogs."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from embedplot.styling.catalog import (  # noqa: E402
    PaletteCatalog,
    PaletteEntry,
    PaletteKind,
    continuous_query,
)


@pytest.fixture
def small_catalog():
    """Catalog with one palette of each kind, independent of installed palettes."""
    three = PaletteCatalog.from_palettes(
        "test", {"three": ["#ff0000", "#00ff00", "#0000ff"]}
    )
    entries = list(three) + [
        PaletteEntry(
            "test", "gray", PaletteKind.CONTINUOUS, float("inf"),
            continuous_query(matplotlib.colormaps["gray"]),
        ),
        PaletteEntry(
            "test", "steps", PaletteKind.DYNAMIC, 4,
            lambda n: [f"#{i * 0x11:02x}0000" for i in range(n)],
        ),
    ]
    return PaletteCatalog(entries)


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")
