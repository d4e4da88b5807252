"""Tests for catalog.py."""

import math

import pytest

from embedplot.errors import UnknownCatalogError, UnknownPaletteError
from embedplot.styling.catalog import PaletteKind, default_catalog
from embedplot.styling.palettes import resolve_palette


class TestPaletteCatalog:
    def test_lookup(self, small_catalog):
        entry = small_catalog.lookup("test", "three")
        assert entry.kind is PaletteKind.DISCRETE
        assert entry.max_native_size == 3
        assert entry.qualified_name == "test::three"

    def test_lookup_errors(self, small_catalog):
        with pytest.raises(UnknownCatalogError, match="Unknown catalog 'x'"):
            small_catalog.lookup("x", "three")
        with pytest.raises(UnknownPaletteError, match="Unknown palette 'x' for catalog 'test'"):
            small_catalog.lookup("test", "x")

    def test_listing(self, small_catalog):
        assert small_catalog.catalogs() == ["test"]
        assert small_catalog.palettes("test") == ["gray", "steps", "three"]
        assert len(small_catalog) == 3
        assert "test::three" in small_catalog
        assert "test::nope" not in small_catalog
        assert "three" not in small_catalog

    def test_to_frame(self, small_catalog):
        frame = small_catalog.to_frame()
        assert list(frame.columns) == ["catalog", "palette", "length", "kind"]
        row = frame.set_index("palette").loc["gray"]
        assert math.isinf(row["length"])
        assert row["kind"] == "continuous"

    def test_query_beyond_native_size(self, small_catalog):
        with pytest.raises(ValueError, match="at most"):
            small_catalog.lookup("test", "three").query(4)


class TestDefaultCatalog:
    def test_loaded_once(self):
        assert default_catalog() is default_catalog()

    def test_catalog_names(self):
        assert {"matplotlib", "plotly", "colorbrewer", "seaborn"} <= set(default_catalog().catalogs())

    def test_matplotlib_kinds(self):
        catalog = default_catalog()
        viridis = catalog.lookup("matplotlib", "viridis")
        assert viridis.kind is PaletteKind.CONTINUOUS
        assert math.isinf(viridis.max_native_size)
        dark2 = catalog.lookup("matplotlib", "Dark2")
        assert dark2.kind is PaletteKind.DISCRETE
        assert dark2.max_native_size == 8
        assert catalog.lookup("matplotlib", "tab10").query(1) == ["#1f77b4"]

    def test_plotly_colors_normalized(self):
        catalog = default_catalog()
        assert catalog.lookup("plotly", "Plotly").query(1) == ["#636efa"]
        blues = catalog.lookup("colorbrewer", "Blues")
        assert blues.max_native_size == 9
        assert blues.query(1) == ["#f7fbff"]

    def test_seaborn(self):
        catalog = default_catalog()
        assert catalog.lookup("seaborn", "deep").max_native_size == 10
        husl = catalog.lookup("seaborn", "husl")
        assert husl.kind is PaletteKind.DYNAMIC
        assert len(set(husl.query(12))) == 12

    def test_interpolates_beyond_native(self):
        out = resolve_palette("colorbrewer::Blues", 20)
        assert len(out) == 20
        assert out[0] == "#f7fbff"
