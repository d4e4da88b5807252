"""Tests for numeric.py."""

import numpy as np
import pytest

from embedplot.mapping.numeric import bin_indices, mask_below_top, numeric_to_colors

THREE = ["#ff0000", "#00ff00", "#0000ff"]


class TestBinIndices:
    def test_equal_width_bins(self):
        values = np.array([0, 2.5, 5, 7.5, 10])
        assert bin_indices(values, 4, 0, 10).tolist() == [0, 1, 2, 3, 3]

    def test_out_of_range_clamped(self):
        values = np.array([-5.0, 15.0])
        assert bin_indices(values, 4, 0, 10).tolist() == [0, 3]

    def test_zero_width_range_uses_middle(self):
        assert bin_indices(np.array([3.0, 3.0]), 3, 3.0, 3.0).tolist() == [1, 1]
        assert bin_indices(np.array([3.0]), 4, 3.0, 3.0).tolist() == [1]


class TestNumericToColors:
    def test_range_of_data(self):
        assert numeric_to_colors([0, 1, 2], color_scheme=THREE, n=3) == THREE

    def test_external_limits(self):
        out = numeric_to_colors([0, 10], color_scheme=THREE, n=3, limits=(0, 100))
        assert out == ["#ff0000", "#ff0000"]

    def test_constant_values(self):
        assert numeric_to_colors([3, 3, 3], color_scheme=THREE, n=3) == ["#00ff00"] * 3

    def test_nan_has_no_color(self):
        out = numeric_to_colors([0.0, np.nan, 2.0], color_scheme=THREE, n=3)
        assert out == ["#ff0000", None, "#0000ff"]

    def test_all_nan(self):
        assert numeric_to_colors([np.nan, np.nan], color_scheme=THREE) == [None, None]

    def test_bad_limits(self):
        with pytest.raises(ValueError, match="low <= high"):
            numeric_to_colors([1, 2], color_scheme=THREE, limits=(5, 1))

    def test_default_scheme_is_a_catalog_palette(self):
        out = numeric_to_colors(np.linspace(0, 1, 30))
        assert len(out) == 30
        assert len(set(out)) == 15


class TestTop:
    def test_ties_at_cutoff_kept(self):
        values = [5, 3, 9, 1, 9]
        out = numeric_to_colors(values, color_scheme=THREE, n=3, top=2)
        visible = [i for i, c in enumerate(out) if c is not None]
        assert visible == [2, 4]

    def test_ties_can_exceed_top(self):
        out = numeric_to_colors([1, 2, 2, 2], color_scheme=THREE, n=3, top=2)
        assert out[0] is None
        assert all(c is not None for c in out[1:])

    def test_top_larger_than_data(self):
        out = numeric_to_colors([1, 2, 3], color_scheme=THREE, n=3, top=10)
        assert out == THREE

    def test_top_must_be_positive(self):
        with pytest.raises(ValueError, match="top must be >= 1"):
            mask_below_top(np.array([1.0]), ["red"], 0)
