"""Tests for color_utils.py."""

import numpy as np
import pandas as pd
import pytest

from embedplot.styling.color_utils import (
    STANDARD_PALETTE,
    interpolate_colors,
    is_color,
    parse_color,
    rainbow,
    to_plot_color,
    to_rgba_string,
)


class TestParseColor:
    @pytest.mark.parametrize("value", [
        "black", "goldenrod", "Red", "#000000", "#000000FF", "#fff", "tab:blue",
        1000, 2.5, np.int64(3), "1", None, float("nan"), pd.NA, pd.NaT,
    ])
    def test_accepts(self, value):
        assert parse_color(value) is True

    @pytest.mark.parametrize("value", [
        "blackk", "#00", "#12345", "", "b", "C1", "0.5", "nan", True, ["red"],
        " red", "blue ", " #ff0000", " 1",
    ])
    def test_rejects(self, value):
        assert parse_color(value) is False

    def test_is_color_elementwise(self):
        assert is_color([None, "black", "blackk", "1", "#00", "#000000", 1000]) == [
            True, True, False, True, False, True, True,
        ]


class TestInterpolateColors:
    def test_two_stops_midpoint(self):
        assert interpolate_colors(["#ff0000", "#0000ff"], 3) == ["#ff0000", "#800080", "#0000ff"]

    def test_same_size_reproduces_input(self):
        colors = ["#ff0000", "#00ff00", "#0000ff"]
        assert interpolate_colors(colors, 3) == colors

    def test_named_colors_accepted(self):
        out = interpolate_colors(["red", "blue"], 5)
        assert len(out) == 5
        assert out[0] == "#ff0000"
        assert out[-1] == "#0000ff"

    def test_single_color_request(self):
        assert interpolate_colors(["#ff0000", "#0000ff"], 1) == ["#ff0000"]

    def test_alpha_kept_only_when_present(self):
        out = interpolate_colors(["#ff000000", "#ff0000ff"], 3)
        assert out == ["#ff000000", "#ff000080", "#ff0000ff"]
        assert all(len(c) == 7 for c in interpolate_colors(["red", "blue"], 4))


class TestRainbow:
    def test_primary_hues(self):
        assert rainbow(3) == ["#ff0000", "#00ff00", "#0000ff"]

    def test_length(self):
        assert len(rainbow(17)) == 17
        assert len(set(rainbow(17))) == 17

    def test_empty(self):
        assert rainbow(0) == []


class TestPlotColors:
    def test_palette_indices(self):
        assert to_plot_color(1) == STANDARD_PALETTE[0]
        assert to_plot_color("2") == STANDARD_PALETTE[1]
        assert to_plot_color(11) == STANDARD_PALETTE[0]

    def test_not_drawn(self):
        assert to_plot_color(None) is None
        assert to_plot_color(float("nan")) is None
        assert to_plot_color(0) is None
        assert to_plot_color(pd.NA) is None

    def test_names_and_alpha(self):
        assert to_plot_color("red") == "#ff0000"
        assert to_plot_color("#ff000080") == "#ff000080"

    def test_rgba_string(self):
        assert to_rgba_string("#ff0000", 0.5) == "rgba(255,0,0,0.5)"
        assert to_rgba_string("not a color", 0.2) == "rgba(128,128,128,0.2)"
