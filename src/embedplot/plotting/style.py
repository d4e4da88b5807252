"""
Style specification for embedding plots.
"""

from dataclasses import dataclass


@dataclass
class StyleSpec:
    """Backend-agnostic style configuration."""
    # Sizing
    fig_width_in: float = 6.0
    fig_height_in: float = 6.0
    width_px: int = 700
    height_px: int = 600

    # Points (scaled by cex)
    point_size: float = 20.0          # matplotlib marker area
    marker_size_per_cex: float = 6.0  # plotly marker diameter
    text_fontsize: float = 10.0

    # Equal-axes ranges (plotly). The x range is scaled and the y range is
    # not; both are kept configurable until the asymmetry is settled.
    x_range_margin: float = 1.15
    y_range_margin: float = 1.0

    # Labels
    x_label: str = "X"
    y_label: str = "Y"
    title_fontsize: int = 14
    subtitle_fontsize: int = 11
    legend_fontsize: int = 10

    # Plotly
    template: str = "plotly_white"
    colorbar_title: str = ""


def default_style() -> StyleSpec:
    return StyleSpec()
