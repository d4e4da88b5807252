"""
Plotly renderer for embedding plots.
"""

from typing import List, Optional

import plotly.graph_objects as go

from ..ir import EmbeddingFigure, ScatterTrace
from ..style import StyleSpec
from ...styling.color_utils import to_rgba_string


def render_plotly(
    data: EmbeddingFigure,
    style: StyleSpec,
) -> go.Figure:
    """Render EmbeddingFigure to a Plotly figure."""
    fig = go.Figure()

    for trace in data.traces:
        if trace.color_values is not None:
            _add_continuous_trace(fig, trace, data, style)
        else:
            _add_group_trace(fig, trace, data, style)

    axis_common = dict(zeroline=False, showline=True, showgrid=False)
    fig.update_layout(
        title_text=data.title,
        width=style.width_px,
        height=style.height_px,
        hovermode='closest',
        template=style.template,
        showlegend=data.show_legend,
        legend=dict(font=dict(size=style.legend_fontsize)),
        xaxis=dict(title_text=style.x_label, range=data.xlim, **axis_common),
        yaxis=dict(title_text=style.y_label, range=data.ylim, **axis_common),
    )
    return fig


def _plotly_colors(colors: List[str]) -> List[str]:
    """Plotly does not take 8-digit hex, so colors with alpha go as rgba()."""
    out = []
    for c in colors:
        if len(c) == 9 and c.startswith('#'):
            out.append(to_rgba_string(c, round(int(c[7:], 16) / 255, 3)))
        else:
            out.append(c)
    return out


def _add_group_trace(fig, trace: ScatterTrace, data: EmbeddingFigure, style: StyleSpec):
    colors = _plotly_colors(trace.colors)
    if data.mode == 'text':
        fig.add_trace(go.Scatter(
            x=trace.x, y=trace.y,
            mode='text',
            text=trace.text,
            textfont=dict(color=colors, size=style.text_fontsize * data.cex),
            hovertext=trace.hover,
            hoverinfo='text',
            name=trace.name,
            showlegend=data.show_legend,
        ))
    else:
        fig.add_trace(go.Scatter(
            x=trace.x, y=trace.y,
            mode='markers',
            marker=dict(color=colors, size=style.marker_size_per_cex * data.cex),
            hovertext=trace.hover,
            hoverinfo='text',
            name=trace.name,
            showlegend=data.show_legend,
        ))


def _colorscale(colors: List[str]) -> Optional[list]:
    colors = _plotly_colors(colors)
    if len(colors) == 1:
        colors = colors * 2
    last = len(colors) - 1
    return [[i / last, c] for i, c in enumerate(colors)]


def _add_continuous_trace(fig, trace: ScatterTrace, data: EmbeddingFigure, style: StyleSpec):
    fig.add_trace(go.Scatter(
        x=trace.x, y=trace.y,
        mode='markers',
        marker=dict(
            color=trace.color_values,
            colorscale=_colorscale(trace.colorscale or []),
            showscale=True,
            colorbar=dict(title=dict(text=style.colorbar_title)),
            size=style.marker_size_per_cex * data.cex,
        ),
        hovertext=trace.hover,
        hoverinfo='text',
        name=trace.name,
        showlegend=False,
    ))
