"""
Matplotlib renderer for embedding plots.
"""

from typing import Optional

import matplotlib.pyplot as plt

from ..ir import EmbeddingFigure
from ..style import StyleSpec


def render_matplotlib(
    data: EmbeddingFigure,
    style: StyleSpec,
    ax: Optional[plt.Axes] = None,
) -> plt.Figure:
    """Render EmbeddingFigure to a Matplotlib figure.

    Text mode draws each label at its point in the point's color; markers
    mode draws filled dots. Legends are not drawn.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(style.fig_width_in, style.fig_height_in))
    else:
        fig = ax.figure

    for trace in data.traces:
        if data.mode == 'text':
            for x, y, label, color in zip(trace.x, trace.y, trace.text or [], trace.colors):
                ax.text(x, y, label, color=color, ha='center', va='center',
                        fontsize=style.text_fontsize * data.cex)
            # text artists do not update data limits
            ax.update_datalim(list(zip(trace.x, trace.y)))
            ax.autoscale_view()
        else:
            ax.scatter(trace.x, trace.y, c=trace.colors,
                       s=style.point_size * data.cex, marker='o', linewidths=0)

    if data.xlim is not None:
        ax.set_xlim(data.xlim)
    if data.ylim is not None:
        ax.set_ylim(data.ylim)
    ax.set_xlabel(style.x_label)
    ax.set_ylabel(style.y_label)

    if data.title:
        fig.suptitle(data.title, fontsize=style.title_fontsize, fontweight='bold')
    if data.subtitle:
        ax.set_title(data.subtitle, fontsize=style.subtitle_fontsize)

    return fig
