"""
scene_chart.py
--------------
Render one scene: a single line over (Year, value) pairs with year/value axes
and the scene's callouts.

Every call builds a brand-new figure, so switching scenes never carries over
traces or annotations from the previous one.
"""

import logging
from dataclasses import dataclass
from typing import List

import pandas as pd
import plotly.graph_objects as go

from config import (
    CHART_WIDTH, CHART_HEIGHT, MARGIN, PLOT_WIDTH, PLOT_HEIGHT,
    LINE_COLOR, LINE_WIDTH, YEAR_COLUMN,
)
from processing.loader import VALUE_COLUMN
from utils.errors import EmptySeriesError
from visualization.annotations import LeaderLine, place_annotation, to_plotly
from visualization.scales import LinearScale, build_scales

logger = logging.getLogger(__name__)

TITLE_BAND = 40   # extra top margin when the title is drawn inside the figure


@dataclass(frozen=True)
class SceneGeometry:
    x: LinearScale
    y: LinearScale
    leader_lines: List[LeaderLine]


# ── THEME ─────────────────────────────────────────────────────────────────────

def scene_plotly_layout(fig, show_title=False):
    """Plain white frame with d3-style axes and the fixed 800×500 pixel box."""
    top = MARGIN["top"] + (TITLE_BAND if show_title else 0)
    axis = dict(
        showgrid=False,
        zeroline=False,
        showline=True,
        linecolor="#000000",
        linewidth=1,
        ticks="outside",
        ticklen=6,
        tickcolor="#000000",
        tickfont=dict(size=10, color="#000000"),
        title_font=dict(size=12, color="#000000"),
    )
    fig.update_layout(
        paper_bgcolor="#FFFFFF",
        plot_bgcolor="#FFFFFF",
        font=dict(family="sans-serif", color="#000000", size=12),
        autosize=False,
        width=CHART_WIDTH,
        height=CHART_HEIGHT + (TITLE_BAND if show_title else 0),
        margin=dict(l=MARGIN["left"], r=MARGIN["right"], t=top, b=MARGIN["bottom"],
                    pad=0, autoexpand=False),
        showlegend=False,
        xaxis=axis,
        yaxis=axis,
    )
    return fig


# ── GEOMETRY ──────────────────────────────────────────────────────────────────

def scene_geometry(data: pd.DataFrame, scene) -> SceneGeometry:
    if data.empty:
        raise EmptySeriesError(f"Scene {scene.id} has no data points to draw")
    x, y = build_scales(data[YEAR_COLUMN], data[VALUE_COLUMN], PLOT_WIDTH, PLOT_HEIGHT)
    lines = [place_annotation(a, x, y) for a in scene.annotations]
    return SceneGeometry(x=x, y=y, leader_lines=lines)


# ── RENDER ────────────────────────────────────────────────────────────────────

def render_scene(data: pd.DataFrame, scene, show_title=False) -> go.Figure:
    """
    Build the figure for ``scene`` from ``data`` (columns ``Year``, ``value``).

    Axis ranges are pinned to the year extent and to the value extent padded by
    one unit each side. The title and description ride along in
    ``layout.meta`` for pages that show them outside the chart.
    """
    geom = scene_geometry(data, scene)

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=data[YEAR_COLUMN].tolist(),
        y=data[VALUE_COLUMN].tolist(),
        mode='lines',
        name=scene.value_column,
        line=dict(color=LINE_COLOR, width=LINE_WIDTH),
        hovertemplate=f'Year %{{x}}<br>{scene.value_column}: %{{y}}<extra></extra>',
    ))

    scene_plotly_layout(fig, show_title=show_title)
    fig.update_xaxes(range=list(geom.x.domain), tickformat='d',
                     title=dict(text=YEAR_COLUMN))
    fig.update_yaxes(range=list(geom.y.domain),
                     title=dict(text=scene.value_column))

    for annotation, line in zip(scene.annotations, geom.leader_lines):
        for item in to_plotly(annotation, line):
            fig.add_annotation(**item)

    if show_title:
        fig.update_layout(title=dict(text=scene.title, x=0.5, xanchor='center',
                                     y=1.0, yanchor='top', pad=dict(t=10)))
    fig.update_layout(meta=dict(scene_id=scene.id, title=scene.title,
                                description=scene.description))

    logger.info(f"Rendered scene {scene.id}: {len(data)} points, "
                f"{len(scene.annotations)} annotations")
    return fig
