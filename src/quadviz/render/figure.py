"""Plotly rendering of a quadrant session.

The renderer only draws what the session computed: marker sizes and colors
come from each ``MarkerSpec`` and every label is placed with its pixel offset.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import plotly.graph_objects as go

from quadviz.config.positions import metric_display_name
from quadviz.models import Theme
from quadviz.quadrant import LabelSpec, MarkerSpec, QuadrantSession
from quadviz.quadrant.layout import palette_for


logger = logging.getLogger(__name__)

DEFAULT_PLOT_HEIGHT = 400
TICK_COUNT = 6
GRID_COLOR = "rgba(128, 128, 128, 0.2)"
PLOT_MARGIN = dict(t=80, r=30, b=60, l=60)
DOMAIN_LOW_FACTOR = 0.9
DOMAIN_HIGH_FACTOR = 1.05
ANALYSIS_NOTE = (
    "Elite performers (top-right) excel in both metrics. Players in top-left and "
    "bottom-right may offer situational value."
)


def format_tick_value(value: float) -> str:
    """Whole numbers from 10 up, one decimal below that."""

    if value == 0:
        return "0"
    if value >= 10:
        return str(math.floor(value + 0.5))
    return f"{value:.1f}".rstrip("0").rstrip(".") or "0"


def axis_domain(values: Sequence[float]) -> Optional[Tuple[float, float]]:
    if not values:
        return None
    low = min(values) * DOMAIN_LOW_FACTOR
    high = max(values) * DOMAIN_HIGH_FACTOR
    if low == high:
        return low - 1, high + 1
    return min(low, high), max(low, high)


def _ticks(domain: Tuple[float, float]) -> Tuple[List[float], List[str]]:
    low, high = domain
    step = (high - low) / (TICK_COUNT - 1)
    values = [low + step * i for i in range(TICK_COUNT)]
    return values, [format_tick_value(value) for value in values]


def _axis_layout(title: str, values: Sequence[float]) -> dict:
    layout = dict(title=title, showgrid=True, gridcolor=GRID_COLOR, griddash="dash", zeroline=False)
    domain = axis_domain(values)
    if domain is not None:
        tickvals, ticktext = _ticks(domain)
        layout.update(range=list(domain), tickmode="array", tickvals=tickvals, ticktext=ticktext)
    return layout


def _label_annotation(marker: MarkerSpec, label: LabelSpec) -> dict:
    text = f"<b>{label.text}</b>" if label.bold else label.text
    return dict(
        x=marker.x,
        y=marker.y,
        text=text,
        showarrow=False,
        xanchor="center",
        yanchor="bottom",
        xshift=label.offset_x,
        # Layout offsets grow downward; plotly shifts grow upward.
        yshift=-label.offset_y,
        font=dict(size=label.font_size, color=label.color),
        bgcolor=label.halo_color,
        opacity=0.9,
    )


def build_quadrant_figure(session: QuadrantSession, *, height: int = DEFAULT_PLOT_HEIGHT) -> go.Figure:
    """Build the scatter figure for the session's current state."""

    markers = [marker for marker in session.markers() if marker.plottable]
    skipped = len(session.players) - len(markers)
    if skipped:
        logger.debug("Skipping %d player(s) without plottable coordinates", skipped)

    players = {player.player_id: player for player in session.players}
    palette = palette_for(session.theme)
    x_name = metric_display_name(session.x_metric)
    y_name = metric_display_name(session.y_metric)

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=[marker.x for marker in markers],
            y=[marker.y for marker in markers],
            mode="markers",
            name="Players",
            ids=[marker.player_id for marker in markers],
            marker=dict(
                size=[marker.radius * 2 for marker in markers],
                color=[marker.style.fill for marker in markers],
                line=dict(
                    color=[marker.style.stroke for marker in markers],
                    width=[marker.style.stroke_width for marker in markers],
                ),
                opacity=1,
            ),
            customdata=[
                [
                    players[marker.player_id].name,
                    players[marker.player_id].team,
                    players[marker.player_id].note,
                ]
                for marker in markers
            ],
            hovertemplate=(
                "<b>%{customdata[0]}</b><br>Team: %{customdata[1]}<br>"
                f"{x_name}: %{{x:.2f}}<br>{y_name}: %{{y:.2f}}<br>"
                "<i>%{customdata[2]}</i><extra></extra>"
            ),
        )
    )

    for marker in markers:
        for label in marker.labels:
            fig.add_annotation(**_label_annotation(marker, label))

    stats = session.analysis.stats
    if stats.x_median is not None:
        fig.add_vline(x=stats.x_median, line_color=palette.reference_line_color, line_width=2)
    if stats.y_median is not None:
        fig.add_hline(y=stats.y_median, line_color=palette.reference_line_color, line_width=2)

    quadrants = session.quadrant_labels()
    for text, x, y, xanchor, yanchor in (
        (quadrants.top_left, 0.01, 0.99, "left", "top"),
        (quadrants.top_right, 0.99, 0.99, "right", "top"),
        (quadrants.bottom_left, 0.01, 0.01, "left", "bottom"),
        (quadrants.bottom_right, 0.99, 0.01, "right", "bottom"),
    ):
        fig.add_annotation(
            x=x,
            y=y,
            xref="paper",
            yref="paper",
            text=text,
            showarrow=False,
            xanchor=xanchor,
            yanchor=yanchor,
            font=dict(size=11, color=palette.reference_line_color),
        )

    fig.update_layout(
        title=f"{session.title()}<br><sup>{session.description()}</sup>",
        template="plotly_dark" if session.theme is Theme.DARK else "plotly_white",
        height=height,
        margin=PLOT_MARGIN,
        showlegend=False,
        clickmode="event",
        xaxis=_axis_layout(x_name, [marker.x for marker in markers]),
        yaxis=_axis_layout(y_name, [marker.y for marker in markers]),
    )
    return fig


def write_quadrant_html(
    session: QuadrantSession,
    path: Union[str, Path],
    *,
    height: int = DEFAULT_PLOT_HEIGHT,
) -> Path:
    """Write a standalone HTML page with the chart and the analysis note."""

    target = Path(path)
    fig = build_quadrant_figure(session, height=height)
    chart = fig.to_html(full_html=False, include_plotlyjs="cdn")
    page = (
        "<!DOCTYPE html><html><head><meta charset='utf-8'>"
        f"<title>{session.title()}</title></head><body>"
        f"{chart}<p><small>{ANALYSIS_NOTE}</small></p></body></html>"
    )
    target.write_text(page, encoding="utf-8")
    logger.info("Wrote quadrant chart to %s", target)
    return target


__all__ = [
    "axis_domain",
    "build_quadrant_figure",
    "format_tick_value",
    "write_quadrant_html",
]
