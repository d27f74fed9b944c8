"""
Project: Hensachi
File Created: 2026-10-19
Author: Xingnan Zhu
File Name: plotly_curve.py
Description:
    Normal distribution curve with Plotly.
    Designed for interactive use within Dash.

    Usage:
        fig = build_curve_figure(result)   # AnalysisResult
        fig.show()
"""

from __future__ import annotations

import plotly.graph_objects as go

from hensachi.models import AnalysisResult, CurvePoint, DeviationResult

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

CURVE_COLOR = "rgb(75, 192, 192)"
CURVE_FILL = "rgba(75, 192, 192, 0.25)"
AVERAGE_COLOR = "#9999b3"
SCORE_COLOR = "#9b59b6"

NO_SPREAD_MESSAGE = "Standard deviation is 0, so the distribution graph cannot be shown."


def _empty_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        xaxis={"visible": False},
        yaxis={"visible": False},
        annotations=[{
            "text": message,
            "showarrow": False,
            "xref": "paper", "yref": "paper",
            "x": 0.5, "y": 0.5,
            "font": {"size": 14, "color": AVERAGE_COLOR},
        }],
        plot_bgcolor="white",
    )
    return fig


def add_curve(fig: go.Figure, curve: tuple[CurvePoint, ...]) -> None:
    """Add the PDF line, x positions labelled with one decimal."""
    fig.add_trace(
        go.Scatter(
            x=[p.x for p in curve],
            y=[p.density for p in curve],
            customdata=[p.label for p in curve],
            mode="lines",
            line=dict(color=CURVE_COLOR, width=2.5, shape="spline", smoothing=0.4),
            fill="tozeroy",
            fillcolor=CURVE_FILL,
            name="Score distribution",
            hovertemplate="Score: %{customdata}<br>Density: %{y:.4f}<extra></extra>",
        )
    )


def add_markers(
    fig: go.Figure,
    average: float,
    deviation: DeviationResult | None = None,
) -> None:
    """Vertical guide lines for the average and the candidate score."""
    fig.add_vline(
        x=average,
        line=dict(color=AVERAGE_COLOR, dash="dash", width=1.5),
        annotation_text=f"Average {average:.2f}",
        annotation_position="top left",
    )
    if deviation is None:
        return
    label = (
        f"You {deviation.score:g} ({deviation.deviation_value})"
        if deviation.is_computable
        else f"You {deviation.score:g}"
    )
    fig.add_vline(
        x=deviation.score,
        line=dict(color=SCORE_COLOR, width=2),
        annotation_text=label,
        annotation_position="top right",
    )


def build_curve_figure(
    result: AnalysisResult,
    *,
    title: str = "Normal Distribution Curve",
    show_markers: bool = True,
) -> go.Figure:
    """Build the distribution chart for an analysis result.

    Returns a placeholder figure with an explanatory message when the
    distribution has no spread.
    """
    if not result.curve:
        return _empty_figure(NO_SPREAD_MESSAGE)

    fig = go.Figure()
    add_curve(fig, result.curve)
    if show_markers:
        add_markers(fig, result.stats.average, result.deviation)

    fig.update_layout(
        title=dict(text=title, x=0.5),
        showlegend=False,
        plot_bgcolor="white",
        margin=dict(l=20, r=20, t=55, b=40),
        xaxis=dict(title="Score", showgrid=True, gridcolor="#eeeeee"),
        yaxis=dict(visible=False),
    )
    return fig
