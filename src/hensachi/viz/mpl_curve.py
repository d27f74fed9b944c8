"""
Project: Hensachi
File Created: 2026-10-19
Author: Xingnan Zhu
File Name: mpl_curve.py
Description:
    Static rendering of the distribution curve with matplotlib.
    Used for the printable report, where the chart is embedded as a PNG.
"""

from __future__ import annotations

import base64
import io

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from hensachi.models import AnalysisResult


def draw_curve(
    result: AnalysisResult,
    *,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 4.5),
    line_color: str = "#4bc0c0",
    fill_alpha: float = 0.25,
    score_color: str = "#9b59b6",
) -> tuple[Figure, Axes]:
    """Draw the PDF curve, with the candidate score marked if present.

    Args:
        result: Analysis result with a curve.
        ax: Optional existing axes to draw on.
        figsize: Figure size (width, height) in inches.

    Raises:
        ValueError: The result has no curve (std dev 0).
    """
    if not result.curve:
        raise ValueError("Result has no curve to draw")

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.get_figure()

    xs = [p.x for p in result.curve]
    ys = [p.density for p in result.curve]

    ax.plot(xs, ys, color=line_color, linewidth=2)
    ax.fill_between(xs, ys, color=line_color, alpha=fill_alpha)
    ax.axvline(result.stats.average, color="#888888", linestyle="--", linewidth=1)

    if result.deviation is not None:
        ax.axvline(result.deviation.score, color=score_color, linewidth=2)

    ax.set_xlabel("Score")
    ax.set_yticks([])
    for side in ("top", "right", "left"):
        ax.spines[side].set_visible(False)
    ax.set_xlim(xs[0], xs[-1])
    ax.set_ylim(bottom=0)
    return fig, ax


def curve_png(result: AnalysisResult, *, dpi: int = 120) -> bytes:
    """Render the curve to PNG bytes."""
    fig, _ = draw_curve(result)
    buf = io.BytesIO()
    try:
        fig.savefig(buf, format="png", dpi=dpi, bbox_inches="tight")
    finally:
        plt.close(fig)
    return buf.getvalue()


def curve_data_uri(result: AnalysisResult, *, dpi: int = 120) -> str:
    """PNG of the curve as a ``data:`` URI, ready for an ``<img src>``."""
    encoded = base64.b64encode(curve_png(result, dpi=dpi)).decode("ascii")
    return f"data:image/png;base64,{encoded}"
