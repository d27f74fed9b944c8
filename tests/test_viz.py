"""
Project: Hensachi
File Created: 2026-10-19
Author: Xingnan Zhu
File Name: test_viz.py
Description:
    Tests for the interactive Plotly curve figure.
"""

import plotly.graph_objects as go

from hensachi.analysis.pipeline import analyze_table
from hensachi.viz.plotly_curve import NO_SPREAD_MESSAGE, build_curve_figure

EXAMPLE = [(60, 2), (80, 3), (100, 1)]


class TestCurveFigure:
    def test_single_curve_trace(self):
        fig = build_curve_figure(analyze_table(EXAMPLE))
        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 1
        assert len(fig.data[0].x) == 101
        assert list(fig.data[0].customdata[:1]) == ["21.7"]

    def test_average_marker_only(self):
        fig = build_curve_figure(analyze_table(EXAMPLE))
        assert len(fig.layout.shapes) == 1

    def test_candidate_marker(self):
        fig = build_curve_figure(analyze_table(EXAMPLE, 90))
        assert len(fig.layout.shapes) == 2
        assert any("59.7" in a.text for a in fig.layout.annotations)

    def test_markers_can_be_hidden(self):
        fig = build_curve_figure(analyze_table(EXAMPLE, 90), show_markers=False)
        assert len(fig.layout.shapes) == 0

    def test_no_spread_placeholder(self):
        fig = build_curve_figure(analyze_table([(70, 5)]))
        assert len(fig.data) == 0
        assert fig.layout.annotations[0].text == NO_SPREAD_MESSAGE
