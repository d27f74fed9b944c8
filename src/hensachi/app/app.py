"""
Project: Hensachi
File Created: 2026-10-19
Author: Xingnan Zhu
File Name: app.py
Description:
    Dash web application for measuring a deviation value.
    Step 1: enter the score table (score, number of people).
    Step 2: average, standard deviation and the distribution curve.
    Step 3: enter your own score and get its deviation value.
    A printable HTML report can be downloaded once step 3 is done.

    Usage:
        uv run hensachi-app              # via entry point
        uv run python -m hensachi.app    # direct
"""

from __future__ import annotations

import logging
from dataclasses import asdict

import dash
import dash_bootstrap_components as dbc
from dash import Input, Output, State, ctx, dash_table, dcc, html, no_update

from hensachi.analysis.pipeline import build_curve
from hensachi.exceptions import InvalidCandidateScoreError
from hensachi.io.table import rows_from_records
from hensachi.models import AggregateStats, AnalysisResult, DeviationResult
from hensachi.report.printable import render_report
from hensachi.stats.aggregate import aggregate
from hensachi.stats.deviation import parse_candidate_score, score_deviation
from hensachi.viz.plotly_curve import build_curve_figure

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
EMPTY_ROW = {"score": "", "count": ""}

MSG_INVALID_TABLE = "Please enter valid data."
MSG_INVALID_SCORE = "Please enter a valid score."
MSG_REPORT_NOT_READY = "Complete step 3 before creating a report."


# ---------------------------------------------------------------------------
# Store <-> model helpers
# ---------------------------------------------------------------------------
def calculate_records(records: list[dict] | None) -> tuple[dict | None, str | None]:
    """Aggregate table records into store data.

    Returns (stats_data, alert_message); exactly one of them is None.
    """
    stats = aggregate(rows_from_records(records or []))
    if stats is None:
        return None, MSG_INVALID_TABLE
    return asdict(stats), None


def score_candidate(
    text: str | None,
    stats_data: dict | None,
) -> tuple[dict | None, str | None]:
    """Score the candidate input against stored statistics.

    Returns (deviation_data, alert_message). Both are None when no
    statistics have been calculated yet.
    """
    if not stats_data:
        return None, None
    try:
        score = parse_candidate_score(text)
    except InvalidCandidateScoreError:
        return None, MSG_INVALID_SCORE
    result = score_deviation(score, AggregateStats(**stats_data))
    return asdict(result), None


def result_from_stores(
    stats_data: dict | None,
    deviation_data: dict | None = None,
) -> AnalysisResult | None:
    """Rebuild the AnalysisResult from store data (the curve is re-sampled)."""
    if not stats_data:
        return None
    stats = AggregateStats(**stats_data)
    deviation = DeviationResult(**deviation_data) if deviation_data else None
    return AnalysisResult(stats=stats, curve=build_curve(stats), deviation=deviation)


def report_download(
    stats_data: dict | None,
    deviation_data: dict | None,
) -> tuple[dict | None, str | None]:
    """Build the report download from store data.

    Returns (download_data, alert_message); exactly one of them is None.
    """
    result = result_from_stores(stats_data, deviation_data)
    if result is None or result.deviation is None:
        return None, MSG_REPORT_NOT_READY
    download = dict(
        content=render_report(result),
        filename="deviation-report.html",
        type="text/html",
    )
    return download, None


def append_blank_row(rows: list[dict] | None) -> list[dict]:
    return (rows or []) + [dict(EMPTY_ROW)]


def describe_difference(deviation: DeviationResult) -> str:
    diff = deviation.score_difference
    if diff > 0:
        return f"{diff:.2f} points above the average."
    if diff < 0:
        return f"{abs(diff):.2f} points below the average."
    return "Exactly the average score."


# ---------------------------------------------------------------------------
# Dash App
# ---------------------------------------------------------------------------
app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.BOOTSTRAP],
    title="Hensachi — Deviation Value",
    update_title=None,
    suppress_callback_exceptions=True,
)

# Expose WSGI server for deployment (gunicorn hensachi.app:server)
server = app.server


# ---------------------------------------------------------------------------
# Layout Helpers
# ---------------------------------------------------------------------------
def _build_header() -> html.Div:
    return html.Div(
        className="d-flex justify-content-between align-items-center mb-4",
        children=[
            html.H1("Measure your deviation value!", className="fw-bold"),
            html.Div([
                dbc.Button(
                    "Print report", id="print-btn", color="secondary",
                    n_clicks=0, style={"display": "none"},
                ),
                dcc.Download(id="report-download"),
            ]),
        ],
    )


def _build_step1() -> dbc.Card:
    return dbc.Card(
        dbc.CardBody([
            html.H2("Step 1", className="h4"),
            html.H3("Enter the number of people for each score", className="h5 mb-3"),
            dash_table.DataTable(
                id="score-table",
                columns=[
                    {"name": "Score", "id": "score", "type": "numeric"},
                    {"name": "People", "id": "count", "type": "numeric"},
                ],
                data=[dict(EMPTY_ROW)],
                editable=True,
                row_deletable=True,
                style_cell={"textAlign": "left", "padding": "6px"},
                style_header={"backgroundColor": "#f3f4f6", "fontWeight": "600"},
            ),
            html.Div(
                className="mt-3 d-flex gap-2",
                children=[
                    dbc.Button("Add row", id="add-row-btn", color="primary", n_clicks=0),
                    dbc.Button("Calculate", id="calculate-btn", color="success", n_clicks=0),
                ],
            ),
            dbc.Alert(id="table-alert", color="warning", is_open=False, className="mt-3"),
        ]),
        className="shadow-sm",
    )


def _build_step2() -> dbc.Card:
    return dbc.Card(
        dbc.CardBody([
            html.H2("Step 2", className="h4"),
            html.H3("Results and score distribution", className="h5 mb-3"),
            dbc.Row([
                dbc.Col(html.Div(id="stats-summary"), md=5),
                dbc.Col(
                    dcc.Graph(id="curve-graph", config={"displayModeBar": False}),
                    md=7,
                ),
            ], className="align-items-center"),
        ]),
        id="step2-card",
        className="shadow-sm mt-4",
        style={"display": "none"},
    )


def _build_step3() -> dbc.Card:
    return dbc.Card(
        dbc.CardBody([
            html.H2("Step 3", className="h4"),
            html.H3("Check your deviation value", className="h5 mb-3"),
            html.Div(
                className="d-flex flex-wrap align-items-center gap-3",
                children=[
                    dbc.Input(
                        id="candidate-input", type="number",
                        placeholder="Enter your score", style={"width": "12rem"},
                    ),
                    dbc.Button("Calculate deviation value", id="score-btn", color="info", n_clicks=0),
                ],
            ),
            dbc.Alert(id="score-alert", color="warning", is_open=False, className="mt-3"),
            html.Div(id="deviation-panel", className="mt-4"),
        ]),
        id="step3-card",
        className="shadow-sm mt-4",
        style={"display": "none"},
    )


# ---------------------------------------------------------------------------
# App Layout
# ---------------------------------------------------------------------------
app.layout = dbc.Container(
    className="p-4",
    children=[
        _build_header(),
        dbc.Alert(id="report-alert", color="warning", is_open=False, dismissable=True),
        _build_step1(),
        _build_step2(),
        _build_step3(),
        # Hidden stores
        dcc.Store(id="stats-store", data=None),
        dcc.Store(id="deviation-store", data=None),
    ],
)


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------
@app.callback(
    Output("score-table", "data"),
    Input("add-row-btn", "n_clicks"),
    State("score-table", "data"),
    prevent_initial_call=True,
)
def add_row(n_clicks, rows):
    return append_blank_row(rows)


@app.callback(
    Output("stats-store", "data"),
    Output("table-alert", "children"),
    Output("table-alert", "is_open"),
    Output("candidate-input", "value"),
    Input("calculate-btn", "n_clicks"),
    Input("score-table", "data"),
    prevent_initial_call=True,
)
def update_stats(n_clicks, records):
    """Calculate on click; any edit to the table discards stale results."""
    if ctx.triggered_id == "score-table":
        return None, no_update, False, no_update

    stats_data, message = calculate_records(records)
    if stats_data is None:
        return None, message, True, ""
    return stats_data, None, False, ""


@app.callback(
    Output("deviation-store", "data"),
    Output("score-alert", "children"),
    Output("score-alert", "is_open"),
    Input("score-btn", "n_clicks"),
    Input("candidate-input", "value"),
    Input("stats-store", "data"),
    prevent_initial_call=True,
)
def update_deviation(n_clicks, candidate, stats_data):
    """Score on click; a new candidate or new statistics resets the result."""
    if ctx.triggered_id != "score-btn":
        return None, None, False

    deviation_data, message = score_candidate(
        None if candidate is None else str(candidate), stats_data,
    )
    return deviation_data, message, message is not None


@app.callback(
    Output("step2-card", "style"),
    Output("step3-card", "style"),
    Output("stats-summary", "children"),
    Output("curve-graph", "figure"),
    Output("deviation-panel", "children"),
    Output("print-btn", "style"),
    Input("stats-store", "data"),
    Input("deviation-store", "data"),
)
def render_results(stats_data, deviation_data):
    result = result_from_stores(stats_data, deviation_data)
    if result is None:
        hidden = {"display": "none"}
        return hidden, hidden, None, {"data": [], "layout": {}}, None, hidden

    shown = {"display": "block"}
    summary = html.Div(
        className="bg-light p-3 rounded fs-5",
        children=[
            html.P([html.Strong("Average: "), html.Span(f"{result.stats.average:.2f}", className="font-monospace text-primary")]),
            html.P([html.Strong("Standard deviation: "), html.Span(f"{result.stats.std_dev:.2f}", className="font-monospace text-primary")]),
            html.P(f"{result.stats.total_count} people", className="text-muted mb-0"),
        ],
    )

    figure = build_curve_figure(result)
    panel = _build_deviation_panel(result.deviation) if result.deviation else None
    return shown, shown, summary, figure, panel, shown


def _build_deviation_panel(deviation: DeviationResult) -> html.Div:
    headline = (
        f"Your deviation value: {deviation.deviation_value}"
        if deviation.is_computable
        else "The deviation value cannot be calculated (standard deviation is 0)."
    )
    return html.Div(
        className="p-3 border-start border-4 border-primary bg-light",
        children=[
            html.P(headline, className="fs-3 fw-bold text-primary mb-2"),
            html.P(describe_difference(deviation), className="fs-5 mb-0"),
        ],
    )


@app.callback(
    Output("report-download", "data"),
    Output("report-alert", "children"),
    Output("report-alert", "is_open"),
    Input("print-btn", "n_clicks"),
    State("stats-store", "data"),
    State("deviation-store", "data"),
    prevent_initial_call=True,
)
def download_report(n_clicks, stats_data, deviation_data):
    download, message = report_download(stats_data, deviation_data)
    if download is None:
        logger.info(message)
        return no_update, message, True
    return download, None, False


# ---------------------------------------------------------------------------
# Entry Point
# ---------------------------------------------------------------------------
def main():
    """Launch the Hensachi Dash app."""
    print("Hensachi — Starting at http://127.0.0.1:8050")
    app.run(debug=True, use_reloader=False, host="127.0.0.1", port=8050)


if __name__ == "__main__":
    main()
