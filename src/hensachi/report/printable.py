"""
Project: Hensachi
File Created: 2026-10-19
Author: Xingnan Zhu
File Name: printable.py
Description:
    Printable deviation report — a self-contained HTML page with
    the candidate's score and deviation value, the distribution chart
    (embedded PNG) and the table's average / standard deviation.
"""

from __future__ import annotations

import html
import logging
from datetime import date
from pathlib import Path
from string import Template

from hensachi.exceptions import ReportNotReadyError
from hensachi.models import AnalysisResult
from hensachi.viz.mpl_curve import curve_data_uri

logger = logging.getLogger(__name__)

REPORT_TITLE = "Deviation Value Report"

_STYLE = """
  body { font-family: system-ui, -apple-system, 'Segoe UI', Roboto, 'Helvetica Neue', sans-serif; margin: 0; padding: 0; }
  .report-container { max-width: 680px; margin: 20px auto; padding: 20px; }
  h1 { text-align: center; border-bottom: 2px solid #333; padding-bottom: 10px; margin-bottom: 40px; font-size: 24px; }
  .grid { display: grid; grid-template-columns: 1fr 1fr; gap: 20px; margin-bottom: 40px; }
  .card { border: 1px solid #e2e8f0; border-radius: 0.5rem; padding: 1.5rem; text-align: center; }
  .card h2 { margin-top: 0; font-size: 16px; color: #4a5568; font-weight: normal; }
  .card p { font-size: 36px; font-weight: bold; margin: 0; color: #2d3748; }
  .chart-container { margin-top: 20px; text-align: center; }
  .chart-container h2 { font-size: 20px; margin-bottom: 15px; }
  .chart-container img { max-width: 100%; height: auto; border: 1px solid #e2e8f0; border-radius: 0.5rem; }
  .chart-container .no-chart { color: #718096; border: 2px dashed #e2e8f0; border-radius: 0.5rem; padding: 1rem; }
  .footer { margin-top: 40px; text-align: center; font-size: 12px; color: #718096; }
"""

_TEMPLATE = Template("""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <title>$title</title>
    <style>$style</style>
  </head>
  <body>
    <div class="report-container">
      <h1>$title</h1>

      <div class="grid">
        <div class="card"><h2>Your score</h2><p>$score</p></div>
        <div class="card"><h2>Your deviation value</h2><p>$deviation</p></div>
      </div>

      <div class="chart-container">
        <h2>Normal Distribution Curve</h2>
        $chart
      </div>

      <div class="grid" style="margin-top: 40px;">
        <div class="card"><h2>Average</h2><p>$average</p></div>
        <div class="card"><h2>Standard deviation</h2><p>$std_dev</p></div>
      </div>

      <div class="footer">Created: $created</div>
    </div>
  </body>
</html>
""")


def render_report(
    result: AnalysisResult,
    *,
    created: date | None = None,
    title: str = REPORT_TITLE,
) -> str:
    """Render the printable report for a fully scored result.

    Raises:
        ReportNotReadyError: No candidate score has been scored yet.
    """
    if result.deviation is None:
        raise ReportNotReadyError(
            "Complete step 3 (score a candidate) before creating a report"
        )

    dev = result.deviation
    if result.curve:
        chart = f'<img src="{curve_data_uri(result)}" alt="Normal distribution curve" />'
    else:
        chart = '<p class="no-chart">Standard deviation is 0, so the distribution graph cannot be shown.</p>'

    deviation_text = "N/A" if dev.deviation_value is None else f"{dev.deviation_value}"
    return _TEMPLATE.substitute(
        title=html.escape(title),
        style=_STYLE,
        score=html.escape(f"{dev.score:g}"),
        deviation=deviation_text,
        chart=chart,
        average=f"{result.stats.average:.2f}",
        std_dev=f"{result.stats.std_dev:.2f}",
        created=(created or date.today()).isoformat(),
    )


def write_report(result: AnalysisResult, path: str | Path, **kwargs) -> Path:
    """Render the report and write it to ``path`` (UTF-8)."""
    path = Path(path)
    path.write_text(render_report(result, **kwargs), encoding="utf-8")
    logger.info("Wrote report to %s", path)
    return path
