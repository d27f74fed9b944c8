"""
Project: Hensachi
File Created: 2026-10-19
Author: Xingnan Zhu
File Name: test_report.py
Description:
    Tests for the printable report and the static chart rendering.
"""

from datetime import date

import pytest

from hensachi.analysis.pipeline import analyze_table
from hensachi.exceptions import ReportNotReadyError
from hensachi.report.printable import render_report, write_report
from hensachi.viz.mpl_curve import curve_data_uri, curve_png

EXAMPLE = [(60, 2), (80, 3), (100, 1)]


class TestStaticChart:
    def test_png_bytes(self):
        png = curve_png(analyze_table(EXAMPLE, 90))
        assert png.startswith(b"\x89PNG")

    def test_data_uri(self):
        assert curve_data_uri(analyze_table(EXAMPLE)).startswith("data:image/png;base64,")

    def test_no_curve_raises(self):
        with pytest.raises(ValueError):
            curve_png(analyze_table([(70, 5)]))


class TestRenderReport:
    def test_contains_results(self):
        html = render_report(analyze_table(EXAMPLE, 90), created=date(2026, 10, 19))
        assert "<p>90</p>" in html
        assert "<p>59.7</p>" in html
        assert "<p>76.67</p>" in html
        assert "<p>13.74</p>" in html
        assert "data:image/png;base64," in html
        assert "2026-10-19" in html

    def test_requires_deviation(self):
        with pytest.raises(ReportNotReadyError):
            render_report(analyze_table(EXAMPLE))

    def test_degenerate_table(self):
        html = render_report(analyze_table([(70, 5)], 70))
        assert "N/A" in html
        assert "cannot be shown" in html
        assert "<img" not in html

    def test_title_escaped(self):
        html = render_report(analyze_table(EXAMPLE, 90), title="A <b> test")
        assert "A &lt;b&gt; test" in html

    def test_write_report(self, tmp_path):
        path = write_report(analyze_table(EXAMPLE, 90), tmp_path / "report.html")
        assert path.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")
