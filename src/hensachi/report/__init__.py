"""Printable reports."""

from hensachi.report.printable import render_report, write_report

__all__ = ["render_report", "write_report"]
