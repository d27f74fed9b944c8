"""
Project: Hensachi
File Created: 2026-10-19
Author: Xingnan Zhu
File Name: cli.py
Description:
    Command-line entry point.

    Usage:
        hensachi scores.csv                       # average / std dev
        hensachi scores.csv --score 90            # + deviation value
        hensachi scores.csv --score 90 --report report.html
        hensachi scores.csv --points 201 --curve  # print the sampled curve
"""

from __future__ import annotations

import argparse
import logging
import sys

from hensachi.analysis.pipeline import analyze_table
from hensachi.config import CurveSettings
from hensachi.exceptions import EmptyInputError, InvalidCandidateScoreError, ReportNotReadyError
from hensachi.io.table import load_table
from hensachi.models import AnalysisResult
from hensachi.report.printable import write_report


def _kv(key: str, value, indent: int = 2) -> str:
    return f"{' ' * indent}{key}: {value}"


def format_result(result: AnalysisResult, *, show_curve: bool = False) -> str:
    """Human-readable summary of an analysis result."""
    stats = result.stats
    lines = [
        _kv("People", stats.total_count),
        _kv("Average", f"{stats.average:.2f}"),
        _kv("Std dev", f"{stats.std_dev:.2f}"),
    ]
    if result.curve is None:
        lines.append("  Standard deviation is 0; no distribution curve.")
    elif show_curve:
        lines.append("  Curve (x, density):")
        lines.extend(f"    {p.label:>8}  {p.density:.6f}" for p in result.curve)

    dev = result.deviation
    if dev is not None:
        value = dev.deviation_value if dev.is_computable else "not computable (std dev is 0)"
        lines.append(_kv("Your score", f"{dev.score:g}"))
        lines.append(_kv("Deviation value", value))
        lines.append(_kv("Difference", f"{dev.score_difference:+.2f}"))
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hensachi",
        description="Average, standard deviation and deviation value from a score table.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("table", help="CSV file with score,count columns")
    parser.add_argument(
        "--score", default=None,
        help="Your score; prints its deviation value",
    )
    parser.add_argument(
        "--points", type=int, default=CurveSettings().num_points,
        help="Number of curve samples (default: %(default)s)",
    )
    parser.add_argument(
        "--curve", action="store_true",
        help="Print the sampled normal curve",
    )
    parser.add_argument(
        "--report", default=None, metavar="PATH",
        help="Write a printable HTML report (requires --score)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.points < 2:
        parser.error("--points must be at least 2")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        rows = load_table(args.table)
    except FileNotFoundError:
        print(f"ERROR: File not found: {args.table}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"ERROR: Could not read score table: {exc}", file=sys.stderr)
        return 1

    try:
        result = analyze_table(
            rows,
            args.score,
            curve_settings=CurveSettings(num_points=args.points),
        )
    except EmptyInputError:
        print("ERROR: Please enter valid data (no valid score rows).", file=sys.stderr)
        return 1
    except InvalidCandidateScoreError:
        print(f"ERROR: Please enter a valid score (got {args.score!r}).", file=sys.stderr)
        return 1

    print(format_result(result, show_curve=args.curve))

    if args.report:
        try:
            path = write_report(result, args.report)
        except ReportNotReadyError:
            print("ERROR: --report requires --score.", file=sys.stderr)
            return 1
        print(f"Report written to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
