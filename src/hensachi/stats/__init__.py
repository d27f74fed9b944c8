"""
Project: Hensachi
File Created: 2026-10-19
Author: Xingnan Zhu
File Name: __init__.py
Description:
    Statistical core: aggregation, curve sampling and deviation scoring.
"""

from hensachi.stats.aggregate import aggregate, parse_count, parse_rows, parse_score
from hensachi.stats.curve import normal_pdf, sample_normal_curve
from hensachi.stats.deviation import (
    parse_candidate_score,
    round_half_away,
    score_deviation,
)

__all__ = [
    "aggregate",
    "normal_pdf",
    "parse_candidate_score",
    "parse_count",
    "parse_rows",
    "parse_score",
    "round_half_away",
    "sample_normal_curve",
    "score_deviation",
]
