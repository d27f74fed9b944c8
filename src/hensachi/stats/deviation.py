"""
Project: Hensachi
File Created: 2026-10-19
Author: Xingnan Zhu
File Name: deviation.py
Description:
    Rates one score against the table: its deviation value (T-score).

    deviation = (score − average) / std_dev × 10 + 50

    Rounded to one decimal, half away from zero, on the decimal form of the
    float (62.45 → 62.5, −0.05 → −0.1).
    When std_dev is 0 the value is not computable and is returned as None;
    the score difference is always returned.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from hensachi.config import DEFAULT_SCALE, DeviationScale
from hensachi.exceptions import InvalidCandidateScoreError
from hensachi.models import AggregateStats, DeviationResult
from hensachi.stats.aggregate import parse_score


def round_half_away(value: float, decimals: int = 1) -> float:
    """Round like decimal display formatting does, ties away from zero."""
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-decimals)
    # repr gives the shortest decimal that round-trips, i.e. what a user sees
    exact = Decimal(repr(value))
    with localcontext() as decimal_ctx:
        # quantize needs room for every integer digit plus the kept decimals
        decimal_ctx.prec = max(decimal_ctx.prec, exact.adjusted() + decimals + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def parse_candidate_score(value: object) -> float:
    """Validate raw candidate input before it reaches the scorer.

    Raises:
        InvalidCandidateScoreError: empty, non-numeric or non-finite input.
    """
    score = parse_score(value)
    if score is None:
        raise InvalidCandidateScoreError(value)
    return score


def score_deviation(
    candidate_score: float,
    stats: AggregateStats,
    scale: DeviationScale | None = None,
) -> DeviationResult:
    """Compute the deviation value of ``candidate_score`` against ``stats``.

    Args:
        candidate_score: A finite score, already validated by the caller.
        stats: Output of ``aggregate``.
        scale: Optional DeviationScale override (center / scale / decimals).

    Raises:
        InvalidCandidateScoreError: ``candidate_score`` is NaN or infinite.
    """
    if isinstance(candidate_score, bool) or not math.isfinite(candidate_score):
        raise InvalidCandidateScoreError(candidate_score)

    sc = scale or DEFAULT_SCALE
    difference = candidate_score - stats.average

    if stats.std_dev == 0.0:
        return DeviationResult(
            score=candidate_score,
            deviation_value=None,
            score_difference=difference,
        )

    raw = difference / stats.std_dev * sc.scale + sc.center
    return DeviationResult(
        score=candidate_score,
        deviation_value=round_half_away(raw, sc.decimals),
        score_difference=difference,
    )
