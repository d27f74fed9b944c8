"""
Project: Hensachi
File Created: 2026-10-19
Author: Xingnan Zhu
File Name: aggregate.py
Description:
    Turns a raw score table into its weighted average and standard deviation.

    average  = Σ(score × count) / Σcount
    variance = Σ(count × (score − average)²) / Σcount     (population)
    std_dev  = √variance, forced to exactly 0.0 when variance ≤ 0 or NaN

    Rows that do not parse are dropped silently; an empty table yields None.
    Sums use math.fsum so the result does not depend on row order.
    Moments are taken on scores divided by the largest absolute score, so
    intermediate values stay finite and a table of identical scores gives
    exactly 0.0.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable
from typing import Union

from hensachi.models import AggregateStats, RawRow, ScoreRow

logger = logging.getLogger(__name__)

# Anything that can describe a row: validated, raw form input, or a plain pair.
RowLike = Union[ScoreRow, RawRow, tuple]

# Leading-prefix parsers, matching how a number input field is read:
# "85" → 85.0, "  72.5pt" → 72.5, "3.7" (count) → 3, "" → invalid.
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def parse_score(value: object) -> float | None:
    """Parse a score value. Returns None unless it is a finite real."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _FLOAT_PREFIX.match(str(value))
        if not match:
            return None
        number = float(match.group(1))
    return number if math.isfinite(number) else None


def parse_count(value: object) -> int | None:
    """Parse a count value. Returns None unless it is an integer > 0.

    Fractional counts are truncated toward zero ("3.7" → 3).
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        count = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            return None
        count = int(value)
    else:
        match = _INT_PREFIX.match(str(value))
        if not match:
            return None
        count = int(match.group(1))
    return count if count > 0 else None


def _fields(row: RowLike) -> tuple[object, object]:
    if isinstance(row, (ScoreRow, RawRow)):
        return row.score, row.count
    score, count = row
    return score, count


def parse_rows(rows: Iterable[RowLike]) -> list[ScoreRow]:
    """Validate rows, dropping any whose score or count does not parse."""
    valid: list[ScoreRow] = []
    for i, row in enumerate(rows):
        raw_score, raw_count = _fields(row)
        score = parse_score(raw_score)
        count = parse_count(raw_count)
        if score is None or count is None:
            logger.debug("Dropping row %d: score=%r count=%r", i, raw_score, raw_count)
            continue
        valid.append(ScoreRow(score=score, count=count))
    return valid


def score_scale(rows: list[ScoreRow]) -> float:
    """Largest absolute score; moments are taken on scores divided by it."""
    return max((abs(r.score) for r in rows), default=0.0)


def weighted_mean(rows: list[ScoreRow], total_count: int) -> float:
    scale = score_scale(rows)
    if scale == 0.0:
        return 0.0
    return scale * (math.fsum(r.count * (r.score / scale) for r in rows) / total_count)


def _scaled_second_moment(
    rows: list[ScoreRow], average: float, total_count: int, scale: float,
) -> float:
    # Deviations of scaled scores lie in [-2, 2], so every term stays finite.
    center = average / scale
    terms = []
    for r in rows:
        d = r.score / scale - center
        terms.append(r.count * (d * d))
    return math.fsum(terms) / total_count


def weighted_variance(rows: list[ScoreRow], average: float, total_count: int) -> float:
    """Population variance of the frequency table (divides by Σcount, not Σcount − 1)."""
    scale = score_scale(rows)
    if scale == 0.0:
        return 0.0
    return scale * scale * _scaled_second_moment(rows, average, total_count, scale)


def weighted_std(rows: list[ScoreRow], average: float, total_count: int) -> float:
    """Square root of ``weighted_variance``, computed without squaring the scale."""
    scale = score_scale(rows)
    if scale == 0.0:
        return 0.0
    std = scale * _safe_std(_scaled_second_moment(rows, average, total_count, scale))
    return std if math.isfinite(std) else 0.0


def _safe_std(variance: float) -> float:
    if math.isnan(variance) or variance <= 0.0:
        return 0.0
    std = math.sqrt(variance)
    return std if math.isfinite(std) else 0.0


def aggregate(rows: Iterable[RowLike]) -> AggregateStats | None:
    """Compute weighted average and standard deviation of a score table.

    Args:
        rows: ScoreRow / RawRow instances or (score, count) pairs. Fields may
            be strings as typed into a form; invalid rows are discarded.

    Returns:
        AggregateStats, or None when no valid rows remain.
    """
    valid = parse_rows(rows)
    total_count = sum(r.count for r in valid)
    if not valid or total_count == 0:
        logger.info("No valid rows to aggregate")
        return None

    try:
        average = weighted_mean(valid, total_count)
        std_dev = weighted_std(valid, average, total_count)
    except (OverflowError, ValueError):
        # Only reachable with counts too large for a float
        logger.warning("Score table overflows float range (n=%d)", total_count)
        return None

    logger.info(
        "Aggregated %d rows (n=%d): average=%.4f std_dev=%.4f",
        len(valid), total_count, average, std_dev,
    )
    return AggregateStats(
        average=average,
        std_dev=std_dev,
        total_count=total_count,
        n_rows=len(valid),
    )
