"""
Project: Hensachi
File Created: 2026-10-19
Author: Xingnan Zhu
File Name: pipeline.py
Description:
    Main analysis entry point.
    Takes a score table (and optionally one candidate score), runs
    aggregate → sample → score, and returns an AnalysisResult.

    AnalysisSession mirrors the three steps of the form:
      1. rows entered (no stats yet)
      2. stats computed (curve when there is spread)
      3. stats + one deviation result
    Any change to the rows recomputes step 2 and discards step 3.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import replace

from hensachi.config import DEFAULT_CURVE, CurveSettings, DeviationScale
from hensachi.exceptions import EmptyInputError
from hensachi.models import (
    AggregateStats,
    AnalysisResult,
    CurvePoint,
    DeviationResult,
    RawRow,
)
from hensachi.stats.aggregate import RowLike, aggregate
from hensachi.stats.curve import sample_normal_curve
from hensachi.stats.deviation import parse_candidate_score, score_deviation

logger = logging.getLogger(__name__)


def build_curve(
    stats: AggregateStats,
    settings: CurveSettings | None = None,
) -> tuple[CurvePoint, ...] | None:
    """Sample the curve for ``stats``, or None when there is no spread."""
    if not stats.has_spread:
        logger.warning(
            "Standard deviation is 0 (average=%.4f); skipping curve", stats.average,
        )
        return None
    span = (settings or DEFAULT_CURVE).sigma_span
    if not math.isfinite(abs(stats.average) + span * stats.std_dev):
        logger.warning("Curve domain overflows float range; skipping curve")
        return None
    return sample_normal_curve(stats.average, stats.std_dev, settings=settings)


def analyze_table(
    rows: Iterable[RowLike],
    candidate_score: float | str | None = None,
    *,
    curve_settings: CurveSettings | None = None,
    scale: DeviationScale | None = None,
) -> AnalysisResult:
    """Analyze a score table end to end.

    Args:
        rows: Score rows; invalid ones are discarded.
        candidate_score: Optional score to rate. Strings are validated with
            ``parse_candidate_score``.
        curve_settings: Optional CurveSettings override.
        scale: Optional DeviationScale override.

    Returns:
        AnalysisResult with stats, curve (None without spread) and
        deviation (None without a candidate).

    Raises:
        EmptyInputError: No valid rows in the table.
        InvalidCandidateScoreError: ``candidate_score`` is not a finite number.
    """
    stats = aggregate(rows)
    if stats is None:
        raise EmptyInputError()

    result = AnalysisResult(stats=stats, curve=build_curve(stats, curve_settings))
    if candidate_score is None:
        return result

    score = parse_candidate_score(candidate_score)
    return replace(result, deviation=score_deviation(score, stats, scale))


class AnalysisSession:
    """Holds the current score table and its derived results.

    Nothing is cached across edits: every row change recomputes the
    statistics from scratch and drops the previous deviation result.
    """

    def __init__(
        self,
        rows: Iterable[RowLike] = (),
        *,
        curve_settings: CurveSettings | None = None,
        scale: DeviationScale | None = None,
    ) -> None:
        self._rows: list[RowLike] = list(rows) or [RawRow()]
        self._curve_settings = curve_settings
        self._scale = scale
        self._result: AnalysisResult | None = None

    # -- rows -------------------------------------------------------------

    @property
    def rows(self) -> list[RowLike]:
        return list(self._rows)

    def add_row(self, row: RowLike | None = None) -> None:
        self._rows.append(row if row is not None else RawRow())
        self._invalidate()

    def update_row(self, index: int, row: RowLike) -> None:
        self._rows[index] = row
        self._invalidate()

    def remove_row(self, index: int) -> None:
        del self._rows[index]
        self._invalidate()

    def set_rows(self, rows: Iterable[RowLike]) -> None:
        self._rows = list(rows)
        self._invalidate()

    def _invalidate(self) -> None:
        self._result = None

    # -- derived state ----------------------------------------------------

    @property
    def result(self) -> AnalysisResult | None:
        return self._result

    @property
    def stage(self) -> int:
        """1 = no stats, 2 = stats computed, 3 = deviation computed."""
        if self._result is None:
            return 1
        return 3 if self._result.deviation is not None else 2

    def calculate(self) -> AnalysisResult:
        """Recompute statistics and curve from the current rows.

        Raises:
            EmptyInputError: No valid rows; the session is left at stage 1.
        """
        self._invalidate()
        self._result = analyze_table(
            self._rows,
            curve_settings=self._curve_settings,
            scale=self._scale,
        )
        return self._result

    def score(self, candidate_score: float | str) -> DeviationResult | None:
        """Rate one candidate score against the current statistics.

        Returns None when statistics have not been calculated yet.

        Raises:
            InvalidCandidateScoreError: the candidate is not a finite number;
                any previous deviation result is discarded.
        """
        if self._result is None:
            return None
        base = replace(self._result, deviation=None)
        self._result = base
        score = parse_candidate_score(candidate_score)
        self._result = replace(
            base, deviation=score_deviation(score, base.stats, self._scale),
        )
        return self._result.deviation
