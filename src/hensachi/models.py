"""
Project: Hensachi
File Created: 2026-10-19
Author: Xingnan Zhu
File Name: models.py
Description:
    Core data models for Hensachi score analysis.
    A score table is a frequency table: each row says "count people got score".
    Everything downstream of the table (statistics, curve, deviation value)
    is an immutable derivation and is recomputed wholesale when rows change.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RawRow:
    """A row exactly as typed into the form. Both fields are strings."""

    score: str = ""
    count: str = ""


@dataclass(frozen=True)
class ScoreRow:
    """A validated row: ``count`` observations at value ``score``."""

    score: float
    count: int  # always > 0 once validated


@dataclass(frozen=True)
class AggregateStats:
    """Weighted first/second moments of a score table."""

    average: float
    std_dev: float  # population std dev, never NaN, 0.0 when degenerate
    total_count: int = 0
    n_rows: int = 0

    @property
    def has_spread(self) -> bool:
        """False when every observation sits on the same score."""
        return self.std_dev > 0.0


@dataclass(frozen=True)
class CurvePoint:
    """One sample of the normal PDF."""

    x: float
    density: float
    label: str  # x rounded for axis display, e.g. "76.7"


@dataclass(frozen=True)
class DeviationResult:
    """Deviation value of a single candidate score.

    ``deviation_value`` is None when the table has no spread (std dev 0),
    in which case only ``score_difference`` is meaningful.
    """

    score: float
    deviation_value: float | None
    score_difference: float

    @property
    def is_computable(self) -> bool:
        return self.deviation_value is not None

    @property
    def position(self) -> str:
        """Where the candidate sits relative to the average."""
        if self.score_difference > 0:
            return "above"
        if self.score_difference < 0:
            return "below"
        return "equal"


@dataclass(frozen=True)
class AnalysisResult:
    """Complete analysis of a score table.

    ``curve`` is None when the distribution has no spread;
    ``deviation`` is None until a candidate score has been scored.
    """

    stats: AggregateStats
    curve: tuple[CurvePoint, ...] | None = None
    deviation: DeviationResult | None = None

    @property
    def curve_labels(self) -> list[str]:
        return [p.label for p in self.curve] if self.curve else []

    @property
    def curve_densities(self) -> list[float]:
        return [p.density for p in self.curve] if self.curve else []
