"""
Hensachi — deviation values (T-scores) from a score frequency table.

Usage::

    from hensachi import aggregate, sample_normal_curve, score_deviation

    stats = aggregate([("60", "2"), ("80", "3"), ("100", "1")])
    curve = sample_normal_curve(stats.average, stats.std_dev)
    result = score_deviation(90, stats)   # result.deviation_value == 59.7
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("hensachi")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Core models
from hensachi.models import (
    AggregateStats,
    AnalysisResult,
    CurvePoint,
    DeviationResult,
    RawRow,
    ScoreRow,
)

# Configuration
from hensachi.config import CurveSettings, DeviationScale

# Errors
from hensachi.exceptions import (
    DegenerateVarianceError,
    EmptyInputError,
    HensachiError,
    InvalidCandidateScoreError,
    ReportNotReadyError,
)

# Statistics
from hensachi.stats.aggregate import aggregate, parse_rows
from hensachi.stats.curve import sample_normal_curve
from hensachi.stats.deviation import parse_candidate_score, score_deviation

# Analysis
from hensachi.analysis.pipeline import AnalysisSession, analyze_table

__all__ = [
    # Core
    "AggregateStats",
    "AnalysisResult",
    "CurvePoint",
    "DeviationResult",
    "RawRow",
    "ScoreRow",
    # Config
    "CurveSettings",
    "DeviationScale",
    # Errors
    "DegenerateVarianceError",
    "EmptyInputError",
    "HensachiError",
    "InvalidCandidateScoreError",
    "ReportNotReadyError",
    # Statistics
    "aggregate",
    "parse_candidate_score",
    "parse_rows",
    "sample_normal_curve",
    "score_deviation",
    # Analysis
    "AnalysisSession",
    "analyze_table",
]
