"""
Project: Hensachi
File Created: 2026-10-19
Author: Xingnan Zhu
File Name: config.py
Description:
    Tunable constants for curve sampling and deviation scaling.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CurveSettings:
    """How the normal PDF is sampled for the chart."""

    num_points: int = 101  # 100 equal steps
    sigma_span: float = 4.0  # sample over mean ± span·σ
    label_decimals: int = 1


@dataclass(frozen=True)
class DeviationScale:
    """Linear rescaling of the z-score: center + scale·z.

    The defaults give the conventional deviation value (T-score).
    """

    center: float = 50.0
    scale: float = 10.0
    decimals: int = 1


# Defaults — used when no overrides are supplied.
DEFAULT_CURVE = CurveSettings()
DEFAULT_SCALE = DeviationScale()
