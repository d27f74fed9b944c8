"""
Project: Hensachi
File Created: 2026-10-19
Author: Xingnan Zhu
File Name: curve.py
Description:
    Samples the normal curve of a score table for the distribution chart.

    density(x) = 1 / (σ·√(2π)) · exp(−(x − μ)² / (2σ²))

    x spans [μ − 4σ, μ + 4σ] in num_points − 1 equal steps.
    Positions are computed from the index rather than by accumulating a step,
    so both endpoints are always present.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from hensachi.config import DEFAULT_CURVE, CurveSettings
from hensachi.exceptions import DegenerateVarianceError
from hensachi.models import CurvePoint

logger = logging.getLogger(__name__)

_SQRT_2PI = math.sqrt(2.0 * math.pi)


def normal_pdf(x: np.ndarray, average: float, std_dev: float) -> np.ndarray:
    """Vectorised normal probability density."""
    z = (x - average) / std_dev
    return np.exp(-0.5 * z * z) / (std_dev * _SQRT_2PI)


def curve_domain(
    average: float,
    std_dev: float,
    num_points: int,
    sigma_span: float = DEFAULT_CURVE.sigma_span,
) -> np.ndarray:
    """Evenly spaced x positions over mean ± span·σ, endpoints included."""
    half_width = sigma_span * std_dev
    return np.linspace(average - half_width, average + half_width, num_points)


def format_label(x: float, decimals: int = DEFAULT_CURVE.label_decimals) -> str:
    label = f"{x:.{decimals}f}"
    # "-0.0" reads oddly on an axis
    return label[1:] if label.startswith("-") and float(label) == 0.0 else label


def sample_normal_curve(
    average: float,
    std_dev: float,
    num_points: int | None = None,
    settings: CurveSettings | None = None,
) -> tuple[CurvePoint, ...]:
    """Sample the normal PDF with the given mean and standard deviation.

    Args:
        average: Mean of the distribution.
        std_dev: Standard deviation; must be > 0.
        num_points: Number of samples (default 101 → 100 steps).
        settings: Optional CurveSettings override for span and label precision.

    Raises:
        DegenerateVarianceError: ``std_dev`` is not positive. Callers are
            expected to check ``AggregateStats.has_spread`` and skip.
        ValueError: fewer than two points requested, or the domain
            mean ± span·σ is not representable as a float.
    """
    s = settings or DEFAULT_CURVE
    n = s.num_points if num_points is None else num_points

    if not (std_dev > 0.0) or not math.isfinite(std_dev):
        raise DegenerateVarianceError(std_dev)
    if not math.isfinite(average):
        raise ValueError(f"average must be finite, got {average!r}")
    if n < 2:
        raise ValueError(f"num_points must be at least 2, got {n}")
    if not math.isfinite(abs(average) + s.sigma_span * std_dev):
        raise ValueError("curve domain exceeds the float range")

    xs = curve_domain(average, std_dev, n, s.sigma_span)
    densities = normal_pdf(xs, average, std_dev)

    logger.debug(
        "Sampled %d points over [%.3f, %.3f]", n, float(xs[0]), float(xs[-1]),
    )
    return tuple(
        CurvePoint(
            x=float(x),
            density=float(d),
            label=format_label(float(x), s.label_decimals),
        )
        for x, d in zip(xs, densities)
    )
