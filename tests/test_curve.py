"""
Project: Hensachi
File Created: 2026-10-19
Author: Xingnan Zhu
File Name: test_curve.py
Description:
    Tests for normal PDF curve sampling.
"""

import math

import numpy as np
import pytest
from scipy import integrate, stats

from hensachi.config import CurveSettings
from hensachi.exceptions import DegenerateVarianceError
from hensachi.stats.curve import format_label, sample_normal_curve


class TestDomain:
    def test_default_has_101_points(self):
        curve = sample_normal_curve(76.67, 13.74)
        assert len(curve) == 101

    def test_endpoints_are_four_sigma(self):
        curve = sample_normal_curve(50.0, 10.0)
        assert curve[0].x == pytest.approx(10.0)
        assert curve[-1].x == pytest.approx(90.0)

    def test_equal_steps(self):
        curve = sample_normal_curve(50.0, 10.0)
        steps = np.diff([p.x for p in curve])
        assert np.allclose(steps, 0.8)

    def test_custom_point_count(self):
        curve = sample_normal_curve(0.0, 1.0, num_points=5)
        assert [p.x for p in curve] == pytest.approx([-4, -2, 0, 2, 4])

    def test_settings_span(self):
        curve = sample_normal_curve(0.0, 2.0, settings=CurveSettings(num_points=3, sigma_span=3.0))
        assert [p.x for p in curve] == pytest.approx([-6, 0, 6])


class TestDensity:
    def test_peak_at_mean(self):
        sigma = 13.74
        curve = sample_normal_curve(76.67, sigma)
        peak = max(curve, key=lambda p: p.density)
        assert peak.x == pytest.approx(76.67)
        assert peak.density == pytest.approx(1 / (sigma * math.sqrt(2 * math.pi)))

    def test_matches_scipy(self):
        curve = sample_normal_curve(60.0, 7.5)
        xs = np.array([p.x for p in curve])
        expected = stats.norm.pdf(xs, loc=60.0, scale=7.5)
        assert np.allclose([p.density for p in curve], expected, rtol=1e-12)

    def test_symmetric(self):
        curve = sample_normal_curve(50.0, 10.0)
        densities = [p.density for p in curve]
        assert densities == pytest.approx(densities[::-1])

    def test_non_negative(self):
        curve = sample_normal_curve(0.0, 0.001)
        assert all(p.density >= 0 for p in curve)

    def test_integrates_to_one(self):
        curve = sample_normal_curve(76.67, 13.74)
        area = integrate.trapezoid([p.density for p in curve], [p.x for p in curve])
        assert area == pytest.approx(1.0, abs=1e-3)

    def test_deterministic(self):
        assert sample_normal_curve(12.3, 4.5) == sample_normal_curve(12.3, 4.5)


class TestLabels:
    def test_one_decimal(self):
        curve = sample_normal_curve(0.0, 1.0, num_points=5)
        assert [p.label for p in curve] == ["-4.0", "-2.0", "0.0", "2.0", "4.0"]

    def test_density_keeps_full_precision(self):
        curve = sample_normal_curve(76.6666, 13.7437)
        assert curve[50].label == "76.7"
        assert curve[50].x == pytest.approx(76.6666)

    def test_negative_zero_label(self):
        assert format_label(-0.04) == "0.0"
        assert format_label(-0.06) == "-0.1"


class TestPreconditions:
    def test_zero_std_raises(self):
        with pytest.raises(DegenerateVarianceError):
            sample_normal_curve(70.0, 0.0)

    def test_negative_std_raises(self):
        with pytest.raises(DegenerateVarianceError):
            sample_normal_curve(70.0, -1.0)

    def test_nan_std_raises(self):
        with pytest.raises(DegenerateVarianceError):
            sample_normal_curve(70.0, float("nan"))

    def test_degenerate_is_value_error(self):
        with pytest.raises(ValueError):
            sample_normal_curve(70.0, 0.0)

    def test_too_few_points(self):
        with pytest.raises(ValueError):
            sample_normal_curve(0.0, 1.0, num_points=1)

    def test_domain_beyond_float_range(self):
        with pytest.raises(ValueError, match="float range"):
            sample_normal_curve(0.0, 1e308)
