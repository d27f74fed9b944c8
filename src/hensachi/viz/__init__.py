"""Visualization of the score distribution."""

from hensachi.viz.mpl_curve import curve_data_uri, curve_png, draw_curve
from hensachi.viz.plotly_curve import build_curve_figure

__all__ = ["build_curve_figure", "curve_data_uri", "curve_png", "draw_curve"]
