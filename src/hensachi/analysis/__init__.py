"""
Project: Hensachi
File Created: 2026-10-19
Author: Xingnan Zhu
File Name: __init__.py
Description:
    Analysis modules.
"""

from hensachi.analysis.pipeline import AnalysisSession, analyze_table, build_curve

__all__ = ["AnalysisSession", "analyze_table", "build_curve"]
