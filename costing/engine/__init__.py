"""
Costing engine.

Pure Python math, no I/O. Given an Item and AppSettings, produce a
CalcResult with per-piece weights, per-kg/per-piece prices and a full
cost breakdown.
"""

from .calculator import CostingCalculator, calculate
from .rates import CircleRatePolicy

__all__ = ["CostingCalculator", "CircleRatePolicy", "calculate"]
