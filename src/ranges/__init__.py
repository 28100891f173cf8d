"""
Ranges — Границы и числовые интервалы
"""

from src.ranges.boundary import Boundary
from src.ranges.interval import Interval

__all__ = [
    "Boundary",
    "Interval",
]
