"""
Sets — Математическое множество и агрегаты над ним
"""

# Aggregates
from src.sets.aggregates import (
    average,
    flatten,
    maximum,
    minimum,
    total,
    total_count,
    value_range,
)

# Math Set
from src.sets.math_set import Set

__all__ = [
    # Aggregates: Numeric
    "average",
    "maximum",
    "minimum",
    "total",
    "value_range",
    # Aggregates: Nested sets
    "flatten",
    "total_count",
    # Math Set
    "Set",
]
