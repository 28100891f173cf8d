"""
Core math modules для геометрических примитивов

Сравнение float с толерантностью и конверсия единиц углов.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_COORD_COMPARE,
    HASH_ROUND_DIGITS,
    ROTATION_ROUND_DIGITS,
    # NaN/Inf checks
    is_infinite,
    is_valid_float,
    # Epsilon comparisons
    compare_with_tolerance,
    is_close_abs,
    # Utilities
    clamp,
    format_float,
    hash_coords,
)

# Angles
from src.core.math.angles import (
    AngleUnit,
    convert_angle,
)

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_COORD_COMPARE",
    "HASH_ROUND_DIGITS",
    "ROTATION_ROUND_DIGITS",
    # Numerical Safeguards: NaN/Inf checks
    "is_infinite",
    "is_valid_float",
    # Numerical Safeguards: Epsilon comparisons
    "compare_with_tolerance",
    "is_close_abs",
    # Numerical Safeguards: Utilities
    "clamp",
    "format_float",
    "hash_coords",
    # Angles
    "AngleUnit",
    "convert_angle",
]
