"""
Angles — Конверсия единиц измерения углов

Единственный допустимый способ преобразований между:
- градусами (DEGREES)
- радианами (RADIANS)

Все геометрические операции с углами (поворот, угол между векторами,
точка на окружности) принимают единицу измерения и приводят угол через
convert_angle.
"""

import math
from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class AngleUnit(str, Enum):
    """Единица измерения угла"""

    DEGREES = "degrees"
    RADIANS = "radians"


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def _coerce_unit(unit: AngleUnit | str) -> AngleUnit | None:
    try:
        return AngleUnit(unit)
    except ValueError:
        return None


def convert_angle(
    input_unit: AngleUnit | str,
    angle: float,
    output_unit: AngleUnit | str,
) -> float:
    """
    Конверсия угла из одной единицы измерения в другую.

    Если единицы совпадают, угол возвращается без изменений (без потери
    точности на промежуточном переводе в градусы). Иначе угол переводится
    в градусы, а затем в целевую единицу.

    Args:
        input_unit: Единица, в которой задан angle
        angle: Значение угла
        output_unit: Целевая единица

    Returns:
        Угол в output_unit

    Raises:
        ValueError: Если input_unit или output_unit не является AngleUnit

    Examples:
        >>> convert_angle(AngleUnit.DEGREES, 180.0, AngleUnit.RADIANS)
        3.141592653589793
        >>> convert_angle(AngleUnit.RADIANS, 1.5, AngleUnit.RADIANS)
        1.5
    """
    source = _coerce_unit(input_unit)
    target = _coerce_unit(output_unit)

    if source is not None and source == target:
        return angle

    if source == AngleUnit.DEGREES:
        angle_in_degrees = angle
    elif source == AngleUnit.RADIANS:
        angle_in_degrees = angle * 180.0 / math.pi
    else:
        raise ValueError("Invalid input angle unit.")

    if target == AngleUnit.DEGREES:
        return angle_in_degrees
    elif target == AngleUnit.RADIANS:
        return angle_in_degrees * math.pi / 180.0
    else:
        raise ValueError("Invalid output angle unit.")
