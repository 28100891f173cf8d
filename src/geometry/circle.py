"""
Circle — Окружность на плоскости

Окружность задаётся центром (Point) и радиусом.
Диаметр, длина окружности и площадь вычисляются из радиуса (только чтение).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. radius > 0 и не NaN при создании и при каждом присваивании
2. distance(point) знаковое: > 0 снаружи, < 0 внутри, 0 на окружности
"""

import logging
import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.core.errors import InvariantViolation
from src.core.math.angles import AngleUnit
from src.core.math.numerical_safeguards import (
    compare_with_tolerance,
    format_float,
    hash_coords,
    is_close_abs,
)
from src.geometry.primitives import Point, Vector

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class Position(str, Enum):
    """Положение точки относительно фигуры"""

    OUTSIDE = "outside"
    ON = "on"
    INSIDE = "inside"


# =============================================================================
# CIRCLE MODEL
# =============================================================================


class Circle(BaseModel):
    """
    Окружность.

    Создание:
        Circle(center, radius)
        Circle(radius)          — центр в начале координат

    Операторы:
        c + v, c - v  — перенос центра на вектор
        c + k, c - k  — увеличение/уменьшение радиуса на число
    """

    center: Point = Field(default_factory=Point.origin, description="Центр окружности")
    radius: float = Field(..., description="Радиус (строго положительный)")

    model_config = {"validate_assignment": True}

    def __init__(self, center: Any = None, radius: Any = None, **data: Any) -> None:
        if radius is None and isinstance(center, (int, float)):
            center, radius = None, center
        if center is None:
            center = Point.origin()
        super().__init__(center=center, radius=radius, **data)

    @field_validator("radius")
    @classmethod
    def validate_radius_positive(cls, v: float) -> float:
        """Радиус должен быть положительным и не NaN"""
        if math.isnan(v) or v <= 0:
            logger.debug("Rejected circle radius %s", v)
            raise InvariantViolation(f"Radius must be positive, got {v}")
        return v

    # =========================================================================
    # DERIVED VALUES
    # =========================================================================

    @property
    def diameter(self) -> float:
        return 2 * self.radius

    @property
    def circumference(self) -> float:
        return self.radius * math.tau

    @property
    def area(self) -> float:
        return math.pi * self.radius * self.radius

    # =========================================================================
    # POINT RELATIONS
    # =========================================================================

    def distance(self, point: Point) -> float:
        """
        Знаковое расстояние от точки до окружности.

        Returns:
            point.distance(center) - radius: > 0 снаружи, < 0 внутри, 0 на окружности
        """
        return point.distance(self.center) - self.radius

    def locate(self, point: Point, tol: float = 0.0) -> Position:
        """
        Положение точки относительно окружности по знаку distance.

        Args:
            point: Проверяемая точка
            tol: Толерантность полосы ON (default: 0.0, точный знак)

        Returns:
            Position.OUTSIDE / Position.ON / Position.INSIDE
        """
        sign = compare_with_tolerance(self.distance(point), 0.0, tol)
        if sign > 0:
            return Position.OUTSIDE
        if sign < 0:
            return Position.INSIDE
        return Position.ON

    def point_at_angle(self, angle: float, unit: AngleUnit = AngleUnit.RADIANS) -> Point:
        """Точка окружности под углом angle от положительной полуоси X"""
        return self.center + Vector.from_angle(angle, unit) * self.radius

    def clone(self) -> "Circle":
        return self.model_copy(deep=True)

    # =========================================================================
    # DUNDER
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Circle):
            return NotImplemented
        return self.center == other.center and is_close_abs(self.radius, other.radius)

    def __hash__(self) -> int:
        return hash_coords(self.center.x, self.center.y, self.radius)

    def __str__(self) -> str:
        return f"Circle({format_float(self.radius)}) : {self.center}"

    def __add__(self, other: object) -> "Circle":
        if isinstance(other, Vector):
            return Circle(self.center + other, self.radius)
        if isinstance(other, (int, float)):
            return Circle(self.center.clone(), self.radius + other)
        return NotImplemented

    def __sub__(self, other: object) -> "Circle":
        if isinstance(other, Vector):
            return Circle(self.center - other, self.radius)
        if isinstance(other, (int, float)):
            return Circle(self.center.clone(), self.radius - other)
        return NotImplemented
