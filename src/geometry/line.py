"""
Line — Неограниченная прямая на плоскости

Прямая задаётся двумя различными опорными точками p1, p2.
Наклон и пересечения с осями не хранятся, а вычисляются из опорных точек.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. p1 != p2 (с толерантностью Point) при создании и при каждом присваивании p1/p2
2. Вертикальная прямая всегда имеет slope == +inf (никогда -inf)
3. Равенство прямых сравнивает наклон и пересечение с осью, а не опорные точки
"""

import logging
import math
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from src.core.errors import InvariantViolation
from src.core.math.numerical_safeguards import hash_coords, is_close_abs
from src.geometry.primitives import Point, Vector

logger = logging.getLogger(__name__)


class Line(BaseModel):
    """
    Прямая через две точки.

    Создание:
        Line(p1, p2)                          — две различные точки
        Line(point)                           — через начало координат и point (point != origin)
        Line.from_coordinates(x1, y1, x2, y2)
        Line.from_slope_intercept(slope, intercept)

    Операторы:
        line + v, line - v — параллельный перенос на вектор
    """

    p1: Point = Field(..., description="Первая опорная точка")
    p2: Point = Field(..., description="Вторая опорная точка")

    model_config = {"validate_assignment": True}

    def __init__(self, p1: Any = None, p2: Any = None, **data: Any) -> None:
        if p2 is None and p1 is not None:
            p1, p2 = Point.origin(), p1
        super().__init__(p1=p1, p2=p2, **data)

    @field_validator("p1", "p2")
    @classmethod
    def validate_distinct_anchors(cls, v: Point, info: ValidationInfo) -> Point:
        """
        Опорные точки должны различаться.

        При присваивании info.data содержит текущее значение второй точки.
        """
        other_name = "p2" if info.field_name == "p1" else "p1"
        other = info.data.get(other_name)
        if other is not None and other == v:
            logger.debug("Rejected line anchors: %s and %s coincide", v, other)
            raise InvariantViolation("Cannot create a line with two same points")
        return v

    # =========================================================================
    # FACTORIES
    # =========================================================================

    @classmethod
    def horizontal(cls) -> "Line":
        """Горизонтальная прямая по оси X"""
        return cls(Point(0.0, 0.0), Point(1.0, 0.0))

    @classmethod
    def vertical(cls) -> "Line":
        """Вертикальная прямая по оси Y"""
        return cls(Point(0.0, 0.0), Point(0.0, 1.0))

    @classmethod
    def from_coordinates(cls, x1: float, y1: float, x2: float, y2: float) -> "Line":
        return cls(Point(x1, y1), Point(x2, y2))

    @classmethod
    def from_slope_intercept(cls, slope: float, intercept: float) -> "Line":
        """
        Прямая y = slope * x + intercept.

        Опорные точки: (0, intercept) и (1, slope + intercept).
        """
        return cls(Point(0.0, intercept), Point(1.0, slope + intercept))

    # =========================================================================
    # DERIVED VALUES
    # =========================================================================

    @property
    def direction(self) -> Vector:
        """Вектор направления p2 - p1"""
        return Vector.from_point(self.p2 - self.p1)

    @property
    def slope(self) -> float:
        """
        Наклон прямой.

        Вычисляется по второй точке прямой, перенесённой так, что p1 в начале
        координат. Для вертикальной прямой всегда +inf.
        """
        p = self.p2 - self.p1
        if p.x == 0:
            return math.inf
        slope = p.y / p.x
        if slope == -math.inf:
            slope = math.inf
        return slope

    @property
    def y_intercept(self) -> float:
        """
        Пересечение с осью Y.

        Вертикальная прямая: 0 если проходит через ось Y, иначе бесконечность
        со знаком, противоположным p1.x.
        """
        if self.is_vertical:
            if self.p1.x == 0:
                return 0.0
            return -math.inf if self.p1.x > 0 else math.inf
        return self.p1.y - self.slope * self.p1.x

    @property
    def x_intercept(self) -> float:
        """
        Пересечение с осью X.

        Горизонтальная прямая: 0 если лежит на оси X, иначе бесконечность
        со знаком, противоположным p1.y. Вертикальная прямая: p1.x.
        """
        if self.is_horizontal:
            if self.p1.y == 0:
                return 0.0
            return -math.inf if self.p1.y > 0 else math.inf
        if self.is_vertical:
            return self.p1.x
        return -self.y_intercept / self.slope

    @property
    def is_horizontal(self) -> bool:
        return self.slope == 0

    @property
    def is_vertical(self) -> bool:
        return self.slope == math.inf

    # =========================================================================
    # RELATIONS
    # =========================================================================

    def is_parallel_to(self, other: "Line") -> bool:
        """Параллельность: равные наклоны (две вертикальные прямые параллельны)"""
        return self.slope == other.slope

    def is_perpendicular_to(self, other: "Line") -> bool:
        """Перпендикулярность: горизонталь/вертикаль или slope1 * slope2 == -1"""
        if self.is_horizontal and other.is_vertical:
            return True
        if self.is_vertical and other.is_horizontal:
            return True
        return self.slope * other.slope == -1

    def contains(self, point: Point) -> bool:
        """Лежит ли точка на прямой (с толерантностью Point)"""
        if self.is_vertical:
            return is_close_abs(point.x, self.p1.x)
        return self.point_at_x(point.x) == point

    def point_at_x(self, x: float) -> Optional[Point]:
        """
        Точка прямой с заданной координатой X.

        Returns:
            None для вертикальной прямой (ноль или бесконечно много решений)
        """
        if self.is_vertical:
            return None
        if self.is_horizontal:
            return Point(x, self.p1.y)
        return Point(x, self.slope * x + self.y_intercept)

    def point_at_y(self, y: float) -> Optional[Point]:
        """
        Точка прямой с заданной координатой Y.

        Returns:
            None для горизонтальной прямой (ноль или бесконечно много решений)
        """
        if self.is_horizontal:
            return None
        if self.is_vertical:
            return Point(self.p1.x, y)
        return Point((y - self.y_intercept) / self.slope, y)

    def intersection(self, other: "Line") -> Optional[Point]:
        """
        Точка пересечения двух прямых.

        Совпадающие прямые неотличимы от параллельных: в обоих случаях None.

        Returns:
            Point пересечения или None для параллельных/совпадающих прямых
        """
        if self.is_parallel_to(other):
            logger.debug("No intersection: %s is parallel to %s", self, other)
            return None

        # Формула через наклоны не определена для вертикальной прямой
        if self.is_vertical:
            return other.point_at_x(self.p1.x)
        if other.is_vertical:
            return self.point_at_x(other.p1.x)

        x = (other.y_intercept - self.y_intercept) / (self.slope - other.slope)
        return self.point_at_x(x)

    # =========================================================================
    # TRANSFORMS
    # =========================================================================

    def to_origin(self, p2: bool = False, normalize: bool = False) -> "Line":
        """
        Перенос прямой так, чтобы она проходила через начало координат.

        Args:
            p2: Переносить в начало координат p2 вместо p1
            normalize: Нормализовать обе опорные точки (начало координат не меняется)

        Returns:
            Новая прямая
        """
        anchor = self.p2 if p2 else self.p1
        line = self - anchor.to_vector()
        if normalize:
            return Line(line.p1.to_normalized(), line.p2.to_normalized())
        return line

    def parallel_through(self, point: Point) -> "Line":
        """Параллельная прямая через point (с тем же вектором направления)"""
        return Line(point, point + self.direction)

    def clone(self) -> "Line":
        return self.model_copy(deep=True)

    # =========================================================================
    # DUNDER
    # =========================================================================

    def _axis_intercept(self) -> float:
        return self.p1.x if self.is_vertical else self.y_intercept

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return is_close_abs(self.slope, other.slope) and is_close_abs(
            self._axis_intercept(), other._axis_intercept()
        )

    def __hash__(self) -> int:
        return hash_coords(self.slope, self._axis_intercept())

    def __str__(self) -> str:
        return f"-{self.p1}--{self.p2}-"

    def __add__(self, other: object) -> "Line":
        if isinstance(other, Vector):
            return Line(self.p1 + other, self.p2 + other)
        return NotImplemented

    def __sub__(self, other: object) -> "Line":
        if isinstance(other, Vector):
            return Line(self.p1 - other, self.p2 - other)
        return NotImplemented
