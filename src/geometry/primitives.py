"""
Primitives — Point и Vector на плоскости

Оба типа хранят пару координат (x, y):
- Point обозначает положение
- Vector обозначает смещение/направление (поворот, угол между векторами, скалярное произведение)

Неизменяемые (frozen) Pydantic модели: значение не меняется после создания,
изменение означает создание нового значения (v = v.rotated_by(a)).

Равенство покоординатное с абсолютной толерантностью EPS_COORD_COMPARE.
Point и Vector никогда не равны друг другу, преобразование только явное
(Point.from_vector, Vector.from_point).
"""

import math
from typing import Any

from pydantic import BaseModel, Field, model_validator

from src.core.errors import UndefinedOperationError
from src.core.math.angles import AngleUnit, convert_angle
from src.core.math.numerical_safeguards import (
    ROTATION_ROUND_DIGITS,
    clamp,
    format_float,
    hash_coords,
    is_close_abs,
)


# =============================================================================
# BASE MODEL
# =============================================================================


class _Planar(BaseModel):
    """Общая часть Point и Vector: координаты, равенство, хеш"""

    x: float = Field(0.0, description="Координата X")
    y: float = Field(0.0, description="Координата Y")

    model_config = {"frozen": True}

    def __init__(self, x: float = 0.0, y: float = 0.0, **data: Any) -> None:
        super().__init__(x=x, y=y, **data)

    @model_validator(mode="before")
    @classmethod
    def coerce_pair(cls, data: Any) -> Any:
        """Пара (x, y) принимается везде, где валидируется модель"""
        if isinstance(data, (tuple, list)):
            if len(data) != 2:
                raise ValueError(f"expected an (x, y) pair, got {len(data)} values")
            return {"x": data[0], "y": data[1]}
        return data

    def _norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    @property
    def distance_from_origin(self) -> float:
        """Евклидово расстояние до (0, 0)"""
        return self._norm()

    def distance(self, other: "_Planar") -> float:
        """Евклидово расстояние до другого значения того же типа"""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    @property
    def theta(self) -> float:
        """Угол от положительной полуоси X в радианах, в диапазоне [0, 2π)"""
        angle = math.atan2(self.y, self.x)
        if angle < 0:
            angle += math.tau
        return angle

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def _normalized_coords(self) -> tuple[float, float]:
        length = self._norm()
        if length == 0:
            return self.x, self.y
        return self.x / length, self.y / length

    def clone(self):
        return self.model_copy()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return is_close_abs(self.x, other.x) and is_close_abs(self.y, other.y)

    def __hash__(self) -> int:
        return hash_coords(self.x, self.y)


# =============================================================================
# VECTOR
# =============================================================================


class Vector(_Planar):
    """
    Вектор на плоскости.

    Операторы:
        v1 + v2, v1 - v2, -v   — покоординатно
        v * k, k * v, v / k    — масштабирование (деление на 0 → ZeroDivisionError)
        v1 * v2                — скалярное произведение (float)
    """

    @classmethod
    def zero(cls) -> "Vector":
        """Нулевой вектор [0, 0]"""
        return cls(0.0, 0.0)

    @classmethod
    def unit_x(cls) -> "Vector":
        """Единичный вектор [1, 0]"""
        return cls(1.0, 0.0)

    @classmethod
    def unit_y(cls) -> "Vector":
        """Единичный вектор [0, 1]"""
        return cls(0.0, 1.0)

    @classmethod
    def from_angle(cls, angle: float, unit: AngleUnit = AngleUnit.RADIANS) -> "Vector":
        """
        Единичный вектор с заданным углом.

        Отсчёт от [1, 0] против часовой стрелки.
        """
        radians = convert_angle(unit, angle, AngleUnit.RADIANS)
        return cls.unit_x().rotated_by(radians)

    @classmethod
    def from_point(cls, point: "Point") -> "Vector":
        """Явное преобразование Point → Vector (координаты не меняются)"""
        return cls(point.x, point.y)

    def to_point(self) -> "Point":
        return Point(self.x, self.y)

    @property
    def magnitude(self) -> float:
        """Длина вектора"""
        return self._norm()

    def to_normalized(self) -> "Vector":
        """
        Нормализованная копия вектора.

        Returns:
            Вектор длины 1 с тем же направлением; нулевой вектор остаётся нулевым
        """
        return Vector(*self._normalized_coords())

    def dot(self, other: "Vector") -> float:
        """Скалярное произведение"""
        return self.x * other.x + self.y * other.y

    def angle_between(self, other: "Vector", unit: AngleUnit = AngleUnit.RADIANS) -> float:
        """
        Угол между двумя векторами.

        Args:
            other: Второй вектор
            unit: Единица измерения результата (default: RADIANS)

        Returns:
            Угол в диапазоне [0, π] (или [0, 180] в градусах)

        Raises:
            UndefinedOperationError: Если хотя бы один из векторов нулевой
        """
        if self.magnitude == 0 or other.magnitude == 0:
            raise UndefinedOperationError("Cannot calculate angle with a zero vector.")

        cosine = self.dot(other) / (self.magnitude * other.magnitude)
        # acos вне [-1, 1] не определён, а погрешность может вывести за границы
        angle = math.acos(clamp(cosine, -1.0, 1.0))

        if unit != AngleUnit.RADIANS:
            angle = convert_angle(AngleUnit.RADIANS, angle, unit)
        return angle

    def rotated_by(self, angle: float, unit: AngleUnit = AngleUnit.RADIANS) -> "Vector":
        """
        Повёрнутая против часовой стрелки копия вектора.

        Координаты результата округляются до ROTATION_ROUND_DIGITS знаков.

        Args:
            angle: Угол поворота
            unit: Единица измерения angle (default: RADIANS)

        Returns:
            Новый вектор
        """
        if unit != AngleUnit.RADIANS:
            angle = convert_angle(unit, angle, AngleUnit.RADIANS)

        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        x = round(self.x * cos_a - self.y * sin_a, ROTATION_ROUND_DIGITS)
        y = round(self.x * sin_a + self.y * cos_a, ROTATION_ROUND_DIGITS)
        return Vector(x, y)

    def __str__(self) -> str:
        return f"[{format_float(self.x)}, {format_float(self.y)}]"

    def __add__(self, other: object) -> "Vector":
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: object) -> "Vector":
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y)

    def __mul__(self, other: object) -> Any:
        if isinstance(other, Vector):
            return self.dot(other)
        if isinstance(other, (int, float)):
            return Vector(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Vector":
        if isinstance(other, (int, float)):
            return Vector(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: object) -> "Vector":
        if not isinstance(other, (int, float)):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("Attempted to divide a vector by zero.")
        return Vector(self.x / other, self.y / other)


# =============================================================================
# POINT
# =============================================================================


class Point(_Planar):
    """
    Точка на плоскости.

    Операторы:
        p1 + p2, p1 - p2       — покоординатно (результат Point)
        p + v, p - v           — смещение на вектор
        -p, p * k, k * p, p / k (деление на 0 → ZeroDivisionError)
    """

    @classmethod
    def origin(cls) -> "Point":
        """Точка (0, 0)"""
        return cls(0.0, 0.0)

    @classmethod
    def from_vector(cls, vector: Vector) -> "Point":
        """Явное преобразование Vector → Point (координаты не меняются)"""
        return cls(vector.x, vector.y)

    def to_vector(self) -> Vector:
        return Vector(self.x, self.y)

    @property
    def grid_dist_from_origin(self) -> float:
        """Манхэттенское расстояние до (0, 0)"""
        return abs(self.x) + abs(self.y)

    def grid_dist(self, other: "Point") -> float:
        """Манхэттенское расстояние до другой точки"""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def to_normalized(self) -> "Point":
        """Нормализованная точка (как если бы она была вектором)"""
        return Point(*self._normalized_coords())

    def __str__(self) -> str:
        return f"({format_float(self.x)}, {format_float(self.y)})"

    def __add__(self, other: object) -> "Point":
        if isinstance(other, (Point, Vector)):
            return Point(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: object) -> "Point":
        if isinstance(other, (Point, Vector)):
            return Point(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __mul__(self, other: object) -> "Point":
        if isinstance(other, (int, float)):
            return Point(self.x * other, self.y * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Point":
        if not isinstance(other, (int, float)):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("Attempted to divide a point by zero.")
        return Point(self.x / other, self.y / other)
