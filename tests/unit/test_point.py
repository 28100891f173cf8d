"""
Тесты для Point

Проверяет:
1. Создание и явное преобразование Point ↔ Vector
2. Евклидово и манхэттенское расстояние, theta
3. Арифметику, закон обратимости Point ± Vector
4. Равенство с толерантностью и хеширование
5. Неизменяемость и clone()
"""

import math

import pytest
from pydantic import ValidationError

from src.geometry.primitives import Point, Vector

# =============================================================================
# СОЗДАНИЕ
# =============================================================================


class TestPointCreation:
    """Тесты создания Point"""

    @pytest.mark.parametrize("x,y", [(1, 2.5), (-5.2, 0)])
    def test_positional_construction(self, x: float, y: float) -> None:
        """Координаты задаются позиционно"""
        p = Point(x, y)
        assert p.x == x
        assert p.y == y

    def test_keyword_construction(self) -> None:
        """Координаты задаются по имени"""
        assert Point(x=3, y=-1) == Point(3, -1)

    def test_default_is_origin(self) -> None:
        """Point(): начало координат"""
        assert Point() == Point.origin()

    @pytest.mark.parametrize("x,y", [(1, 2.5), (-5.2, 0)])
    def test_from_vector(self, x: float, y: float) -> None:
        """Point.from_vector сохраняет координаты"""
        p = Point.from_vector(Vector(x, y))
        assert isinstance(p, Point)
        assert p.as_tuple() == (x, y)

    def test_pair_validated_as_point(self) -> None:
        """Пара (x, y) валидируется как Point"""
        assert Point.model_validate((1, 2)) == Point(1, 2)

    def test_wrong_pair_length_rejected(self) -> None:
        """Кортеж не из двух значений отклоняется"""
        with pytest.raises(ValidationError, match="expected an \\(x, y\\) pair"):
            Point.model_validate((1, 2, 3))


# =============================================================================
# РАССТОЯНИЯ
# =============================================================================


class TestPointDistances:
    """Тесты расстояний и угла"""

    @pytest.mark.parametrize("x,y,expected", [(3, 4, 5), (-3, -4, 5), (0, 5, 5)])
    def test_distance_from_origin(self, x: float, y: float, expected: float) -> None:
        """Евклидово расстояние до начала координат"""
        assert Point(x, y).distance_from_origin == expected

    @pytest.mark.parametrize("x,y,expected", [(3, 6, 9), (-3, -6, 9), (9, 0, 9)])
    def test_grid_dist_from_origin(self, x: float, y: float, expected: float) -> None:
        """Манхэттенское расстояние до начала координат"""
        assert Point(x, y).grid_dist_from_origin == expected

    def test_distance_between_points(self) -> None:
        """Евклидово расстояние между точками симметрично"""
        p1 = Point(1, 1)
        p2 = Point(4, 5)
        assert p1.distance(p2) == 5.0
        assert p2.distance(p1) == 5.0

    def test_grid_dist_between_points(self) -> None:
        """Манхэттенское расстояние между точками"""
        assert Point(1, 1).grid_dist(Point(4, -3)) == 7.0

    @pytest.mark.parametrize(
        "x,y,expected",
        [
            (3, 0, 0.0),
            (2.5, 2.5, math.pi * 0.25),
            (-3, 0, math.pi),
            (0, -3, math.pi * 1.5),
        ],
    )
    def test_theta(self, x: float, y: float, expected: float) -> None:
        """theta в диапазоне [0, 2π)"""
        assert Point(x, y).theta == pytest.approx(expected)

    def test_to_normalized(self) -> None:
        """Нормализация точки как вектора"""
        assert Point(3, 4).to_normalized() == Point(0.6, 0.8)
        assert Point.origin().to_normalized() == Point.origin()


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestPointArithmetic:
    """Тесты операторов Point"""

    @pytest.mark.parametrize("x1,y1,x2,y2", [(1, 1.5, 3.2, 6), (1, -7.2, -4.5, 8)])
    def test_addition(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Покоординатное сложение точек"""
        assert Point(x1, y1) + Point(x2, y2) == Point(x1 + x2, y1 + y2)

    @pytest.mark.parametrize("x1,y1,x2,y2", [(5, 7, 1.5, 4), (5.5, 6, 7, -2.2)])
    def test_subtraction(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Покоординатное вычитание точек"""
        assert Point(x1, y1) - Point(x2, y2) == Point(x1 - x2, y1 - y2)

    def test_addition_with_origin(self) -> None:
        """Начало координат: нейтральный элемент"""
        p = Point(5, 8)
        assert p + Point.origin() == p
        assert Point.origin() + p == p

    def test_add_vector_returns_point(self) -> None:
        """Point + Vector → Point"""
        result = Point(1, 2) + Vector(3, 4)
        assert isinstance(result, Point)
        assert result == Point(4, 6)

    @pytest.mark.parametrize(
        "x,y,vx,vy",
        [(2, 4, 5, 3), (-1.5, 0.25, 0.1, -7), (1e5, -1e5, 3.3, 2.2)],
    )
    def test_inverse_law(self, x: float, y: float, vx: float, vy: float) -> None:
        """p - v + v == p и p + zero == p"""
        p = Point(x, y)
        v = Vector(vx, vy)
        assert p - v + v == p
        assert p + Vector.zero() == p

    def test_negation(self) -> None:
        """Унарный минус"""
        assert -Point(5.5, -2) == Point(-5.5, 2)
        assert -Point.origin() == Point.origin()

    @pytest.mark.parametrize("scalar", [3, -3, 0])
    def test_scalar_multiplication(self, scalar: float) -> None:
        """p * k == k * p"""
        p = Point(2, 5)
        assert p * scalar == Point(2 * scalar, 5 * scalar)
        assert scalar * p == p * scalar

    def test_division(self) -> None:
        """Деление на скаляр"""
        assert Point(20, 15) / 5 == Point(4, 3)

    def test_division_by_zero(self) -> None:
        """Деление на 0 → ZeroDivisionError"""
        with pytest.raises(ZeroDivisionError, match="divide a point by zero"):
            Point(20, 15) / 0


# =============================================================================
# РАВЕНСТВО И МУТАЦИЯ
# =============================================================================


class TestPointEquality:
    """Тесты равенства, хеша и неизменяемости"""

    def test_equal_within_tolerance(self) -> None:
        """Разница меньше 1e-6: равенство"""
        assert Point(6, -8) == Point(6.0000001, -8.0000001)

    def test_not_equal_outside_tolerance(self) -> None:
        """Разница 1e-5: неравенство"""
        assert Point(6, -8) != Point(6.00001, -8)
        assert Point(6, -8) != Point(7, -8)

    def test_infinite_coordinates_equal(self) -> None:
        """Одинаковые бесконечные координаты равны"""
        assert Point(math.inf, 0) == Point(math.inf, 0)

    def test_not_equal_to_other_types(self) -> None:
        """Point не равен кортежу и None"""
        assert Point(1, 2) != (1, 2)
        assert Point(1, 2) != None  # noqa: E711

    def test_hash_consistent_with_equality(self) -> None:
        """Равные точки дают один хеш"""
        assert hash(Point(1, 2)) == hash(Point(1.0000000001, 2))
        assert len({Point(1, 2), Point(1.0000000001, 2)}) == 1

    def test_coordinates_coerced_to_float(self) -> None:
        """Координаты приводятся к float"""
        p = Point(5, 2)
        assert isinstance(p.x, float)
        assert isinstance(p.y, float)

    @pytest.mark.parametrize("field", ["x", "y"])
    def test_coordinates_immutable(self, field: str) -> None:
        """Присваивание координаты отклоняется, точка не меняется"""
        p = Point(1, 2)
        with pytest.raises(ValidationError, match="frozen"):
            setattr(p, field, 5.0)
        assert p == Point(1, 2)

    def test_clone_is_equal_copy(self) -> None:
        """clone() возвращает равную копию"""
        p = Point(1, 2)
        copy = p.clone()
        assert copy == p
        assert copy is not p

    def test_moving_point_means_new_value(self) -> None:
        """Смещение создаёт новую точку, хеш исходной стабилен"""
        p = Point(1, 2)
        before = hash(p)
        moved = p + Vector(4, 0)
        assert moved == Point(5, 2)
        assert hash(p) == before

    def test_string_form(self) -> None:
        """Строковое представление (x, y)"""
        assert str(Point(1, 2.5)) == "(1, 2.5)"
        assert str(Point(-3.0, math.inf)) == "(-3, inf)"
