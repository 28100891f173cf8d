"""
Numerical Safeguards — Float Comparison Primitives

Модуль обеспечивает единые правила работы с float для всех геометрических типов:
- Epsilon-сравнения координат (абсолютная толерантность)
- Распознавание бесконечных значений (числа и точки/векторы)
- Согласованное с толерантностью хеширование координат
- Компактное строковое представление float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Равенство координат всегда учитывает EPS_COORD_COMPARE
2. Две бесконечности одного знака считаются равными (inf - inf = NaN не ломает сравнение)
3. Хеш строится по координатам, округлённым до HASH_ROUND_DIGITS знаков
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Any, Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность для сравнения координат
# Используется в равенстве Point, Vector, Line и Circle
EPS_COORD_COMPARE: Final[float] = 1e-6

# Количество знаков после запятой при округлении результата поворота вектора
# Подавляет шум вида 1e-16 после cos/sin
ROTATION_ROUND_DIGITS: Final[int] = 6

# Количество знаков после запятой при хешировании координат
# Должно соответствовать EPS_COORD_COMPARE
HASH_ROUND_DIGITS: Final[int] = 6


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_infinite(value: Any) -> bool:
    """
    Проверка, лежит ли значение в бесконечной координате.

    Поддерживаемые значения:
    - int/float: math.isinf
    - объекты с атрибутами x и y (Point, Vector): бесконечна хотя бы одна координата
    - всё остальное: никогда не бесконечно

    Args:
        value: Проверяемое значение любого типа

    Returns:
        True если значение бесконечно

    Examples:
        >>> is_infinite(float("inf"))
        True
        >>> is_infinite(5)
        False
        >>> is_infinite("abc")
        False
    """
    if isinstance(value, bool):
        return False

    if isinstance(value, (int, float)):
        return math.isinf(value)

    x = getattr(value, "x", None)
    y = getattr(value, "y", None)
    if isinstance(x, (int, float)) and isinstance(y, (int, float)):
        return math.isinf(x) or math.isinf(y)

    return False


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close_abs(a: float, b: float, tol: float = EPS_COORD_COMPARE) -> bool:
    """
    Сравнение двух float с абсолютной толерантностью.

    В отличие от math.isclose использует строгое неравенство abs(a - b) < tol
    и считает равными две одинаковые бесконечности.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: EPS_COORD_COMPARE)

    Returns:
        True если a == b или abs(a - b) < tol

    Examples:
        >>> is_close_abs(1.0, 1.0000001)
        True
        >>> is_close_abs(1.0, 1.00001)
        False
        >>> is_close_abs(float("inf"), float("inf"))
        True
    """
    if a == b:
        return True
    return abs(a - b) < tol


def compare_with_tolerance(
    a: float,
    b: float,
    tol: float = EPS_COORD_COMPARE,
) -> int:
    """
    Сравнение двух float с учётом толерантности.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: EPS_COORD_COMPARE).
             При tol=0.0 сравнение точное.

    Returns:
        -1 если a < b (с учётом tol)
         0 если a ≈ b (в пределах tol)
        +1 если a > b (с учётом tol)

    Raises:
        ValueError: Если tol отрицательный

    Examples:
        >>> compare_with_tolerance(1.0, 2.0)
        -1
        >>> compare_with_tolerance(2.0, 1.0)
        1
        >>> compare_with_tolerance(1.0, 1.0 + 1e-9)
        0
    """
    if tol < 0:
        raise ValueError(f"tol must be non-negative, got {tol}")

    diff = a - b

    if abs(diff) <= tol:
        return 0
    elif diff < 0:
        return -1
    else:
        return 1


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(1.0000000000000002, -1.0, 1.0)
        1.0
        >>> clamp(-1.5, -1.0, 1.0)
        -1.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ХЕШИРОВАНИЕ И ФОРМАТИРОВАНИЕ
# =============================================================================


def hash_coords(*values: float) -> int:
    """
    Хеш набора координат, согласованный с is_close_abs.

    Координаты округляются до HASH_ROUND_DIGITS знаков, поэтому значения,
    равные в пределах EPS_COORD_COMPARE, почти всегда дают один хеш.
    Значения на границе округления могут быть равны, но хешироваться по-разному.

    Args:
        values: Координаты

    Returns:
        Хеш кортежа округлённых координат
    """
    return hash(tuple(round(v, HASH_ROUND_DIGITS) for v in values))


def format_float(value: float) -> str:
    """
    Компактное строковое представление float.

    Целые значения печатаются без ".0", остальные через repr.

    Examples:
        >>> format_float(1.0)
        '1'
        >>> format_float(2.5)
        '2.5'
        >>> format_float(float("-inf"))
        '-inf'
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)
