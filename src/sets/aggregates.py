"""
Aggregates — Агрегатные операции над элементами множества

Чистые функции над итерируемыми коллекциями (обычно Set):
- Числовые: minimum, maximum, value_range, total, average
- Point/Vector: total и average работают через операторы + и /
- Вложенные множества: total_count, flatten

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. minimum/maximum/value_range пустой коллекции → EmptySetError
2. total пустой коллекции → 0
3. average пустой коллекции → NaN (без ошибки, в отличие от minimum/maximum)
"""

import logging
import math
import operator
from functools import reduce
from itertools import chain
from typing import Any, Iterable

from src.core.errors import EmptySetError

logger = logging.getLogger(__name__)


# =============================================================================
# ЧИСЛОВЫЕ АГРЕГАТЫ
# =============================================================================


def _non_empty(values: Iterable[Any], operation: str) -> list[Any]:
    items = list(values)
    if not items:
        logger.debug("Aggregate %s requested on an empty set", operation)
        raise EmptySetError(f"Cannot compute {operation} of an empty set")
    return items


def minimum(values: Iterable[Any]) -> Any:
    """
    Наименьший элемент.

    Raises:
        EmptySetError: Если коллекция пуста
    """
    return min(_non_empty(values, "min"))


def maximum(values: Iterable[Any]) -> Any:
    """
    Наибольший элемент.

    Raises:
        EmptySetError: Если коллекция пуста
    """
    return max(_non_empty(values, "max"))


def value_range(values: Iterable[Any]) -> Any:
    """
    Размах: max - min.

    Raises:
        EmptySetError: Если коллекция пуста

    Examples:
        >>> value_range([6, -7.5])
        13.5
    """
    items = _non_empty(values, "range")
    return max(items) - min(items)


def total(values: Iterable[Any], start: Any = 0) -> Any:
    """
    Сумма элементов через оператор +.

    Для Point/Vector суммирование покоординатное.

    Args:
        values: Суммируемые элементы
        start: Результат для пустой коллекции (default: 0). Для множеств
            точек и векторов передайте Point.origin() или Vector.zero(),
            иначе пустая коллекция даёт int 0

    Returns:
        Сумма элементов; start для пустой коллекции
    """
    items = list(values)
    if not items:
        return start
    return reduce(operator.add, items)


def average(values: Iterable[Any]) -> Any:
    """
    Среднее: total / count.

    Returns:
        Среднее значение; NaN для пустой коллекции

    Examples:
        >>> average([1, 2, 3, 4, 5])
        3.0
        >>> math.isnan(average([]))
        True
    """
    items = list(values)
    if not items:
        return math.nan
    return total(items) / len(items)


# =============================================================================
# ВЛОЖЕННЫЕ МНОЖЕСТВА
# =============================================================================


def total_count(nested: Iterable[Any]) -> int:
    """Сумма мощностей внутренних множеств"""
    return sum(len(inner) for inner in nested)


def flatten(nested: Any) -> Any:
    """
    Объединение всех внутренних множеств в одно.

    Args:
        nested: Множество множеств (тип результата совпадает с типом nested)

    Returns:
        Новое множество со всеми элементами внутренних множеств
    """
    return type(nested).from_iterable(chain.from_iterable(nested))
