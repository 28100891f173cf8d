"""
Math Set — Математическое множество уникальных значений

Set[T] хранит уникальные hashable значения. Порядок хранения — порядок вставки;
итерация и строковое представление идут по возрастанию, если элементы
сравнимы (числа), иначе в порядке вставки (Point, Vector, вложенные множества).

Операторы:
    s + x, s + other   — добавление элемента / объединение
    s - x, s - other   — удаление элемента / разность
    s1 * s2            — пересечение
    ~s                 — мощность (количество элементов)
    bool(s)            — True если множество не пусто

Для добавления множества как элемента (вложенные множества) используйте add().

ВАЖНО: proper_subset сохраняет нестандартное определение:
мощности различаются И subset(other). Это НЕ математическое
"other — собственное подмножество self".
"""

import copy
import logging
from typing import Any, Generic, Iterable, Iterator, TypeVar

from src.core.errors import InvariantViolation
from src.core.math.numerical_safeguards import format_float, is_valid_float
from src.sets import aggregates

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Set(Generic[T]):
    """
    Множество уникальных значений.

    Создание:
        Set(1, 2, 3)
        Set.from_iterable([1, 2, 3])
        Set.empty()
        Set.from_range(3, 11, 2)   — {3, 5, 7, 9, 11}
    """

    def __init__(self, *values: T) -> None:
        self._items: dict[T, None] = {}
        self.add(*values)

    # =========================================================================
    # FACTORIES
    # =========================================================================

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> "Set[T]":
        return cls(*values)

    @classmethod
    def empty(cls) -> "Set[T]":
        """Новое пустое множество"""
        return cls()

    @classmethod
    def from_range(cls, start: float, end: float, step: float = 1) -> "Set[float]":
        """
        Множество {start, start + step, start + 2·step, ...} до end включительно.

        Значения получаются повторным сложением, поэтому end попадает
        в множество только если достигается шагами точно.

        Args:
            start: Первое значение
            end: Верхняя граница (включительно)
            step: Шаг (default: 1)

        Returns:
            Новое множество

        Raises:
            InvariantViolation: Если start > end, step <= 0 или аргумент не конечен
        """
        if not all(is_valid_float(v) for v in (start, end, step)):
            raise InvariantViolation(
                f"Range arguments must be finite: start={start}, end={end}, step={step}"
            )
        if step <= 0:
            raise InvariantViolation(f"Step must be positive, got {step}")
        if start > end:
            raise InvariantViolation(
                f"Start must not be greater than end: start={start}, end={end}"
            )

        result = cls()
        current = start
        while current <= end:
            result.add(current)
            current = current + step

        logger.debug(
            "Generated range set: start=%s end=%s step=%s count=%d",
            start,
            end,
            step,
            result.count,
        )
        return result

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def count(self) -> int:
        """Количество элементов"""
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def contains(self, value: Any) -> bool:
        return value in self._items

    def subset(self, other: "Set[T]") -> bool:
        """Каждый элемент other содержится в self"""
        return all(value in self._items for value in other)

    def proper_subset(self, other: "Set[T]") -> bool:
        """
        Нестандартное "собственное подмножество".

        Returns:
            False при равных мощностях, иначе subset(other)
        """
        if self.count == other.count:
            return False
        return self.subset(other)

    # =========================================================================
    # MUTATORS
    # =========================================================================

    def add(self, *values: T) -> None:
        """Добавление значений; уже присутствующие значения пропускаются"""
        for value in values:
            if value not in self._items:
                self._items[value] = None

    def remove(self, *values: T) -> None:
        """Удаление значений; отсутствующие значения пропускаются"""
        for value in values:
            self._items.pop(value, None)

    def keep(self, *values: T) -> None:
        """Оставляет только элементы, присутствующие в values (пересечение на месте)"""
        self._items = {item: None for item in self._items if item in values}

    def clear(self) -> None:
        self._items.clear()

    def clone(self) -> "Set[T]":
        """Глубокая копия множества (элементы тоже копируются)"""
        result = type(self)()
        result._items = copy.deepcopy(self._items)
        return result

    # =========================================================================
    # SET ALGEBRA
    # =========================================================================

    def union(self, other: "Set[T]") -> "Set[T]":
        """
        Объединение.

        Вызывается и как метод (a.union(b)), и через класс (Set.union(a, b)).
        Операнды не изменяются.
        """
        result = self.clone()
        result.add(*other)
        return result

    def difference(self, other: "Set[T]") -> "Set[T]":
        """Разность: элементы self, отсутствующие в other"""
        result = self.clone()
        result.remove(*other)
        return result

    def intersection(self, other: "Set[T]") -> "Set[T]":
        """Пересечение: элементы self, присутствующие в other"""
        result = self.clone()
        result.keep(*other)
        return result

    # =========================================================================
    # AGGREGATES
    # =========================================================================

    def min(self) -> T:
        return aggregates.minimum(self)

    def max(self) -> T:
        return aggregates.maximum(self)

    def range(self) -> Any:
        return aggregates.value_range(self)

    def sum(self, start: Any = 0) -> Any:
        """Сумма элементов; start для пустого множества"""
        return aggregates.total(self, start)

    def average(self) -> Any:
        return aggregates.average(self)

    def total_count(self) -> int:
        """Для множества множеств: сумма мощностей внутренних множеств"""
        return aggregates.total_count(self)

    def flatten(self) -> "Set[Any]":
        """Для множества множеств: объединение всех внутренних множеств"""
        return aggregates.flatten(self)

    # =========================================================================
    # DUNDER
    # =========================================================================

    def _ordered(self) -> list[T]:
        try:
            return sorted(self._items)
        except TypeError:
            return list(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._ordered())

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        if self.count != other.count:
            return False
        return all(value in other for value in self._items)

    def __hash__(self) -> int:
        return hash(frozenset(self._items))

    def __str__(self) -> str:
        if not self._items:
            return "{ }"
        return "{ " + ", ".join(format_float(value) for value in self._ordered()) + " }"

    def __repr__(self) -> str:
        return f"Set({', '.join(repr(value) for value in self._ordered())})"

    def __add__(self, other: Any) -> "Set[T]":
        if isinstance(other, Set):
            return self.union(other)
        result = self.clone()
        result.add(other)
        return result

    def __sub__(self, other: Any) -> "Set[T]":
        if isinstance(other, Set):
            return self.difference(other)
        result = self.clone()
        result.remove(other)
        return result

    def __mul__(self, other: Any) -> "Set[T]":
        if isinstance(other, Set):
            return self.intersection(other)
        return NotImplemented

    def __invert__(self) -> int:
        return self.count
