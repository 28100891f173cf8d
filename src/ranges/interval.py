"""Interval — Числовой интервал с открытыми/закрытыми концами

Interval хранит две границы Boundary[float]. Порядок start <= end не
проверяется: интервал с перевёрнутыми границами просто ничего не содержит.

Строковое представление:
    [a, b]  — обе границы закрыты
    (a, b)  — обе открыты
    [a, b)  — закрыт только start
    (a, b]  — закрыт только end
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from src.ranges.boundary import Boundary


def _boundary_data(value: Any, closed: Optional[bool] = None) -> Any:
    """Приведение границы/числа к данным для поля Boundary[float].

    Голое число становится закрытой границей, если closed не задан явно.
    """
    if isinstance(value, Boundary):
        return {
            "value": value.value,
            "closed": value.closed if closed is None else closed,
        }
    if isinstance(value, dict):
        if closed is not None:
            return {**value, "closed": closed}
        return value
    return {"value": value, "closed": True if closed is None else closed}


class Interval(BaseModel):
    """Числовой интервал.

    Создание:
        Interval(1, 5)                          — [1, 5]
        Interval(1, 5, end_closed=False)        — [1, 5)
        Interval(Boundary(1, False), 5)         — (1, 5]
    """

    start: Boundary[float] = Field(..., description="Нижняя граница")
    end: Boundary[float] = Field(..., description="Верхняя граница")

    model_config = {"validate_assignment": True}

    def __init__(
        self,
        start: Any = None,
        end: Any = None,
        start_closed: Optional[bool] = None,
        end_closed: Optional[bool] = None,
        **data: Any,
    ) -> None:
        super().__init__(
            start=_boundary_data(start, start_closed),
            end=_boundary_data(end, end_closed),
            **data,
        )

    @field_validator("start", "end", mode="before")
    @classmethod
    def coerce_boundary(cls, v: Any) -> Any:
        """Граница или голое число при присваивании"""
        return _boundary_data(v)

    def contains(self, number: float) -> bool:
        """Принадлежит ли число интервалу.

        Args:
            number: Проверяемое число

        Returns:
            True если выполнены оба условия: start (>= закрытая, > открытая)
            и end (<= закрытая, < открытая)
        """
        if self.start.closed:
            after_start = number >= self.start.value
        else:
            after_start = number > self.start.value

        if self.end.closed:
            before_end = number <= self.end.value
        else:
            before_end = number < self.end.value

        return after_start and before_end

    def __contains__(self, number: float) -> bool:
        return self.contains(number)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.start == other.start and self.end == other.end

    def __hash__(self) -> int:
        return hash(
            (self.start.value, self.start.closed, self.end.value, self.end.closed)
        )

    def __str__(self) -> str:
        left = "[" if self.start.closed else "("
        right = "]" if self.end.closed else ")"
        return f"{left}{self.start}, {self.end}{right}"
