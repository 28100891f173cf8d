"""Boundary — Граница диапазона

Значение плюс признак закрытости (включается ли значение в диапазон).
Immutable Pydantic модель.

Инвариант: закрытая граница не может хранить бесконечное значение
(числовая бесконечность или Point/Vector с бесконечной координатой).
"""

import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, model_validator

from src.core.errors import InvariantViolation
from src.core.math.numerical_safeguards import format_float, is_infinite

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Boundary(BaseModel, Generic[T]):
    """Граница диапазона.

    Сравнение:
    - Boundary == Boundary: равны closed и value
    - Boundary == значение: равно value (closed не учитывается)
    """

    value: T = Field(..., description="Значение границы")
    closed: bool = Field(True, description="Включается ли значение в диапазон")

    model_config = {"frozen": True}

    def __init__(self, value: Any = None, closed: bool = True, **data: Any) -> None:
        super().__init__(value=value, closed=closed, **data)

    @model_validator(mode="after")
    def validate_closed_finite(self) -> "Boundary[T]":
        """Закрытая граница должна быть конечной"""
        if self.closed and is_infinite(self.value):
            logger.debug("Rejected closed boundary at %s", self.value)
            raise InvariantViolation(
                "Boundary cannot be closed while having an infinite value"
            )
        return self

    @classmethod
    def coerce(cls, value: Any, closed: bool = True) -> "Boundary":
        """Голое значение → закрытая граница; граница возвращается без изменений.

        Examples:
            >>> Boundary.coerce(3).closed
            True
            >>> b = Boundary(3, closed=False)
            >>> Boundary.coerce(b) is b
            True
        """
        if isinstance(value, Boundary):
            return value
        return cls(value, closed=closed)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Boundary):
            return self.closed == other.closed and self.value == other.value
        return self.value == other

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return format_float(self.value)
