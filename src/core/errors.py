"""
Errors — Таксономия исключений геометрических примитивов

Все ошибки синхронные и локальные: выбрасываются в точке нарушения
(конструктор, сеттер или операция с неопределённым результатом).
Слоя повторов или восстановления нет.

Иерархия:
    GeometryError
    ├── InvariantViolation (ValueError)      — нарушение инварианта при создании/изменении
    └── UndefinedOperationError (ValueError) — результат операции не определён
        └── EmptySetError                    — min/max/range пустого множества

Деление Point/Vector на ноль выбрасывает встроенный ZeroDivisionError.
"""


class GeometryError(Exception):
    """Базовое исключение геометрических примитивов"""


class InvariantViolation(GeometryError, ValueError):
    """
    Нарушение инварианта значения.

    Примеры:
    - совпадающие опорные точки прямой
    - неположительный или NaN радиус окружности
    - закрытая граница с бесконечным значением
    - диапазон множества с start > end или step <= 0

    Внутри pydantic-валидаторов оборачивается в pydantic.ValidationError
    (тоже ValueError).
    """


class UndefinedOperationError(GeometryError, ValueError):
    """
    Операция не имеет определённого результата.

    Пример: угол между векторами, один из которых нулевой.
    """


class EmptySetError(UndefinedOperationError):
    """Агрегат (min/max/range) запрошен у пустого множества"""
