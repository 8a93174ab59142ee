"""
Geometry — Value-типы для радиальной математики

Immutable Pydantic модели для пар чисел, которыми обмениваются
функции модуля src.core.math:
- Interval: упорядоченная пара (min, max)
- Coordinate: точка (x, y) на плоскости

Функции принимают как модели, так и любые последовательности из двух
чисел; приведение выполняется через as_interval / as_coordinate.
"""

from typing import Sequence, Tuple, Union

from pydantic import BaseModel, Field


# =============================================================================
# MODELS
# =============================================================================


class Interval(BaseModel):
    """
    Числовой интервал [min_value, max_value].

    Порядок границ моделью НЕ проверяется: limit работает с любым
    порядком, а between сам бросает InvalidIntervalError.
    """

    min_value: float = Field(..., description="Нижняя граница")
    max_value: float = Field(..., description="Верхняя граница")

    model_config = {"frozen": True}

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "Interval":
        """
        Создание интервала из последовательности [min, max].

        Raises:
            ValueError: Если длина последовательности не равна 2
        """
        lower, upper = _unpack_pair(values, "Interval")
        return cls(min_value=lower, max_value=upper)

    @property
    def is_ordered(self) -> bool:
        """True если min_value <= max_value."""
        return self.min_value <= self.max_value

    def as_tuple(self) -> Tuple[float, float]:
        return (self.min_value, self.max_value)


class Coordinate(BaseModel):
    """Точка (x, y) в декартовой системе координат."""

    x: float = Field(..., description="Абсцисса")
    y: float = Field(..., description="Ордината")

    model_config = {"frozen": True}

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "Coordinate":
        """
        Создание точки из последовательности [x, y].

        Raises:
            ValueError: Если длина последовательности не равна 2
        """
        x, y = _unpack_pair(values, "Coordinate")
        return cls(x=x, y=y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


IntervalLike = Union[Interval, Sequence[float]]
CoordinateLike = Union[Coordinate, Sequence[float]]


# =============================================================================
# COERCION
# =============================================================================


def _unpack_pair(values: Sequence[float], kind: str) -> Tuple[float, float]:
    items = tuple(values)
    if len(items) != 2:
        raise ValueError(f"{kind} requires exactly 2 values, got {len(items)}")
    return items[0], items[1]


def as_interval(value: IntervalLike) -> Interval:
    """
    Приведение модели или последовательности к Interval.

    Examples:
        >>> as_interval([0, 10]).as_tuple()
        (0.0, 10.0)
    """
    if isinstance(value, Interval):
        return value
    return Interval.from_sequence(value)


def as_coordinate(value: CoordinateLike) -> Coordinate:
    """Приведение модели или последовательности к Coordinate."""
    if isinstance(value, Coordinate):
        return value
    return Coordinate.from_sequence(value)
