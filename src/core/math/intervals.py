"""
Intervals — Ограничение, проверка вхождения и случайные целые

Операции над числовыми интервалами [min, max]:
- limit: удержание значения внутри интервала (без проверки порядка границ)
- between: строгая/нестрогая проверка вхождения (с проверкой порядка границ)
- random_int: равномерное случайное целое в [ceil(min), floor(max)]

between — единственная функция библиотеки, которая бросает доменное
исключение (InvalidIntervalError). limit намеренно не проверяет
порядок границ.
"""

import logging
import math
import random
from typing import Optional

from src.core.domain.geometry import IntervalLike, as_interval
from src.core.math.numerical_safeguards import clamp

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidIntervalError(ValueError):
    """
    Интервал с нарушенным порядком границ: min > max.

    Атрибуты min_value и max_value содержат исходные границы.
    """

    def __init__(self, min_value: float, max_value: float):
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(
            f"The given interval is invalid! "
            f"Min value ({min_value}) > Max value ({max_value}) !"
        )


# =============================================================================
# LIMIT / BETWEEN
# =============================================================================


def limit(n: float, interval: IntervalLike) -> float:
    """
    Удержание значения внутри интервала.

    min(max(n, min), max). При min > max результатом всегда
    будет вторая граница интервала. NaN в значении или в любой
    границе даёт NaN.

    Args:
        n: Значение
        interval: Интервал [min, max]

    Returns:
        Значение, ограниченное интервалом

    Examples:
        >>> limit(5, [0, 10])
        5
        >>> limit(-5, [0, 10])
        0.0
        >>> limit(15, [0, 10])
        10.0
    """
    bounds = as_interval(interval)
    return clamp(n, bounds.min_value, bounds.max_value)


def between(n: float, interval: IntervalLike, inclusive: bool = False) -> bool:
    """
    Проверка вхождения значения в интервал.

    Args:
        n: Проверяемое значение
        interval: Интервал [min, max]
        inclusive: Включать границы (default: False)

    Returns:
        True если min < n < max (или min <= n <= max при inclusive)

    Raises:
        InvalidIntervalError: Если min > max
    """
    bounds = as_interval(interval)
    if bounds.max_value < bounds.min_value:
        logger.debug(
            "Rejected interval: min=%s max=%s", bounds.min_value, bounds.max_value
        )
        raise InvalidIntervalError(bounds.min_value, bounds.max_value)

    if inclusive:
        return bounds.min_value <= n <= bounds.max_value
    return bounds.min_value < n < bounds.max_value


# =============================================================================
# RANDOM
# =============================================================================


def random_int(
    min_value: float,
    max_value: float,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Случайное целое, равномерно распределённое в [ceil(min), floor(max)].

    floor(random() * (floor(max) - ceil(min) + 1)) + ceil(min)

    Порядок границ не проверяется: если floor(max) < ceil(min),
    формула применяется как есть.

    Args:
        min_value: Нижняя граница
        max_value: Верхняя граница
        rng: Источник случайности (default: глобальный модуль random)

    Returns:
        Случайное целое

    Raises:
        OverflowError: Если граница равна ±Inf
        ValueError: Если граница равна NaN
    """
    source = rng if rng is not None else random
    low = math.ceil(min_value)
    span = math.floor(max_value) - low + 1
    return math.floor(source.random() * span) + low
