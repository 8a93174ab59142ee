"""
Radial — Проценты, геометрия окружности и углы

Математика для отрисовки радиальных виджетов (progress ring, knob,
радиальное меню):
- Округление с заданной гранулярностью
- Конверсия процентов (percent / apply_percent / per_rotation)
- Длина окружности и stroke-dashoffset для SVG
- Градусы → радианы, полярные → декартовы координаты
- Угол направления из одной точки в другую

Вырожденные входы (деление на ноль, NaN, Inf) не приводят к исключениям:
результат либо пропагирует по IEEE-754, либо сворачивается в 0 (percent).
"""

import math
from typing import Final, Tuple

from src.core.domain.geometry import (
    CoordinateLike,
    IntervalLike,
    as_coordinate,
    as_interval,
)
from src.core.math.intervals import limit
from src.core.math.numerical_safeguards import round_half_up, sanitize_float

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Множитель перевода процента в долю
PERCENT_FACTOR: Final[float] = 0.01

# Полный оборот в градусах
FULL_TURN_DEG: Final[float] = 360.0

# Максимум поворота по умолчанию для per_rotation.
# Побитовое ИЛИ литералов: 360 | 180 == 508.
DEFAULT_ROTATION_MAX: Final[int] = 360 | 180


# =============================================================================
# ОКРУГЛЕНИЕ И ПРОЦЕНТЫ
# =============================================================================


def round_to(n: float, r: float) -> float:
    """
    Округление с гранулярностью 1/r: round_half_up(n * r) / r.

    r == 0 не защищается: результат NaN (0/0 по IEEE-754).

    Args:
        n: Значение для округления
        r: Множитель округления (например, 100 → два знака)

    Returns:
        Округлённое значение

    Examples:
        >>> round_to(1.2345, 100)
        1.23
        >>> round_to(7.5, 1)
        8.0
    """
    rounded = round_half_up(n * r)
    if r == 0:
        return math.nan
    return rounded / r


def percent(n: float, t: float) -> float:
    """
    Доля n от t в процентах: n / t * 100.

    NaN, ±Inf и ноль сворачиваются в 0.0, в том числе при t == 0.

    Examples:
        >>> percent(50, 200)
        25.0
        >>> percent(10, 0)
        0.0
    """
    if t == 0:
        return 0.0
    result = n / t * 100
    return sanitize_float(result, fallback=0.0) or 0.0


def apply_percent(t: float, p: float) -> float:
    """
    Применение процента p к величине t: t * p * 0.01.

    Examples:
        >>> apply_percent(200, 25)
        50.0
    """
    return t * p * PERCENT_FACTOR


def per_rotation(per: float, max_rotation: float = DEFAULT_ROTATION_MAX) -> float:
    """
    Поворот, соответствующий проценту от max_rotation.

    Args:
        per: Процент
        max_rotation: Максимальный поворот (например 360, 180)

    Returns:
        per * 0.01 * max_rotation
    """
    return per * PERCENT_FACTOR * max_rotation


def value_to_percent(n: float, interval: IntervalLike) -> float:
    """
    Положение значения внутри интервала в процентах.

    Значение предварительно ограничивается интервалом, поэтому результат
    для упорядоченного интервала лежит в [0, 100]. Для вырожденного
    интервала (min == max) возвращается 0.0.

    Examples:
        >>> value_to_percent(25, [0, 50])
        50.0
        >>> value_to_percent(-10, [0, 50])
        0.0
    """
    bounds = as_interval(interval)
    return percent(
        limit(n, bounds) - bounds.min_value,
        bounds.max_value - bounds.min_value,
    )


# =============================================================================
# ОКРУЖНОСТЬ
# =============================================================================


def circumference(r: float) -> float:
    """Длина окружности радиуса r: 2πr."""
    return 2 * math.pi * r


def stroke_offset(peri: float, perc: float) -> float:
    """
    Stroke offset окружности для заданного процента.

    Незаполненная часть периметра: peri - peri * perc * 0.01.
    Используется как stroke-dashoffset в SVG progress ring.

    Args:
        peri: Периметр окружности
        perc: Процент заполнения

    Returns:
        Длина незаполненной дуги
    """
    return peri - peri * perc * PERCENT_FACTOR


def progress_ring(radius: float, perc: float) -> Tuple[float, float]:
    """
    Параметры SVG progress ring: (stroke-dasharray, stroke-dashoffset).
    """
    peri = circumference(radius)
    return peri, stroke_offset(peri, perc)


# =============================================================================
# УГЛЫ И КООРДИНАТЫ
# =============================================================================


def ang_rad(a: float) -> float:
    """Градусы → радианы: a * π / 180."""
    return a * (math.pi / 180)


def cartes_xy(r: float, a: float, offset: CoordinateLike) -> Tuple[float, float]:
    """
    Декартовы координаты точки на окружности.

    Полярные (r, a) с переносом на offset; используется для размещения
    элементов вокруг окружности.

    Args:
        r: Радиус окружности
        a: Угол в градусах
        offset: Координаты центра [x, y]

    Returns:
        (r * cos(a) + x, r * sin(a) + y)
    """
    center = as_coordinate(offset)
    theta = ang_rad(a)
    return (
        r * math.cos(theta) + center.x,
        r * math.sin(theta) + center.y,
    )


def arctangent(origin: CoordinateLike, target: CoordinateLike) -> float:
    """
    Угол между осью X и направлением origin → target.

    Угол в градусах, отрицательные значения приводятся в [0, 360)
    добавлением полного оборота. Если после этого получилось ровно 360
    (очень малый отрицательный угол), возвращается 0.0. Используется для ориентации элемента
    на точку (или от неё).

    Args:
        origin: Координаты начала [x, y]
        target: Координаты цели [x, y]

    Returns:
        Угол theta в градусах

    Examples:
        >>> arctangent([0, 0], [0, 1])
        90.0
        >>> arctangent([0, 0], [0, -1])
        270.0
    """
    start = as_coordinate(origin)
    end = as_coordinate(target)
    dx = start.x - end.x
    dy = start.y - end.y

    theta = math.degrees(math.atan2(-dy, -dx))
    if theta < 0:
        theta += FULL_TURN_DEG
    # -1e-300 + 360 округляется ровно до 360
    if theta >= FULL_TURN_DEG:
        theta = 0.0

    return theta
