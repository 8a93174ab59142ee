"""
Numerical Safeguards — базовые примитивы для радиальной математики

Модуль содержит низкоуровневые операции, на которых построены
функции radial и intervals:
- NaN/Inf проверка и санитизация
- Ограничение значения диапазоном (clamp)
- Округление "half up" в стиле браузерного Math.round

ИНВАРИАНТЫ:
1. Функции не бросают исключений на NaN/Inf входах (кроме явно указанных)
2. Вырожденные значения либо пропагируют по IEEE-754, либо заменяются fallback
3. Все операции детерминированы и воспроизводимы
"""

import math


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Санитизация float: замена NaN/Inf на fallback значение.

    Args:
        value: Исходное значение
        fallback: Значение для замены NaN/Inf (default: 0.0)

    Returns:
        value если валидное, иначе fallback

    Examples:
        >>> sanitize_float(10.0)
        10.0
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('-inf'), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return value
    return fallback


# =============================================================================
# ОГРАНИЧЕНИЕ И ОКРУГЛЕНИЕ
# =============================================================================


def clamp(value: float, min_value: float, max_value: float) -> float:
    """
    Ограничение значения в диапазоне [min_value, max_value].

    Порядок операций фиксирован: сначала max с нижней границей,
    затем min с верхней. Порядок границ не проверяется: при
    min_value > max_value результатом всегда будет max_value.
    NaN в любом из операндов даёт NaN (встроенные min/max его теряют).

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    if math.isnan(value) or math.isnan(min_value) or math.isnan(max_value):
        return math.nan
    return min(max(value, min_value), max_value)


def round_half_up(value: float) -> float:
    """
    Округление до ближайшего целого, половины округляются вверх.

    Дробная часть >= 0.5 округляется вверх: 2.5 → 3, -2.5 → -2.
    Без промежуточного value + 0.5, которое теряет точность рядом с .5
    и на нечётных значениях >= 2**52. NaN/Inf возвращаются без
    изменений (math.floor на них бросает исключение).

    Args:
        value: Значение для округления

    Returns:
        Округлённое значение (float)

    Examples:
        >>> round_half_up(2.5)
        3.0
        >>> round_half_up(-2.5)
        -2.0
    """
    if not is_valid_float(value):
        return value
    floored = math.floor(value)
    if value - floored >= 0.5:
        return float(floored + 1)
    return float(floored)
