"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf санитизацию
2. clamp с фиксированным порядком min/max
3. Округление half up
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    clamp,
    is_valid_float,
    round_half_up,
    sanitize_float,
)

# =============================================================================
# ТЕСТЫ NaN/Inf САНИТИЗАЦИИ
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values_valid(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1.5)
        assert is_valid_float(1e308)

    def test_nan_and_inf_invalid(self) -> None:
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)


class TestSanitizeFloat:
    """Тесты для sanitize_float"""

    def test_valid_value_unchanged(self) -> None:
        assert sanitize_float(10.0) == 10.0
        assert sanitize_float(-3.25, fallback=1.0) == -3.25

    def test_nan_replaced_with_fallback(self) -> None:
        assert sanitize_float(math.nan) == 0.0
        assert sanitize_float(math.nan, fallback=7.0) == 7.0

    def test_inf_replaced_with_fallback(self) -> None:
        assert sanitize_float(math.inf) == 0.0
        assert sanitize_float(-math.inf, fallback=-1.0) == -1.0


# =============================================================================
# ТЕСТЫ ОГРАНИЧЕНИЯ И ОКРУГЛЕНИЯ
# =============================================================================


class TestClamp:
    """Тесты для clamp"""

    def test_inside_range(self) -> None:
        assert clamp(5.0, 0.0, 10.0) == 5.0

    def test_below_and_above(self) -> None:
        assert clamp(-1.0, 0.0, 10.0) == 0.0
        assert clamp(15.0, 0.0, 10.0) == 10.0

    def test_boundaries(self) -> None:
        assert clamp(0.0, 0.0, 10.0) == 0.0
        assert clamp(10.0, 0.0, 10.0) == 10.0

    def test_reversed_bounds_return_max_value(self) -> None:
        """При min > max результат всегда равен max_value"""
        for value in (-100.0, 0.0, 5.0, 10.0, 100.0):
            assert clamp(value, 10.0, 0.0) == 0.0

    def test_nan_in_any_operand_propagates(self) -> None:
        assert math.isnan(clamp(math.nan, 0.0, 10.0))
        assert math.isnan(clamp(5.0, math.nan, 10.0))
        assert math.isnan(clamp(5.0, 0.0, math.nan))


class TestRoundHalfUp:
    """Тесты для round_half_up"""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (2.4, 2.0),
            (2.5, 3.0),
            (2.6, 3.0),
            (-2.4, -2.0),
            (-2.5, -2.0),
            (-2.6, -3.0),
            (0.0, 0.0),
        ],
    )
    def test_rounding(self, value: float, expected: float) -> None:
        assert round_half_up(value) == expected

    def test_precision_near_half(self) -> None:
        assert round_half_up(0.49999999999999994) == 0.0
        assert round_half_up(-0.5000000000000001) == -1.0

    def test_large_odd_integer_exact(self) -> None:
        assert round_half_up(4503599627370497.0) == 4503599627370497.0
        assert round_half_up(-4503599627370497.0) == -4503599627370497.0

    def test_returns_float(self) -> None:
        assert isinstance(round_half_up(2.5), float)

    def test_non_finite_passthrough(self) -> None:
        assert math.isnan(round_half_up(math.nan))
        assert round_half_up(math.inf) == math.inf
        assert round_half_up(-math.inf) == -math.inf
