"""
Tests for Domain Models — Interval и Coordinate

Покрывает:
- Создание из последовательностей и приведение типов
- Immutability (frozen=True)
- Ошибки на неверной длине
"""

import pytest
from pydantic import ValidationError

from src.core.domain import Coordinate, Interval, as_coordinate, as_interval


class TestInterval:
    """Тесты Interval."""

    def test_from_sequence(self):
        interval = Interval.from_sequence([0, 10])
        assert interval.min_value == 0.0
        assert interval.max_value == 10.0
        assert interval.as_tuple() == (0.0, 10.0)

    def test_reversed_bounds_allowed(self):
        interval = Interval.from_sequence((10, 0))
        assert interval.is_ordered is False

    def test_is_ordered(self):
        assert Interval(min_value=1, max_value=1).is_ordered
        assert Interval(min_value=-1, max_value=1).is_ordered

    @pytest.mark.parametrize("values", [[], [1], [1, 2, 3]])
    def test_wrong_length(self, values):
        with pytest.raises(ValueError, match="Interval requires exactly 2 values"):
            Interval.from_sequence(values)

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            Interval.from_sequence(["low", "high"])

    def test_frozen(self):
        interval = Interval(min_value=0, max_value=1)
        with pytest.raises(ValidationError):
            interval.min_value = 5


class TestCoordinate:
    """Тесты Coordinate."""

    def test_from_sequence(self):
        point = Coordinate.from_sequence((3, -4))
        assert point.x == 3.0
        assert point.y == -4.0
        assert point.as_tuple() == (3.0, -4.0)

    def test_wrong_length(self):
        with pytest.raises(ValueError, match="Coordinate requires exactly 2 values"):
            Coordinate.from_sequence([1, 2, 3])

    def test_frozen(self):
        point = Coordinate(x=0, y=0)
        with pytest.raises(ValidationError):
            point.x = 1


class TestCoercion:
    """Тесты as_interval / as_coordinate."""

    def test_model_returned_as_is(self):
        interval = Interval(min_value=0, max_value=1)
        point = Coordinate(x=1, y=2)
        assert as_interval(interval) is interval
        assert as_coordinate(point) is point

    def test_sequences_coerced(self):
        assert as_interval([2, 5]) == Interval(min_value=2, max_value=5)
        assert as_coordinate((1.5, 2.5)) == Coordinate(x=1.5, y=2.5)

    def test_generator_accepted(self):
        assert as_coordinate(v for v in (1, 2)).as_tuple() == (1.0, 2.0)
