"""
Domain models and value objects.

Immutable value-типы, которыми обмениваются функции src.core.math.
"""

from src.core.domain.geometry import (
    Coordinate,
    CoordinateLike,
    Interval,
    IntervalLike,
    as_coordinate,
    as_interval,
)

__all__ = [
    "Interval",
    "IntervalLike",
    "Coordinate",
    "CoordinateLike",
    "as_interval",
    "as_coordinate",
]
