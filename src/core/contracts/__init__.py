"""
Contract Validation Module

Валидация JSON контрактов радиальных виджетов.
"""

from .validators import (
    ContractValidator,
    CoordinateValidator,
    IntervalValidator,
    RadialWidgetValidator,
    SchemaLoader,
    validate_coordinate,
    validate_interval,
    validate_radial_widget,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "IntervalValidator",
    "CoordinateValidator",
    "RadialWidgetValidator",
    # Functions
    "validate_interval",
    "validate_coordinate",
    "validate_radial_widget",
]
