"""
Core math modules для радиальных виджетов

Чистые числовые и геометрические функции без состояния.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    clamp,
    is_valid_float,
    round_half_up,
    sanitize_float,
)

# Intervals
from src.core.math.intervals import (
    InvalidIntervalError,
    between,
    limit,
    random_int,
)

# Radial
from src.core.math.radial import (
    DEFAULT_ROTATION_MAX,
    FULL_TURN_DEG,
    PERCENT_FACTOR,
    ang_rad,
    apply_percent,
    arctangent,
    cartes_xy,
    circumference,
    per_rotation,
    percent,
    progress_ring,
    round_to,
    stroke_offset,
    value_to_percent,
)

__all__ = [
    # Numerical Safeguards
    "clamp",
    "is_valid_float",
    "round_half_up",
    "sanitize_float",
    # Intervals — Exceptions
    "InvalidIntervalError",
    # Intervals — Functions
    "between",
    "limit",
    "random_int",
    # Radial — Constants
    "DEFAULT_ROTATION_MAX",
    "FULL_TURN_DEG",
    "PERCENT_FACTOR",
    # Radial — Functions
    "ang_rad",
    "apply_percent",
    "arctangent",
    "cartes_xy",
    "circumference",
    "per_rotation",
    "percent",
    "progress_ring",
    "round_to",
    "stroke_offset",
    "value_to_percent",
]
