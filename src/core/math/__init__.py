"""
Core math modules для decimal-тригонометрии

Тригонометрия и обратная тригонометрия на точном fixed-scale decimal типе,
без обращения к двоичным float-трансцендентным функциям.
"""

# Fixed-scale decimal primitive
from src.core.math.fixed_decimal import (
    # Scale parameters
    FIXED_CONTEXT,
    MAX_MAGNITUDE,
    ONE,
    POWERS_OF_10,
    QUANTUM,
    SCALE,
    ZERO,
    # Exceptions
    DecimalMathError,
    DecimalOverflowError,
    DomainError,
    UndefinedResultError,
    # Types
    DecimalLike,
    # Primitives
    fix,
    fixed_arithmetic,
    fixed_remainder,
    fixed_sqrt,
    to_fixed,
    truncate,
    # Rounding & ranges
    in_range_excl,
    in_range_incl,
    round_from_zero,
)

# Landmark constants
from src.core.math.constants import (
    DEGREES_FULL_TURN,
    DEGREES_HALF_TURN,
    PI,
    PI_HALF,
    PI_QUARTER,
    PI_THREE_HALVES,
    PI_TWELFTH,
    RAD_TO_DEG,
    TWO_PI,
)

# Series engine
from src.core.math.series import (
    MAX_SERIES_ITERATIONS,
    SeriesConvergenceError,
    sum_series,
)

# Angle normalization & conversion
from src.core.math.angles import (
    LANDMARK_DEGREES,
    normalize_angle,
    normalize_angle_deg,
    to_deg,
    to_rad,
)

# Direct trigonometry
from src.core.math.trigonometry import cos, sin, tan

# Inverse trigonometry
from src.core.math.inverse_trigonometry import acos, asin, atan, atan2

__all__ = [
    # Fixed Decimal — Scale parameters
    "FIXED_CONTEXT",
    "MAX_MAGNITUDE",
    "ONE",
    "POWERS_OF_10",
    "QUANTUM",
    "SCALE",
    "ZERO",
    # Fixed Decimal — Exceptions
    "DecimalMathError",
    "DecimalOverflowError",
    "DomainError",
    "UndefinedResultError",
    # Fixed Decimal — Types
    "DecimalLike",
    # Fixed Decimal — Primitives
    "fix",
    "fixed_arithmetic",
    "fixed_remainder",
    "fixed_sqrt",
    "to_fixed",
    "truncate",
    # Fixed Decimal — Rounding & ranges
    "in_range_excl",
    "in_range_incl",
    "round_from_zero",
    # Constants
    "DEGREES_FULL_TURN",
    "DEGREES_HALF_TURN",
    "PI",
    "PI_HALF",
    "PI_QUARTER",
    "PI_THREE_HALVES",
    "PI_TWELFTH",
    "RAD_TO_DEG",
    "TWO_PI",
    # Series
    "MAX_SERIES_ITERATIONS",
    "SeriesConvergenceError",
    "sum_series",
    # Angles
    "LANDMARK_DEGREES",
    "normalize_angle",
    "normalize_angle_deg",
    "to_deg",
    "to_rad",
    # Trigonometry
    "cos",
    "sin",
    "tan",
    # Inverse trigonometry
    "acos",
    "asin",
    "atan",
    "atan2",
]
