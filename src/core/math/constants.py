"""
Constants — Landmark-константы на фиксированном масштабе

Все значения получаются один раз при импорте из литерала Pi с запасом
точности (50 знаков) и квантуются к QUANTUM. После этого они неизменны
на всё время жизни процесса.

PI_THREE_HALVES определена как PI + PI_HALF (сумма уже квантованных значений),
именно с ней сравнивают sin/cos при точных short-circuit проверках.
"""

from decimal import Decimal
from typing import Final

from src.core.math.fixed_decimal import fix, fixed_arithmetic

# Pi с запасом 22 знака сверх SCALE
_PI_LITERAL: Final[str] = "3.14159265358979323846264338327950288419716939937510"


@fixed_arithmetic
def _pi_ratio(numerator: int, denominator: int) -> Decimal:
    """numerator * Pi / denominator, квантованное к фиксированному масштабу."""
    return fix(Decimal(_PI_LITERAL) * numerator / denominator)


@fixed_arithmetic
def _degrees_per_radian() -> Decimal:
    return fix(Decimal(180) / Decimal(_PI_LITERAL))


@fixed_arithmetic
def _landmark_sum(*landmarks: Decimal) -> Decimal:
    return fix(sum(landmarks))


# =============================================================================
# LANDMARK-КОНСТАНТЫ
# =============================================================================

PI: Final[Decimal] = _pi_ratio(1, 1)
TWO_PI: Final[Decimal] = _pi_ratio(2, 1)
PI_HALF: Final[Decimal] = _pi_ratio(1, 2)
PI_QUARTER: Final[Decimal] = _pi_ratio(1, 4)
PI_TWELFTH: Final[Decimal] = _pi_ratio(1, 12)
PI_THREE_HALVES: Final[Decimal] = _landmark_sum(PI, PI_HALF)

# 180 / Pi
RAD_TO_DEG: Final[Decimal] = _degrees_per_radian()

DEGREES_FULL_TURN: Final[Decimal] = Decimal(360)
DEGREES_HALF_TURN: Final[Decimal] = Decimal(180)
