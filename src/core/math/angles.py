"""
Angles — Нормализация углов и конверсия градусы ↔ радианы

- normalize_angle: радианы → [0, TWO_PI)
- normalize_angle_deg: градусы → [0, 360)
- to_rad: градусы → радианы с точными landmark-кратными
- to_deg: радианы → градусы

Для углов, кратных 360/270/180/90/45/15 градусам, to_rad возвращает точное
кратное соответствующей константы: общая формула degrees * PI / 180
дала бы ошибку округления в последнем разряде как раз на этих углах.
"""

from decimal import Decimal
from typing import Final

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
from src.core.math.fixed_decimal import (
    ZERO,
    DecimalLike,
    fix,
    fixed_arithmetic,
    fixed_remainder,
    to_fixed,
)

# Порядок важен: первое совпадение побеждает (360 раньше 180 и т.д.)
LANDMARK_DEGREES: Final[tuple[tuple[Decimal, Decimal], ...]] = (
    (Decimal(360), TWO_PI),
    (Decimal(270), PI_THREE_HALVES),
    (Decimal(180), PI),
    (Decimal(90), PI_HALF),
    (Decimal(45), PI_QUARTER),
    (Decimal(15), PI_TWELFTH),
)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


@fixed_arithmetic
def normalize_angle(radians: DecimalLike) -> Decimal:
    """
    Нормализация угла в радианах к интервалу [0, TWO_PI).

    Examples:
        >>> normalize_angle(-PI) == PI
        True
        >>> normalize_angle(TWO_PI * 1000)
        Decimal('0')
    """
    radians = fixed_remainder(to_fixed(radians), TWO_PI)
    if radians < ZERO:
        radians = fix(radians + TWO_PI)
    return radians


@fixed_arithmetic
def normalize_angle_deg(degrees: DecimalLike) -> Decimal:
    """
    Нормализация угла в градусах к интервалу [0, 360).

    Examples:
        >>> normalize_angle_deg(-90)
        Decimal('270.0000000000000000000000000000')
    """
    degrees = fixed_remainder(to_fixed(degrees), DEGREES_FULL_TURN)
    if degrees < ZERO:
        degrees = fix(degrees + DEGREES_FULL_TURN)
    return degrees


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


@fixed_arithmetic
def to_rad(degrees: DecimalLike) -> Decimal:
    """
    Конверсия градусов в радианы (Pi радиан = 180 градусов).

    Args:
        degrees: Угол в градусах

    Returns:
        Угол в радианах. Для кратных 360/270/180/90/45/15 градусов —
        точное кратное TWO_PI/PI_THREE_HALVES/PI/PI_HALF/PI_QUARTER/PI_TWELFTH.

    Examples:
        >>> to_rad(180) == PI
        True
        >>> to_rad(-90) == -PI_HALF
        True
    """
    degrees = to_fixed(degrees)

    for landmark, radians in LANDMARK_DEGREES:
        if degrees % landmark == ZERO:
            return fix(degrees / landmark * radians)

    return fix(degrees * PI / DEGREES_HALF_TURN)


@fixed_arithmetic
def to_deg(radians: DecimalLike) -> Decimal:
    """Конверсия радиан в градусы: radians * (180 / Pi)."""
    return fix(to_fixed(radians) * RAD_TO_DEG)
