"""
Inverse Trigonometry — atan, atan2, asin, acos на фиксированном decimal-масштабе

atan:
- Точные значения при x = -1, 0, 1
- Свёртка диапазона: при |x| > 1 используется atan(x) = ±PI_HALF - atan(1/x),
  после одной свёртки аргумент всегда в [-1, 1]
- Ряд Эйлера (быстрее ряда Маклорена вблизи ±1):
      y = x² / (1 + x²)
      term_0 = x / (1 + x²), term_k = term_{k-1} * y * (2k) / (2k + 1)
  См. http://mathworld.wolfram.com/InverseTangent.html

atan2: разрешение квадранта поверх atan, диапазон (-Pi, Pi].

asin/acos сводятся к atan через квадратный корень:
      asin(z) = 2 * atan(z / (1 + sqrt(1 - z²)))
      acos(z) = 2 * atan(sqrt(1 - z²) / (1 + z))
Прямой ряд Тейлора для asin сходится недопустимо медленно вблизи ±1.
"""

from decimal import Decimal

from src.core.math.constants import PI, PI_HALF, PI_QUARTER
from src.core.math.fixed_decimal import (
    ONE,
    ZERO,
    DecimalLike,
    DomainError,
    fix,
    fixed_arithmetic,
    fixed_sqrt,
    to_fixed,
)
from src.core.math.series import sum_series


# =============================================================================
# ATAN
# =============================================================================


def _atan_principal(x: Decimal) -> Decimal:
    """atan(x) для x из [-1, 1]."""
    if x == -ONE:
        return -PI_QUARTER
    if x == ZERO:
        return ZERO
    if x == ONE:
        return PI_QUARTER

    x_squared = x * x
    denominator = ONE + x_squared
    y = x_squared / denominator

    return sum_series(
        x / denominator,
        lambda term, n: term * y * n / (n + 1),
        name="atan",
    )


def _atan(x: Decimal) -> Decimal:
    """
    atan(x) для произвольного (не обязательно квантованного) x.

    Аргумент вне [-1, 1] сворачивается через 1/x ровно один раз.
    """
    if x < -ONE:
        return fix(-PI_HALF - _atan_principal(fix(ONE / x)))
    if x > ONE:
        return fix(PI_HALF - _atan_principal(fix(ONE / x)))
    return _atan_principal(fix(x))


@fixed_arithmetic
def atan(x: DecimalLike) -> Decimal:
    """
    Арктангенс.

    Args:
        x: Значение тангенса

    Returns:
        Угол в радианах из (-PI_HALF, PI_HALF)

    Examples:
        >>> atan(1) == PI_QUARTER
        True
        >>> atan(0)
        Decimal('0')
    """
    return _atan(to_fixed(x))


@fixed_arithmetic
def atan2(y: DecimalLike, x: DecimalLike) -> Decimal:
    """
    Угол точки (x, y) относительно положительной полуоси X.

    Args:
        y: Координата y
        x: Координата x

    Returns:
        Угол θ в радианах, -Pi < θ <= Pi:
        - квадрант 1: 0 < θ < Pi/2
        - квадрант 2: Pi/2 < θ <= Pi
        - квадрант 3: -Pi < θ < -Pi/2
        - квадрант 4: -Pi/2 < θ < 0
        Точка (0, 0) отображается в 0.

    Examples:
        >>> atan2(1, 0) == PI_HALF
        True
        >>> atan2(0, -1) == PI
        True
    """
    y, x = to_fixed(y), to_fixed(x)

    if x == ZERO and y == ZERO:
        return ZERO

    if x == ZERO:
        return PI_HALF if y > ZERO else -PI_HALF

    if y == ZERO:
        return ZERO if x > ZERO else PI

    # Отношение не квантуется: при |y/x| > MAX_MAGNITUDE свёртка в _atan
    # всё равно переводит его в [-1, 1]
    angle = _atan(y / x)

    if x > ZERO:
        return angle  # Q1 & Q4

    return fix(angle + PI) if y > ZERO else fix(angle - PI)  # Q2 : Q3


# =============================================================================
# ASIN / ACOS
# =============================================================================


def _validate_unit_interval(z: Decimal, name: str) -> None:
    if z < -ONE or z > ONE:
        raise DomainError(
            f"{name} argument must be in the range -1 to 1 inclusive, got {z}"
        )


@fixed_arithmetic
def asin(z: DecimalLike) -> Decimal:
    """
    Арксинус.

    Args:
        z: Значение синуса, -1 <= z <= 1

    Returns:
        Угол в радианах из [-PI_HALF, PI_HALF]

    Raises:
        DomainError: Если z вне [-1, 1]
    """
    z = to_fixed(z)
    _validate_unit_interval(z, "asin")

    if z == -ONE:
        return -PI_HALF
    if z == ZERO:
        return ZERO
    if z == ONE:
        return PI_HALF

    root = fixed_sqrt(ONE - z * z)
    return fix(2 * _atan(fix(z / (ONE + root))))


@fixed_arithmetic
def acos(z: DecimalLike) -> Decimal:
    """
    Арккосинус.

    Args:
        z: Значение косинуса, -1 <= z <= 1

    Returns:
        Угол в радианах из [0, PI]

    Raises:
        DomainError: Если z вне [-1, 1]
    """
    z = to_fixed(z)
    _validate_unit_interval(z, "acos")

    if z == -ONE:
        return PI
    if z == ZERO:
        return PI_HALF
    if z == ONE:
        return ZERO

    root = fixed_sqrt(ONE - z * z)
    return fix(2 * _atan(fix(root / (ONE + z))))
