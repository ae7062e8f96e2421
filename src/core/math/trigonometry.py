"""
Trigonometry — sin, cos, tan на фиксированном decimal-масштабе

Алгоритм sin/cos:
1. Редукция x = remainder(x, TWO_PI): ограничивает модуль одним оборотом,
   знак аргумента сохраняется
2. Точные short-circuit значения на landmark-углах 0, PI_HALF, PI,
   PI_THREE_HALVES, TWO_PI (ряд дал бы только приближение)
3. Ряд Маклорена через sum_series:
       sin: term_0 = x, term_k = term_{k-1} * -x² / ((2k)(2k+1))
       cos: term_0 = 1, term_k = term_{k-1} * -x² / ((2k-1)(2k))

tan = sin / cos; при cos, равном ровно нулю, поднимается UndefinedResultError.

См. http://en.wikipedia.org/wiki/Trigonometric_functions
"""

from decimal import Decimal

from src.core.math.constants import PI, PI_HALF, PI_THREE_HALVES, TWO_PI
from src.core.math.fixed_decimal import (
    ONE,
    ZERO,
    DecimalLike,
    UndefinedResultError,
    fix,
    fixed_arithmetic,
    fixed_remainder,
    to_fixed,
)
from src.core.math.series import sum_series


@fixed_arithmetic
def sin(x: DecimalLike) -> Decimal:
    """
    Синус угла.

    Args:
        x: Угол в радианах (любой знак и величина)

    Returns:
        sin(x) с точностью до единиц последнего разряда

    Examples:
        >>> sin(PI_HALF)
        Decimal('1')
        >>> sin(0)
        Decimal('0')
    """
    x = fixed_remainder(to_fixed(x), TWO_PI)

    if x == ZERO or x == PI or x == TWO_PI:
        return ZERO
    if x == PI_HALF:
        return ONE
    if x == PI_THREE_HALVES:
        return -ONE

    x_squared = x * x

    return sum_series(
        x,
        lambda term, n: term * -x_squared / (n * n + n),
        name="sin",
    )


@fixed_arithmetic
def cos(x: DecimalLike) -> Decimal:
    """
    Косинус угла.

    Args:
        x: Угол в радианах (любой знак и величина)

    Returns:
        cos(x) с точностью до единиц последнего разряда
    """
    x = fixed_remainder(to_fixed(x), TWO_PI)

    if x == ZERO or x == TWO_PI:
        return ONE
    if x == PI:
        return -ONE
    if x == PI_HALF or x == PI_THREE_HALVES:
        return ZERO

    x_squared = x * x

    return sum_series(
        ONE,
        lambda term, n: term * -x_squared / (n * n - n),
        name="cos",
    )


@fixed_arithmetic
def tan(radians: DecimalLike) -> Decimal:
    """
    Тангенс угла: sin / cos.

    Raises:
        UndefinedResultError: Если cos(radians) ровно 0 (PI_HALF, PI_THREE_HALVES)
        DecimalOverflowError: Если результат превышает MAX_MAGNITUDE
    """
    radians = to_fixed(radians)
    cosine = cos(radians)

    if cosine == ZERO:
        raise UndefinedResultError(f"Tangent is undefined at this angle: {radians}")

    return fix(sin(radians) / cosine)
