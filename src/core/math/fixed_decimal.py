"""
Fixed Decimal — Fixed-scale decimal primitive

Модуль задаёт числовой тип, на котором работает вся тригонометрия:
точное base-10 значение с фиксированным числом дробных знаков (SCALE).

- Квантование к фиксированному масштабу (fix) и приведение входа (to_fixed)
- Рабочий decimal-контекст с запасом точности (FIXED_CONTEXT)
- Точный остаток, усечение и корректно округлённый квадратный корень
- Округление "от нуля" и проверки диапазонов
- Иерархия исключений ядра

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любой результат, отдаваемый наружу, квантован к QUANTUM (ROUND_HALF_EVEN)
2. NaN/Infinity никогда не принимаются и не возвращаются
3. Значение, округлившееся к нулю, становится ровно ZERO (без "-0")
4. Арифметика внутри ядра выполняется в FIXED_CONTEXT (thread-local копия)
"""

import functools
from decimal import (
    ROUND_DOWN,
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import Callable, Final, ParamSpec, TypeVar, Union

# =============================================================================
# ПАРАМЕТРЫ ФИКСИРОВАННОГО МАСШТАБА
# =============================================================================

# Количество дробных знаков фиксированного типа
SCALE: Final[int] = 28

# Единица последнего разряда: наименьшее представимое ненулевое значение
QUANTUM: Final[Decimal] = Decimal(1).scaleb(-SCALE)

# Максимальный модуль значения (96-битный коэффициент)
MAX_MAGNITUDE: Final[Decimal] = Decimal("79228162514264337593543950335")

# Защитные разряды сверх SCALE для членов и частичных сумм рядов
GUARD_DIGITS: Final[int] = 8
GUARD_QUANTUM: Final[Decimal] = QUANTUM.scaleb(-GUARD_DIGITS)

# Рабочая точность промежуточных вычислений.
# Значение до MAX_MAGNITUDE с SCALE + GUARD_DIGITS дробными знаками
# помещается целиком, поэтому квантование не теряет старших разрядов.
WORKING_PRECISION: Final[int] = 72

FIXED_CONTEXT: Final[Context] = Context(
    prec=WORKING_PRECISION,
    rounding=ROUND_HALF_EVEN,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)

ZERO: Final[Decimal] = Decimal(0)
ONE: Final[Decimal] = Decimal(1)
HALF: Final[Decimal] = Decimal("0.5")

# Таблица степеней десяти 10^0 .. 10^SCALE
POWERS_OF_10: Final[tuple[Decimal, ...]] = tuple(
    Decimal(10**n) for n in range(SCALE + 1)
)

DecimalLike = Union[Decimal, int, float, str]

P = ParamSpec("P")
R = TypeVar("R")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DecimalMathError(Exception):
    """Базовое исключение decimal-математики."""


class DomainError(DecimalMathError, ValueError):
    """
    Аргумент вне допустимой области определения.

    Примеры: asin/acos вне [-1, 1], отрицательное число знаков округления,
    NaN/Infinity на входе, корень из отрицательного числа.
    Поднимается до начала вычислений, значение никогда не "клампится".
    """


class UndefinedResultError(DecimalMathError, ArithmeticError):
    """
    Результат не определён: вычисление попало точно в особую точку.

    Пример: tan при cos, равном ровно нулю. Проверка выполняется точным
    сравнением с нулём, без epsilon.
    """


class DecimalOverflowError(DecimalMathError, OverflowError):
    """Результат превышает MAX_MAGNITUDE."""


# =============================================================================
# КОНТЕКСТ И КВАНТОВАНИЕ
# =============================================================================


def fixed_arithmetic(func: Callable[P, R]) -> Callable[P, R]:
    """
    Выполнение функции внутри thread-local копии FIXED_CONTEXT.

    Вложенные вызовы безопасны: каждый открывает собственную копию контекста.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        with localcontext(FIXED_CONTEXT):
            return func(*args, **kwargs)

    return wrapper


def fix(value: Decimal) -> Decimal:
    """
    Квантование значения к фиксированному масштабу.

    Args:
        value: Промежуточный результат (любой точности)

    Returns:
        Значение, округлённое к QUANTUM по ROUND_HALF_EVEN.
        Ноль любого знака и экспоненты возвращается как ZERO.

    Raises:
        DomainError: Если value — NaN/Infinity
        DecimalOverflowError: Если abs(value) > MAX_MAGNITUDE

    Examples:
        >>> fix(Decimal("1.25"))
        Decimal('1.2500000000000000000000000000')
        >>> fix(Decimal("1E-30"))
        Decimal('0')
    """
    if not value.is_finite():
        raise DomainError(f"value must be finite (not NaN/Infinity), got {value}")

    if value.copy_abs() > MAX_MAGNITUDE:
        raise DecimalOverflowError(
            f"value exceeds maximum magnitude {MAX_MAGNITUDE}, got {value}"
        )

    # Флаги пишутся в копию: шаблон FIXED_CONTEXT не меняется
    with localcontext(FIXED_CONTEXT) as context:
        result = value.quantize(QUANTUM, rounding=ROUND_HALF_EVEN, context=context)

    if result.is_zero():
        return ZERO

    return result


def to_fixed(value: DecimalLike) -> Decimal:
    """
    Приведение входного значения к фиксированному decimal-типу.

    float конвертируется через свою кратчайшую строковую запись,
    чтобы не переносить двоичную ошибку представления (0.1 → Decimal("0.1")).

    Args:
        value: Decimal, int, float или строка с числом

    Returns:
        Значение масштаба SCALE

    Raises:
        DomainError: NaN/Infinity или строка, не являющаяся числом
        DecimalOverflowError: Значение больше MAX_MAGNITUDE
        TypeError: Неподдерживаемый тип (в том числе bool)

    Examples:
        >>> to_fixed(0.1)
        Decimal('0.1000000000000000000000000000')
        >>> to_fixed("-2")
        Decimal('-2.0000000000000000000000000000')
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise TypeError(
            f"value must be Decimal, int, float or str, got {type(value).__name__}"
        )

    if isinstance(value, float):
        value = repr(value)

    try:
        decimal_value = Decimal(value)
    except InvalidOperation as e:
        raise DomainError(f"value is not a valid decimal number, got {value!r}") from e

    return fix(decimal_value)


# =============================================================================
# ТОЧНЫЕ ПРИМИТИВЫ
# =============================================================================


@fixed_arithmetic
def fixed_remainder(dividend: Decimal, divisor: Decimal) -> Decimal:
    """
    Точный остаток от усечённого деления: dividend - truncate(dividend / divisor) * divisor.

    Знак результата совпадает со знаком dividend, abs(результат) < abs(divisor).

    Raises:
        DomainError: Если divisor == 0

    Examples:
        >>> fixed_remainder(Decimal(7), Decimal(3))
        Decimal('1.0000000000000000000000000000')
        >>> fixed_remainder(Decimal(-7), Decimal(3))
        Decimal('-1.0000000000000000000000000000')
    """
    if divisor == ZERO:
        raise DomainError("divisor must be non-zero")

    return fix(dividend % divisor)


def truncate(value: Decimal) -> Decimal:
    """Усечение к нулю (целая часть со знаком)."""
    return value.to_integral_value(rounding=ROUND_DOWN)


@fixed_arithmetic
def fixed_sqrt(value: Decimal) -> Decimal:
    """
    Корректно округлённый квадратный корень на фиксированном масштабе.

    Raises:
        DomainError: Если value < 0

    Examples:
        >>> fixed_sqrt(Decimal(4))
        Decimal('2.0000000000000000000000000000')
    """
    if value < ZERO:
        raise DomainError(f"square root argument must be non-negative, got {value}")

    return fix(value.sqrt())


# =============================================================================
# ОКРУГЛЕНИЕ И ДИАПАЗОНЫ
# =============================================================================


@fixed_arithmetic
def round_from_zero(value: DecimalLike, decimals: int) -> Decimal:
    """
    Округление "половина от нуля" до заданного числа дробных знаков.

    Алгоритм:
        truncate(value * 10^decimals ± 0.5) / 10^decimals

    Args:
        value: Исходное значение
        decimals: Число дробных знаков, 0 <= decimals <= SCALE

    Returns:
        Округлённое значение с ровно decimals дробными знаками ("-0" не возвращается)

    Raises:
        DomainError: Если decimals вне [0, SCALE]

    Examples:
        >>> round_from_zero(Decimal("2.5"), 0)
        Decimal('3')
        >>> round_from_zero(Decimal("-1.235"), 2)
        Decimal('-1.24')
        >>> round_from_zero(Decimal("-0.004"), 2)
        Decimal('0.00')
    """
    if decimals < 0:
        raise DomainError(f"decimals must be greater than or equal to 0, got {decimals}")

    if decimals > SCALE:
        raise DomainError(f"decimals must be <= {SCALE}, got {decimals}")

    value = to_fixed(value)
    scale_factor = POWERS_OF_10[decimals]
    rounding_factor = HALF if value > ZERO else -HALF

    places = ONE.scaleb(-decimals)
    rounded = truncate(value * scale_factor + rounding_factor) / scale_factor

    if rounded.is_zero():
        return ZERO.quantize(places)

    return rounded.quantize(places)


def _validate_limits(lower: Decimal, upper: Decimal) -> None:
    if upper < lower:
        raise DomainError(
            f"Upper limit is less than lower limit: lower={lower}, upper={upper}"
        )


def in_range_incl(value: DecimalLike, lower: DecimalLike, upper: DecimalLike) -> bool:
    """
    Проверка lower <= value <= upper.

    Raises:
        DomainError: Если upper < lower
    """
    value, lower, upper = to_fixed(value), to_fixed(lower), to_fixed(upper)
    _validate_limits(lower, upper)
    return lower <= value <= upper


def in_range_excl(value: DecimalLike, lower: DecimalLike, upper: DecimalLike) -> bool:
    """
    Проверка lower < value < upper.

    Raises:
        DomainError: Если upper < lower
    """
    value, lower, upper = to_fixed(value), to_fixed(lower), to_fixed(upper)
    _validate_limits(lower, upper)
    return lower < value < upper
