"""
Тесты для модуля Fixed Decimal

Проверяет:
1. Квантование к фиксированному масштабу и нормализацию нуля
2. Приведение входа (Decimal/int/float/str) и отказ для NaN/Infinity
3. Точный остаток и корректно округлённый квадратный корень
4. Округление "от нуля"
5. Проверки диапазонов
"""

from decimal import Decimal

import pytest

from src.core.math.fixed_decimal import (
    FIXED_CONTEXT,
    MAX_MAGNITUDE,
    ONE,
    POWERS_OF_10,
    QUANTUM,
    SCALE,
    ZERO,
    DecimalMathError,
    DecimalOverflowError,
    DomainError,
    UndefinedResultError,
    fix,
    fixed_remainder,
    fixed_sqrt,
    in_range_excl,
    in_range_incl,
    round_from_zero,
    to_fixed,
    truncate,
)

# =============================================================================
# ТЕСТЫ КВАНТОВАНИЯ
# =============================================================================


class TestFix:
    """Тесты для fix"""

    def test_quantizes_to_scale(self) -> None:
        """Результат имеет ровно SCALE дробных знаков"""
        result = fix(Decimal("1.25"))
        assert result == Decimal("1.25")
        assert result.as_tuple().exponent == -SCALE

    def test_rounds_half_even(self) -> None:
        """Округление последнего разряда по ROUND_HALF_EVEN"""
        assert fix(Decimal("0.00000000000000000000000000005")) == ZERO
        assert fix(Decimal("0.00000000000000000000000000015")) == 2 * QUANTUM
        assert fix(Decimal("0.000000000000000000000000000151")) == 2 * QUANTUM

    def test_underflow_becomes_exact_zero(self) -> None:
        """Значения меньше половины QUANTUM становятся ровно нулём"""
        assert fix(Decimal("1E-30")) is ZERO
        assert fix(Decimal("-1E-30")) is ZERO
        assert not fix(Decimal("-1E-30")).is_signed()

    def test_nan_rejected(self) -> None:
        """NaN/Infinity отвергаются"""
        with pytest.raises(DomainError, match="finite"):
            fix(Decimal("NaN"))

        with pytest.raises(DomainError, match="finite"):
            fix(Decimal("-Infinity"))

    def test_overflow(self) -> None:
        """Значение больше MAX_MAGNITUDE вызывает DecimalOverflowError"""
        assert fix(MAX_MAGNITUDE) == MAX_MAGNITUDE

        with pytest.raises(DecimalOverflowError):
            fix(MAX_MAGNITUDE + 1)

    def test_template_context_untouched(self) -> None:
        """Флаги округления не оседают в общем шаблоне FIXED_CONTEXT"""
        fix(Decimal("0.123456789012345678901234567891"))
        to_fixed("1E-40")
        round_from_zero("2.5", 0)

        assert not any(FIXED_CONTEXT.flags.values())


class TestToFixed:
    """Тесты для to_fixed"""

    def test_decimal_int_str(self) -> None:
        """Decimal, int и str приводятся к одному значению"""
        assert to_fixed(Decimal("2")) == Decimal(2)
        assert to_fixed(2) == Decimal(2)
        assert to_fixed("2") == Decimal(2)
        assert to_fixed("-0.5") == Decimal("-0.5")

    def test_float_uses_shortest_repr(self) -> None:
        """float конвертируется без двоичной ошибки представления"""
        assert to_fixed(0.1) == Decimal("0.1")
        assert to_fixed(-2.75) == Decimal("-2.75")

    def test_excess_digits_rounded(self) -> None:
        """Лишние дробные знаки округляются к масштабу"""
        assert to_fixed("1E-30") == ZERO
        assert to_fixed("0.33333333333333333333333333333333") == Decimal(
            "0.3333333333333333333333333333"
        )

    def test_invalid_string_rejected(self) -> None:
        """Нечисловая строка → DomainError"""
        with pytest.raises(DomainError, match="not a valid decimal"):
            to_fixed("abc")

    def test_nan_inf_rejected(self) -> None:
        """NaN/Inf отвергаются"""
        with pytest.raises(DomainError):
            to_fixed("NaN")

        with pytest.raises(DomainError):
            to_fixed(float("inf"))

        with pytest.raises(DomainError):
            to_fixed(float("nan"))

    def test_unsupported_types_rejected(self) -> None:
        """bool, None и прочие типы → TypeError"""
        with pytest.raises(TypeError):
            to_fixed(True)

        with pytest.raises(TypeError):
            to_fixed(None)

        with pytest.raises(TypeError):
            to_fixed([1])

    def test_overflow(self) -> None:
        with pytest.raises(DecimalOverflowError):
            to_fixed("1E+30")


# =============================================================================
# ТЕСТЫ ТОЧНЫХ ПРИМИТИВОВ
# =============================================================================


class TestFixedRemainder:
    """Тесты для fixed_remainder"""

    def test_sign_follows_dividend(self) -> None:
        """Знак остатка совпадает со знаком делимого (усечённое деление)"""
        assert fixed_remainder(Decimal(7), Decimal(3)) == ONE
        assert fixed_remainder(Decimal(-7), Decimal(3)) == -ONE
        assert fixed_remainder(Decimal(7), Decimal(-3)) == ONE

    def test_exact_for_fractional_values(self) -> None:
        """Остаток точен для дробных значений"""
        assert fixed_remainder(Decimal("10.5"), Decimal("0.25")) == ZERO
        assert fixed_remainder(Decimal("10.6"), Decimal("0.25")) == Decimal("0.1")

    def test_zero_divisor_rejected(self) -> None:
        with pytest.raises(DomainError, match="non-zero"):
            fixed_remainder(ONE, ZERO)


class TestTruncate:
    """Тесты для truncate"""

    def test_truncates_toward_zero(self) -> None:
        assert truncate(Decimal("2.9")) == 2
        assert truncate(Decimal("-2.9")) == -2
        assert truncate(Decimal("0.5")) == 0


class TestFixedSqrt:
    """Тесты для fixed_sqrt"""

    def test_perfect_squares(self) -> None:
        assert fixed_sqrt(Decimal(4)) == 2
        assert fixed_sqrt(Decimal("0.25")) == Decimal("0.5")
        assert fixed_sqrt(ZERO) == ZERO

    def test_correctly_rounded(self) -> None:
        """sqrt(2) корректно округлён к последнему разряду"""
        assert fixed_sqrt(Decimal(2)) == Decimal("1.4142135623730950488016887242")

    def test_negative_rejected(self) -> None:
        with pytest.raises(DomainError, match="non-negative"):
            fixed_sqrt(Decimal(-1))


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ И ДИАПАЗОНОВ
# =============================================================================


class TestRoundFromZero:
    """Тесты для round_from_zero"""

    def test_half_rounds_away_from_zero(self) -> None:
        """Половина округляется от нуля в обе стороны"""
        assert round_from_zero(Decimal("2.5"), 0) == 3
        assert round_from_zero(Decimal("-2.5"), 0) == -3
        assert round_from_zero(Decimal("0.5"), 0) == 1

    def test_places(self) -> None:
        assert round_from_zero(Decimal("1.2345"), 2) == Decimal("1.23")
        assert round_from_zero(Decimal("-1.235"), 2) == Decimal("-1.24")
        assert round_from_zero(Decimal("1.005"), 2) == Decimal("1.01")

    def test_result_has_requested_places(self) -> None:
        result = round_from_zero(Decimal("3.14159"), 3)
        assert result == Decimal("3.142")
        assert result.as_tuple().exponent == -3

    @pytest.mark.parametrize(
        "value, decimals, expected",
        [
            (0, 0, "0"),
            ("-0.4", 0, "0"),
            ("-0.004", 2, "0.00"),
            ("0.004", 2, "0.00"),
        ],
    )
    def test_zero_result_is_unsigned(self, value: str, decimals: int, expected: str) -> None:
        """Округление к нулю даёт ZERO без знака ("-0" не возвращается)"""
        result = round_from_zero(value, decimals)
        assert result == ZERO
        assert not result.is_signed()
        assert str(result) == expected

    def test_accepts_plain_numbers(self) -> None:
        assert round_from_zero("7.45", 1) == Decimal("7.5")
        assert round_from_zero(7, 2) == 7

    def test_negative_places_rejected(self) -> None:
        """Отрицательное число знаков → DomainError"""
        with pytest.raises(DomainError, match="greater than or equal to 0"):
            round_from_zero(Decimal("1.5"), -1)

    def test_places_beyond_scale_rejected(self) -> None:
        with pytest.raises(DomainError):
            round_from_zero(Decimal("1.5"), SCALE + 1)

    def test_powers_of_10_table(self) -> None:
        """Таблица степеней десяти покрывает 0..SCALE"""
        assert len(POWERS_OF_10) == SCALE + 1
        assert POWERS_OF_10[0] == 1
        assert POWERS_OF_10[3] == 1000
        assert POWERS_OF_10[SCALE] == Decimal(10) ** SCALE


class TestInRange:
    """Тесты для in_range_incl / in_range_excl"""

    def test_inclusive(self) -> None:
        assert in_range_incl(Decimal(0), Decimal(0), Decimal(1)) is True
        assert in_range_incl(Decimal(1), Decimal(0), Decimal(1)) is True
        assert in_range_incl(Decimal("1.5"), Decimal(0), Decimal(1)) is False

    def test_exclusive(self) -> None:
        assert in_range_excl(Decimal("0.5"), Decimal(0), Decimal(1)) is True
        assert in_range_excl(Decimal(0), Decimal(0), Decimal(1)) is False
        assert in_range_excl(Decimal(1), Decimal(0), Decimal(1)) is False

    def test_inverted_limits_rejected(self) -> None:
        with pytest.raises(DomainError, match="Upper limit is less than lower limit"):
            in_range_incl(Decimal(0), Decimal(1), Decimal(0))

        with pytest.raises(DomainError, match="Upper limit is less than lower limit"):
            in_range_excl(Decimal(0), Decimal(1), Decimal(0))


class TestExceptionHierarchy:
    """Все ошибки ядра наследуют DecimalMathError и стандартные исключения"""

    def test_hierarchy(self) -> None:
        assert issubclass(DomainError, DecimalMathError)
        assert issubclass(DomainError, ValueError)
        assert issubclass(UndefinedResultError, DecimalMathError)
        assert issubclass(UndefinedResultError, ArithmeticError)
        assert issubclass(DecimalOverflowError, OverflowError)
