"""
Series — Движок суммирования степенных рядов

Общий цикл для sin/cos/atan: каждый следующий член получается из предыдущего
умножением на множитель, зависящий от удвоенного индекса итерации.

Критерий остановки: член ряда, квантованный к QUANTUM, равен ровно нулю.
На фиксированном масштабе это достижимое событие, поэтому epsilon не нужен.
Нулевой член в сумму не добавляется.

Члены и частичная сумма ведутся с GUARD_DIGITS защитными разрядами (GUARD_QUANTUM),
результат квантуется к QUANTUM один раз: ошибка итога не превышает одной
единицы последнего разряда.

Защита: при превышении MAX_SERIES_ITERATIONS поднимается SeriesConvergenceError
(для корректных аргументов никогда не достигается).
"""

import logging
from decimal import Decimal
from typing import Callable, Final

from src.core.math.fixed_decimal import (
    GUARD_QUANTUM,
    ZERO,
    DecimalMathError,
    fix,
    fixed_arithmetic,
)

logger = logging.getLogger(__name__)

# Предел итераций (atan при |x| = 1 сходится примерно за 95 итераций)
MAX_SERIES_ITERATIONS: Final[int] = 10_000

# (previous_term, doubled_iteration) -> next_term
NextTerm = Callable[[Decimal, int], Decimal]


class SeriesConvergenceError(DecimalMathError, ArithmeticError):
    """Ряд не сошёлся за MAX_SERIES_ITERATIONS итераций."""


@fixed_arithmetic
def sum_series(
    first_term: Decimal,
    next_term: NextTerm,
    name: str = "series",
    max_iterations: int = MAX_SERIES_ITERATIONS,
) -> Decimal:
    """
    Суммирование ряда до первого члена, равного нулю на фиксированном масштабе.

    Члены и частичная сумма хранятся с GUARD_DIGITS защитными разрядами,
    поэтому ошибки округления отдельных членов не накапливаются в последнем
    разряде результата. Квантование к QUANTUM выполняется один раз, в конце.

    Args:
        first_term: Нулевой член ряда
        next_term: Функция (term, doubled_iteration) -> следующий член;
            doubled_iteration = 2, 4, 6, ...
        name: Имя ряда для диагностики
        max_iterations: Предел итераций

    Returns:
        Частичная сумма на момент остановки, квантованная к QUANTUM

    Raises:
        SeriesConvergenceError: Если член не обнулился за max_iterations
    """
    trace = logger.isEnabledFor(logging.DEBUG)

    result = ZERO
    term = first_term
    doubled_iteration = 0

    while True:
        # fix() также отвергает переполнение до квантования с защитой
        fixed_term = fix(term)
        term = term.quantize(GUARD_QUANTUM)

        if trace:
            logger.debug(
                "%s %03d: term=%s partial=%s",
                name,
                doubled_iteration // 2,
                fixed_term,
                fix(result + term),
            )

        if fixed_term == ZERO:
            break

        result += term
        doubled_iteration += 2

        if doubled_iteration // 2 > max_iterations:
            raise SeriesConvergenceError(
                f"{name} series did not converge in {max_iterations} iterations, "
                f"last term={fixed_term}"
            )

        term = next_term(term, doubled_iteration)

    return fix(result)
