"""Calculator — validates a Command's operands and computes its value."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from linecalc.models import (
    DIVISION_BY_ZERO,
    INVALID_ARGUMENTS,
    Aggregate,
    Average,
    Command,
    Divide,
    ErrorMessage,
    Max,
    Min,
    Result,
    Sum,
)

logger = logging.getLogger(__name__)


def _average(numbers: Sequence[float]) -> float:
    return sum(numbers) / len(numbers)


# Aggregate variant → reducer over its (non-empty, fully present) operands
_REDUCERS: dict[type, Callable[[Sequence[float]], float]] = {
    Sum: lambda ns: float(sum(ns)),
    Average: _average,
    Min: min,
    Max: max,
}


def _present(numbers: Sequence[Optional[float]]) -> Optional[tuple[float, ...]]:
    """Return the operands as floats, or None if any is missing."""
    if any(n is None for n in numbers):
        return None
    return tuple(numbers)  # type: ignore[arg-type]


def _aggregate(command: Aggregate) -> Result | ErrorMessage:
    numbers = _present(command.numbers)
    if not numbers:
        # Missing operand or empty list: nothing meaningful to reduce.
        logger.debug("invalid operands for %s: %r", type(command).__name__, command.numbers)
        return INVALID_ARGUMENTS
    reducer = _REDUCERS[type(command)]
    return Result(command=command, numbers=numbers, result=reducer(numbers))


def _divide(command: Divide) -> Result | ErrorMessage:
    if command.dividend is None or command.divisor is None:
        logger.debug("invalid operands for Divide: %r", command)
        return INVALID_ARGUMENTS
    if command.divisor == 0:
        logger.debug("division by zero: %r", command)
        return DIVISION_BY_ZERO
    return Result(
        command=command,
        numbers=(command.dividend, command.divisor),
        result=command.dividend / command.divisor,
    )


def calculate(command: Command) -> Result | ErrorMessage:
    """Compute the result of a parsed command.

    Returns ErrorMessage("invalid arguments ...") when an operand is missing
    or an aggregate has no operands, and ErrorMessage("division by zero ...")
    for a present zero divisor.

    Raises TypeError only for a value that is not a Command at all, which is
    a programming error; nothing parse_command returns reaches that path.
    """
    if isinstance(command, Divide):
        return _divide(command)
    if isinstance(command, (Sum, Average, Min, Max)):
        return _aggregate(command)
    raise TypeError(f"calculate() expects a Command, got {type(command).__name__}")
