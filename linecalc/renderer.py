"""Renderer — formats a successful Result as a sentence."""

from __future__ import annotations

from typing import Iterable

from linecalc.models import Average, Divide, Max, Min, Result, Sum

# Output sentence per command variant. Aggregates fill {numbers}; Divide
# fills {dividend} and {divisor}.
TEMPLATES: dict[type, str] = {
    Divide: "{dividend} divided by {divisor} is {result}",
    Sum: "the sum of {numbers} is {result}",
    Average: "the average of {numbers} is {result}",
    Min: "the minimum of {numbers} is {result}",
    Max: "the maximum of {numbers} is {result}",
}


def format_number(value: float) -> str:
    """Render whole values without a decimal point.

    ``2.0`` → ``"2"``, ``0.8`` → ``"0.8"``, ``-0.0`` → ``"0"``.
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_numbers(values: Iterable[float]) -> str:
    return " ".join(format_number(v) for v in values)


def render_result(result: Result) -> str:
    template = TEMPLATES[type(result.command)]
    if isinstance(result.command, Divide):
        dividend, divisor = result.numbers
        return template.format(
            dividend=format_number(dividend),
            divisor=format_number(divisor),
            result=format_number(result.result),
        )
    return template.format(
        numbers=format_numbers(result.numbers),
        result=format_number(result.result),
    )
