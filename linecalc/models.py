"""Data models for the linecalc pipeline.

Keyword enum, the five command variants, ErrorMessage and Result — all the
typed structures that flow through parser → calculator → renderer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Keyword(str, Enum):
    """Recognized command keywords (first token of a line)."""

    SUM = "sum"
    AVERAGE = "average"
    MIN = "min"
    MAX = "max"
    DIVIDE = "divide"


@dataclass(frozen=True)
class Sum:
    numbers: tuple[Optional[float], ...]


@dataclass(frozen=True)
class Average:
    numbers: tuple[Optional[float], ...]


@dataclass(frozen=True)
class Min:
    numbers: tuple[Optional[float], ...]


@dataclass(frozen=True)
class Max:
    numbers: tuple[Optional[float], ...]


@dataclass(frozen=True)
class Divide:
    dividend: Optional[float]
    divisor: Optional[float]


Command = Union[Sum, Average, Min, Max, Divide]
Aggregate = Union[Sum, Average, Min, Max]

AGGREGATES: dict[Keyword, type] = {
    Keyword.SUM: Sum,
    Keyword.AVERAGE: Average,
    Keyword.MIN: Min,
    Keyword.MAX: Max,
}


@dataclass(frozen=True)
class ErrorMessage:
    """A parse or calculation failure.

    ``value`` holds the raw detail; ``message`` is what the user sees.
    """

    value: str

    @property
    def message(self) -> str:
        return f"Error: {self.value}"


PARSE_ERROR = ErrorMessage("parse command ...")
INVALID_ARGUMENTS = ErrorMessage("invalid arguments ...")
DIVISION_BY_ZERO = ErrorMessage("division by zero ...")


@dataclass(frozen=True)
class Result:
    """Successful calculation: the command, the operands used, the value."""

    command: Command
    numbers: tuple[float, ...]
    result: float
