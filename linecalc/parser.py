"""Command parser — turns one line of text into a Command.

Unparsable operands are kept as None rather than failing the parse, so the
calculator can report them as invalid arguments.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Optional

from linecalc.models import (
    AGGREGATES,
    PARSE_ERROR,
    Command,
    Divide,
    ErrorMessage,
    Keyword,
)

logger = logging.getLogger(__name__)

# ASCII integer or decimal literal with an optional leading minus: "4", "-3", "8.5", "5.", ".5"
_NUMBER_RE = re.compile(r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")


def to_number(token: str) -> Optional[float]:
    """Convert a single operand token to a float, or None if it isn't numeric.

    Literals too large for a float are treated as non-numeric.
    """
    if not _NUMBER_RE.fullmatch(token):
        return None
    value = float(token)
    if not math.isfinite(value):
        return None
    return value


def parse_command(line: str) -> Command | ErrorMessage:
    """Parse a line such as ``"sum 5 5 6 8.5"`` into a Command.

    Returns ErrorMessage("parse command ...") for an empty line, an unknown
    keyword, or a ``divide`` without exactly two operands.
    """
    tokens = line.split()
    if not tokens:
        logger.debug("empty input line")
        return PARSE_ERROR

    head, operands = tokens[0], tokens[1:]
    try:
        keyword = Keyword(head)
    except ValueError:
        logger.debug("unknown keyword %r", head)
        return PARSE_ERROR

    numbers = tuple(to_number(t) for t in operands)

    if keyword is Keyword.DIVIDE:
        if len(numbers) != 2:
            logger.debug("divide expects 2 operands, got %d", len(numbers))
            return PARSE_ERROR
        command: Command = Divide(numbers[0], numbers[1])
    else:
        command = AGGREGATES[keyword](numbers)

    logger.debug("parsed %r", command)
    return command
