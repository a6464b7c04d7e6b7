"""linecalc pipeline — parse → calculate → render, one line at a time.

Every stage returns an ErrorMessage instead of raising, so ``process`` always
produces printable text. The first failing stage's message is the whole
output for that line.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from linecalc.calculator import calculate
from linecalc.config import Settings
from linecalc.models import ErrorMessage
from linecalc.parser import parse_command
from linecalc.renderer import render_result

logger = logging.getLogger(__name__)


def process(line: str) -> str:
    """Process one input line into one output line."""
    command = parse_command(line)
    if isinstance(command, ErrorMessage):
        return command.message

    result = calculate(command)
    if isinstance(result, ErrorMessage):
        return result.message

    rendered = render_result(result)
    logger.debug("rendered %r", rendered)
    return rendered


def process_lines(lines: Iterable[str], settings: Optional[Settings] = None) -> Iterator[str]:
    """Lazily process a stream of lines (e.g. stdin).

    Trailing newlines are stripped. With ``settings.skip_blank`` set,
    whitespace-only lines produce no output instead of a parse error.
    """
    settings = settings or Settings()
    for raw in lines:
        line = raw.rstrip("\r\n")
        if settings.skip_blank and not line.strip():
            continue
        yield process(line)
