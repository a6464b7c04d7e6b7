"""Logging configuration — stdlib logging rendered by Rich on stderr."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "linecalc"


def configure_logging(level: int = logging.WARNING, console: Console | None = None) -> logging.Logger:
    """Route the ``linecalc`` logger through a RichHandler.

    Safe to call repeatedly: the previously installed handler is replaced.
    Stdout is never written to, so piped results stay clean.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
