"""Environment-derived settings for linecalc.

Settings are read from LINECALC_* variables; CLI flags override them.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUTHY = ("1", "true", "yes", "on")

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Runtime options for the line loop."""

    log_level: str = DEFAULT_LOG_LEVEL
    skip_blank: bool = False

    @property
    def level_number(self) -> int:
        """Numeric logging level; unknown names fall back to WARNING."""
        level = logging.getLevelName(self.log_level.upper())
        if isinstance(level, int):
            return level
        return logging.WARNING


def _env_flag(env: Mapping[str, str], key: str) -> bool:
    return env.get(key, "").strip().lower() in _TRUTHY


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    Args:
        env: Mapping to read from. Defaults to os.environ.
    """
    env = os.environ if env is None else env
    return Settings(
        log_level=env.get("LINECALC_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip() or DEFAULT_LOG_LEVEL,
        skip_blank=_env_flag(env, "LINECALC_SKIP_BLANK"),
    )
