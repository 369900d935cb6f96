"""Editing session configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var
from .errors import ConfigurationError

LOG_LEVEL_ENV: Final[str] = "TUNESYNC_LOG_LEVEL"
SEED_FILE_ENV: Final[str] = "TUNESYNC_SEED_FILE"
DEFAULT_LOG_LEVEL: Final[int] = logging.INFO


@dataclass(frozen=True, slots=True)
class SessionConfig:
    log_level: int = DEFAULT_LOG_LEVEL
    seed_path: Path | None = None


def parse_log_level(name: str) -> int:
    level = logging.getLevelNamesMapping().get(name.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level: {name}")
    return level


def get_session_config() -> SessionConfig:
    level_name = optional_env_var(LOG_LEVEL_ENV)
    seed = optional_env_var(SEED_FILE_ENV)
    return SessionConfig(
        log_level=parse_log_level(level_name) if level_name else DEFAULT_LOG_LEVEL,
        seed_path=Path(seed).expanduser() if seed else None,
    )
