"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError
from .logging import configure_logging
from .session import SessionConfig, get_session_config, parse_log_level

__all__ = [
    "ConfigurationError",
    "SessionConfig",
    "configure_logging",
    "get_session_config",
    "optional_env_var",
    "parse_log_level",
]
