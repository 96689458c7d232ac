from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

from dotenv import find_dotenv, load_dotenv


def load_env() -> bool:
    """Load .env from the working directory (or a parent); existing env vars win."""
    return load_dotenv(find_dotenv(usecwd=True))


load_env()  # load .env early (OPENROUTER_API_KEY lives there)


def _env_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    v = v.strip().lower()
    return v in {"1", "true", "yes", "on", "y", "t"}


def _stdout_is_tty() -> bool:
    return bool(getattr(sys.stdout, "isatty", lambda: False)())


@dataclass
class _Settings:
    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("CAREHELPER_LOG_LEVEL", "INFO").upper())
    # JSON logs by default when an MCP host owns our stdio
    log_json: bool = field(default_factory=lambda: _env_bool("CAREHELPER_LOG_JSON", not _stdout_is_tty()))


SETTINGS = _Settings()
