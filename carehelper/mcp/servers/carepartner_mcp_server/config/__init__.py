# SPDX-License-Identifier: Apache-2.0
"""
Configuration entrypoint for the CarePartner MCP server.

- Env-only secret (OPENROUTER_API_KEY), never persisted.
- Fixed request constants and the immutable CareJobsConfig.
"""

from __future__ import annotations

from .settings import (
    API_KEY_ENV,
    BODY_EXCERPT_CHARS,
    MAX_TOKENS,
    MODEL,
    OPENROUTER_URL,
    TEMPERATURE,
    TIMEOUT_MS,
    CareJobsConfig,
)
from .secret import Secrets
from .messages import APOLOGY_PREAMBLE, ErrorMessages, InfoMessages

__all__ = [
    "API_KEY_ENV",
    "BODY_EXCERPT_CHARS",
    "MAX_TOKENS",
    "MODEL",
    "OPENROUTER_URL",
    "TEMPERATURE",
    "TIMEOUT_MS",
    "CareJobsConfig",
    "Secrets",
    "APOLOGY_PREAMBLE",
    "ErrorMessages",
    "InfoMessages",
]
