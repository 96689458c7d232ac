# carehelper/mcp/servers/carepartner_mcp_server/config/settings.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from dataclasses import dataclass

API_KEY_ENV = "OPENROUTER_API_KEY"

# Fixed request shape; not configurable per call.
OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"
MODEL = "perplexity/sonar-pro"
TIMEOUT_MS = 25000
MAX_TOKENS = 500
TEMPERATURE = 0.7

# How much of an error body ends up in the tool result
BODY_EXCERPT_CHARS = 500


@dataclass(frozen=True)
class CareJobsConfig:
    """Everything the search handler needs, captured once at registration."""
    api_key: str
    url: str = OPENROUTER_URL
    model: str = MODEL
    timeout_ms: int = TIMEOUT_MS
    max_tokens: int = MAX_TOKENS
    temperature: float = TEMPERATURE

    def __repr__(self) -> str:
        # never print the key
        return (
            f"CareJobsConfig(api_key='***', url={self.url!r}, model={self.model!r}, "
            f"timeout_ms={self.timeout_ms}, max_tokens={self.max_tokens}, "
            f"temperature={self.temperature})"
        )
