# carehelper/mcp/servers/carepartner_mcp_server/exceptions.py
# SPDX-License-Identifier: Apache-2.0
"""
Custom exceptions for the CarePartner MCP server.

Failure categories for one care-job search call:
- Missing OpenRouter credential (startup / CLI only)
- Deadline exceeded
- Upstream HTTP error status
- Upstream body without an assistant message

Transport faults (DNS, connection reset, ...) are not wrapped; callers see the
httpx exception unchanged.
"""

from __future__ import annotations

from typing import Any


class CarePartnerMCPError(Exception):
    """Base exception for the CarePartner MCP server."""
    pass


class CredentialMissingError(CarePartnerMCPError):
    """OPENROUTER_API_KEY is not set in the environment."""

    def __init__(self, env_var: str):
        super().__init__(f"{env_var} is not set")
        self.env_var = env_var


class RequestTimeoutError(CarePartnerMCPError):
    """The OpenRouter request did not finish before the deadline."""

    def __init__(self, timeout_ms: int):
        super().__init__(f"Request timed out ({timeout_ms}ms).")
        self.timeout_ms = timeout_ms


class UpstreamHTTPError(CarePartnerMCPError):
    """OpenRouter answered with a non-success status."""

    def __init__(self, status_code: int, reason: str, body: str):
        super().__init__(f"OpenRouter API request failed: {status_code} {reason} - {body}")
        self.status_code = status_code
        self.reason = reason
        self.body = body


class MalformedResponseError(CarePartnerMCPError):
    """Success status, but no assistant message at choices[0].message.content."""

    def __init__(self, payload: Any = None, detail: str = ""):
        super().__init__("Could not extract the assistant message from the OpenRouter response.")
        self.payload = payload
        self.detail = detail


__all__ = [
    "CarePartnerMCPError",
    "CredentialMissingError",
    "RequestTimeoutError",
    "UpstreamHTTPError",
    "MalformedResponseError",
]
