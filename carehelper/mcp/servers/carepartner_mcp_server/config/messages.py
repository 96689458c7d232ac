# carehelper/mcp/servers/carepartner_mcp_server/config/messages.py
# SPDX-License-Identifier: Apache-2.0
"""
Centralized message text for the CarePartner MCP server.

- User-facing text goes into tool results.
- Operator-facing text goes to the logs (never includes the key).
"""

from __future__ import annotations

APOLOGY_PREAMBLE = (
    "Sorry, something went wrong while searching for care jobs. "
    "Please try again shortly."
)


class ErrorMessages:
    """Centralized error message formatting for consistent communication."""

    @staticmethod
    def apology(detail: str) -> str:
        return f"{APOLOGY_PREAMBLE}\nError: {detail}"

    @staticmethod
    def missing_api_key(env_var: str, tool_name: str) -> str:
        return f"{env_var} is not set in the environment or .env; the '{tool_name}' tool will not be registered."

    @staticmethod
    def missing_api_key_cli(env_var: str) -> str:
        return (
            f"No OpenRouter API key found.\n"
            f"Set {env_var} in your environment or in a .env file, e.g.:\n"
            f"  {env_var}=sk-or-..."
        )


class InfoMessages:
    """Centralized informational message formatting."""

    @staticmethod
    def tool_registered(tool_name: str) -> str:
        return f"Registered tool '{tool_name}' (OpenRouter key from environment, masked)."
