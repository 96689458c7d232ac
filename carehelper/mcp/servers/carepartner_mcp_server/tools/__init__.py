# carehelper/mcp/servers/carepartner_mcp_server/tools/__init__.py
# SPDX-License-Identifier: Apache-2.0
"""
CarePartner MCP tools package.

- Care-job search via OpenRouter (perplexity/sonar-pro)

Design:
- FastMCP integration for MCP-compliant tool registration
- Shared error handling via carepartner_mcp_server.error_handler
- Env-only authentication (OPENROUTER_API_KEY), read once at registration
"""

from __future__ import annotations

from typing import Mapping, Optional

import httpx
from fastmcp import FastMCP

from .care_jobs import register_search_care_jobs_tool


def register_all_tools(
    mcp: FastMCP,
    environ: Optional[Mapping[str, str]] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> None:
    """
    Register all CarePartner MCP tools in one call.

    Usage:
        mcp = FastMCP("carepartner")
        register_all_tools(mcp)
    """
    register_search_care_jobs_tool(mcp, environ, transport=transport)


__all__ = [
    "register_all_tools",
    "register_search_care_jobs_tool",
]
