# carehelper/mcp/servers/carepartner_mcp_server/server.py
# SPDX-License-Identifier: Apache-2.0
"""
FastMCP server for the CarePartner care-job search.

- Registers the care-job tool (only when OPENROUTER_API_KEY is set).
- Provides a 'ping' utility that is always available.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import httpx
from fastmcp import FastMCP

from carehelper.settings import load_env

from .tools import register_all_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "carepartner"


def create_mcp_server(
    environ: Optional[Mapping[str, str]] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastMCP:
    """
    Create and configure the MCP server with the CarePartner tools.

    With no `environ`, tools read os.environ after .env in the working
    directory has been loaded.
    """
    if environ is None:
        load_env()

    mcp = FastMCP(SERVER_NAME)

    register_all_tools(mcp, environ, transport=transport)

    # Health check
    @mcp.tool()
    async def ping() -> Dict[str, Any]:
        """Lightweight health check."""
        return {"status": "ok", "service": SERVER_NAME, "mode": "stdio"}

    return mcp
