# SPDX-License-Identifier: Apache-2.0
"""
CarePartner MCP Server.

Exposes one Model Context Protocol tool, `search_care_jobs`, which asks
OpenRouter (perplexity/sonar-pro) for care-job postings on carepartner.kr
near a given location.

- Env-only authentication: set OPENROUTER_API_KEY (or put it in .env)
- Without the key the tool is simply not registered
- Local stdio transport

See:
- carepartner_mcp_server.server.create_mcp_server
- carepartner_mcp_server.tools.register_all_tools
"""

from __future__ import annotations

from .server import create_mcp_server

__all__ = ["create_mcp_server"]
