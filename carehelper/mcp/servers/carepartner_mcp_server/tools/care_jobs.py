# carehelper/mcp/servers/carepartner_mcp_server/tools/care_jobs.py
# SPDX-License-Identifier: Apache-2.0
"""
CarePartner care-job search tool.

- Registered only when OPENROUTER_API_KEY is present (soft-disable otherwise).
- The key is captured once at registration in a frozen CareJobsConfig.
- Each call: one OpenRouter request under a 25s deadline; every outcome is
  returned as a text ToolResult, failures included.
"""

from __future__ import annotations

import logging
from typing import Annotated, Mapping, Optional

import httpx
from fastmcp import FastMCP
from fastmcp.tools.tool import ToolResult
from pydantic import Field

from ..config.messages import ErrorMessages, InfoMessages
from ..config.secret import Secrets
from ..config.settings import API_KEY_ENV, CareJobsConfig
from ..error_handler import convert_exception_to_result, text_result
from ..http import CancellationToken, chat_completion
from ..prompts import SYSTEM_CARE_JOBS, user_care_jobs

logger = logging.getLogger(__name__)

TOOL_NAME = "search_care_jobs"
TOOL_DESCRIPTION = (
    "Search care-job postings near a given location on CarePartner "
    "(https://carepartner.kr), a Korean care-worker job service."
)

LocationArg = Annotated[
    str,
    Field(min_length=1, description="Address or region to search around"),
]


async def search_care_jobs(
    config: CareJobsConfig,
    location: str,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    token: Optional[CancellationToken] = None,
) -> ToolResult:
    """
    Ask OpenRouter for three CarePartner listings near `location`.

    Never raises for upstream problems: timeouts, transport faults, HTTP errors
    and malformed bodies all come back as an apology ToolResult.
    """
    try:
        message = await chat_completion(
            config,
            SYSTEM_CARE_JOBS,
            user_care_jobs(location),
            transport=transport,
            token=token,
        )
    except Exception as e:
        return convert_exception_to_result(e, TOOL_NAME)
    return text_result(message)


def register_search_care_jobs_tool(
    mcp: FastMCP,
    environ: Optional[Mapping[str, str]] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> bool:
    """
    Register `search_care_jobs` on `mcp` if the OpenRouter key is available.

    Returns True when the tool was registered. A missing key logs one warning
    and registers nothing.
    """
    api_key = Secrets.get_api_key(environ)
    if api_key is None:
        logger.warning(ErrorMessages.missing_api_key(API_KEY_ENV, TOOL_NAME))
        return False

    config = CareJobsConfig(api_key=api_key)

    async def search_care_jobs_tool(location: LocationArg):
        return await search_care_jobs(config, location, transport=transport)

    mcp.tool(search_care_jobs_tool, name=TOOL_NAME, description=TOOL_DESCRIPTION)
    logger.info(InfoMessages.tool_registered(TOOL_NAME))
    return True
