# carehelper/mcp/servers/carepartner_mcp_server/error_handler.py
# SPDX-License-Identifier: Apache-2.0
"""
Centralized error handling for the CarePartner MCP server.

Every failure of a tool call becomes an ordinary text ToolResult (apology plus
a one-line cause) so the MCP host never sees a raised exception.
"""

from __future__ import annotations

import logging

from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent

from .config.messages import ErrorMessages
from .exceptions import (
    MalformedResponseError,
    RequestTimeoutError,
    UpstreamHTTPError,
)

logger = logging.getLogger(__name__)


def text_result(text: str) -> ToolResult:
    """Wrap plain text as a single-item tool result."""
    return ToolResult(content=[TextContent(type="text", text=text)])


def describe_exception(exception: BaseException) -> str:
    """One-line, user-safe cause for an exception."""
    message = " ".join(str(exception).split())
    return message or type(exception).__name__


def apology_text(exception: BaseException) -> str:
    return ErrorMessages.apology(describe_exception(exception))


def convert_exception_to_result(exception: Exception, context: str = "") -> ToolResult:
    """
    Log `exception` and convert it to the apology ToolResult.
    """
    where = context or "<unknown>"

    if isinstance(exception, RequestTimeoutError):
        logger.warning("%s timed out after %sms", where, exception.timeout_ms)
    elif isinstance(exception, UpstreamHTTPError):
        logger.error(
            "%s failed: upstream HTTP %s %s",
            where,
            exception.status_code,
            exception.reason,
            extra={"error_type": "UpstreamHTTPError", "error_details": exception.body},
        )
    elif isinstance(exception, MalformedResponseError):
        # Body was already logged at ERROR where it was parsed
        logger.debug("%s failed: %s", where, exception.detail or exception)
    else:
        logger.error(
            "Error in %s: %s",
            where,
            exception,
            extra={
                "error_type": type(exception).__name__,
                "error_details": str(exception),
            },
            exc_info=True,
        )

    return text_result(apology_text(exception))
