# carehelper/mcp/servers/carepartner_mcp_server/logging_config.py
# SPDX-License-Identifier: Apache-2.0
"""
Logging configuration for the CarePartner MCP server.

- Optional JSON or compact formats.
- Secret masking (Bearer tokens, OpenRouter 'sk-or-...' keys) for ALL logs.
- Logs go to stderr; stdout belongs to the MCP stdio transport.
"""

from __future__ import annotations

import json
import logging
import re
import sys
from typing import Any, Dict

BEARER_RE = re.compile(r"(Bearer\s+)([^\s'\",]+)", re.IGNORECASE)
OPENROUTER_KEY_RE = re.compile(r"\bsk-or-[A-Za-z0-9_-]+")

_PKG_PREFIX = "carehelper.mcp.servers.carepartner_mcp_server."


def mask_secrets(text: str) -> str:
    text = BEARER_RE.sub(r"\1***", text)
    return OPENROUTER_KEY_RE.sub("sk-or-***", text)


class PIIMaskingFilter(logging.Filter):
    """Mask API keys and bearer tokens in all log messages & args."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = mask_secrets(record.msg)
        if record.args:
            # Mapping args ("%(name)s" style) are left alone
            if isinstance(record.args, tuple):
                record.args = tuple(
                    mask_secrets(a) if isinstance(a, str) else a for a in record.args
                )
        return True


class MCPJSONFormatter(logging.Formatter):
    """One JSON object per line; error_type/error_details extras are kept."""

    _EXTRAS = ("error_type", "error_details")

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        entry.update({k: getattr(record, k) for k in self._EXTRAS if hasattr(record, k)})
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return mask_secrets(json.dumps(entry, ensure_ascii=False, default=str))


class CompactFormatter(logging.Formatter):
    """Compact formatter (HH:MM:SS, shortened logger names) with secret masking."""

    def format(self, record: logging.LogRecord) -> str:
        name = record.name
        if name.startswith(_PKG_PREFIX):
            name = name[len(_PKG_PREFIX):]
        asctime = self.formatTime(record, datefmt="%H:%M:%S")
        msg = mask_secrets(record.getMessage())
        line = f"{asctime} - {name} - {record.levelname} - {msg}"
        if record.exc_info:
            line = f"{line}\n{mask_secrets(self.formatException(record.exc_info))}"
        return line


def configure_logging(log_level: str = "INFO", json_format: bool = False) -> None:
    """Route all logs to stderr through one masked handler (JSON or compact)."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(MCPJSONFormatter() if json_format else CompactFormatter())
    handler.addFilter(PIIMaskingFilter())
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        handlers=[handler],
        force=True,
    )

    # httpx logs every request line at INFO
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
