# Stdio entrypoint for the CarePartner MCP server
from __future__ import annotations

import logging
import sys

from carehelper import __version__
from carehelper.settings import SETTINGS

from .logging_config import configure_logging
from .server import create_mcp_server

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging(log_level=SETTINGS.log_level, json_format=SETTINGS.log_json)
    logger.info("CarePartner MCP Server v%s", __version__)

    try:
        mcp = create_mcp_server()
        logger.info("Running CarePartner MCP server (STDIO mode)...")
        mcp.run(transport="stdio")
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
        sys.exit(0)
    except Exception as e:
        logger.error("Fatal error running MCP server: %s", e, exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
