#!/usr/bin/env python3
"""Entry point for the carepartner-mcp-server command."""

from .cli_main import main

if __name__ == "__main__":
    main()
