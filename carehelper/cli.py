# carehelper/cli.py
from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from carehelper.settings import SETTINGS
from carehelper.mcp.servers.carepartner_mcp_server.config import (
    API_KEY_ENV,
    CareJobsConfig,
    ErrorMessages,
    Secrets,
)
from carehelper.mcp.servers.carepartner_mcp_server.exceptions import CredentialMissingError
from carehelper.mcp.servers.carepartner_mcp_server.logging_config import configure_logging
from carehelper.mcp.servers.carepartner_mcp_server.server import create_mcp_server
from carehelper.mcp.servers.carepartner_mcp_server.tools.care_jobs import search_care_jobs

app = typer.Typer(add_completion=False, help="CarePartner care-job search over MCP.")

CAREHELPER_THEME = Theme({
    "info": "blue",
    "success": "green",
    "warning": "yellow",
    "error": "bold red",
    "table.title": "bold blue",
    "table.header": "green",
})
console = Console(theme=CAREHELPER_THEME)


@app.command()
def serve() -> None:
    """Run the MCP server over stdio (for MCP hosts)."""
    from carehelper.mcp.servers.carepartner_mcp_server.cli_main import main as run_stdio

    run_stdio()


@app.command()
def search(location: str = typer.Argument(..., help="Address or region, e.g. '서울 강남구'")) -> None:
    """Run one care-job search locally and print the result."""
    configure_logging(SETTINGS.log_level, SETTINGS.log_json)

    location = location.strip()
    if not location:
        console.print("[error]Location cannot be empty.[/error]")
        raise typer.Exit(code=2)

    try:
        api_key = Secrets.require_api_key()
    except CredentialMissingError:
        console.print(f"[error]{ErrorMessages.missing_api_key_cli(API_KEY_ENV)}[/error]")
        raise typer.Exit(code=1)

    console.print(f"[info]Searching CarePartner jobs near[/info] [bold]{escape(location)}[/bold] ...")
    result = asyncio.run(search_care_jobs(CareJobsConfig(api_key=api_key), location))
    text = "\n".join(getattr(block, "text", "") for block in result.content)
    console.print(Panel(Text(text), title="search_care_jobs", border_style="green"))


@app.command()
def tools() -> None:
    """List the tools the server exposes with the current environment."""
    configure_logging(SETTINGS.log_level, SETTINGS.log_json)

    mcp = create_mcp_server()
    registered = asyncio.run(mcp.get_tools())

    table = Table(title="CarePartner MCP tools", title_style="table.title", header_style="table.header")
    table.add_column("Name", style="bold")
    table.add_column("Description", overflow="fold")
    for name, tool in sorted(registered.items()):
        table.add_row(name, tool.description or "")
    console.print(table)

    if Secrets.get_api_key() is None:
        console.print(f"[warning]{API_KEY_ENV} is not set; search_care_jobs is unavailable.[/warning]")


if __name__ == "__main__":
    app()
