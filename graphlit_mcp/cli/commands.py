"""CLI commands for graphlit-mcp.

``serve`` runs the MCP server over stdio; the other commands inspect the tool
registry, call a single tool, wait on async ingestion, and report configuration.
"""

import asyncio
import json
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from graphlit_mcp import __logo__, __version__
from graphlit_mcp.cli.shared.logging_utils import configure_logging
from graphlit_mcp.config.loader import load_config, require_platform_identity
from graphlit_mcp.config.schema import Config
from graphlit_mcp.ingestion.credentials import CredentialResolver
from graphlit_mcp.ingestion.polling import poll_until_done
from graphlit_mcp.remote.client import GraphlitClient
from graphlit_mcp.tools import ToolContext, ToolRegistry, build_registry
from graphlit_mcp.utils.exceptions import ConfigurationError, GraphlitMCPError

app = typer.Typer(
    name="graphlit-mcp",
    help=f"{__logo__} graphlit-mcp - Graphlit knowledge base over the Model Context Protocol",
    no_args_is_help=True,
)

console = Console()
# stdout carries the MCP transport while serving
err_console = Console(stderr=True)


class WaitTarget(str, Enum):
    content = "content"
    feed = "feed"


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} graphlit-mcp v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
):
    """graphlit-mcp - Graphlit MCP server."""
    pass


def _load(env_file: Path | None, *, require_identity: bool = True) -> Config:
    try:
        config = load_config(env_file)
        if require_identity:
            require_platform_identity(config)
    except ConfigurationError as e:
        err_console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1) from e
    return config


def _build_context(config: Config) -> ToolContext:
    client = GraphlitClient(config.platform, timeout=config.server.request_timeout)
    return ToolContext(
        client=client,
        credentials=CredentialResolver.from_settings(config.credentials),
        settings=config.server,
    )


def _build_registry(config: Config) -> ToolRegistry:
    return build_registry(_build_context(config))


_ENV_FILE = typer.Option(None, "--env-file", help="Dotenv file to read settings from (default ./.env)")


@app.command()
def serve(
    env_file: Path = _ENV_FILE,
    log_level: str = typer.Option(None, "--log-level", help="Override GRAPHLIT_MCP_LOG_LEVEL"),
):
    """Run the MCP server over stdio."""
    from graphlit_mcp.api.server import create_server, serve_stdio

    config = _load(env_file)
    log_path = configure_logging(log_level or config.server.log_level, config.server.log_file)
    registry = _build_registry(config)
    err_console.print(f"{__logo__} graphlit-mcp v{__version__}: {len(registry)} tools")
    if log_path:
        err_console.print(f"[dim]Logs: {log_path}[/dim]")
    try:
        asyncio.run(serve_stdio(create_server(registry)))
    except KeyboardInterrupt:
        err_console.print("[yellow]Stopped[/yellow]")


@app.command()
def tools(
    env_file: Path = _ENV_FILE,
    as_json: bool = typer.Option(False, "--json", help="Print full MCP tool definitions as JSON"),
):
    """List the tools the server exposes."""
    config = _load(env_file, require_identity=False)
    registry = _build_registry(config)
    definitions = registry.get_definitions()
    if as_json:
        console.print_json(json.dumps(definitions))
        return
    table = Table(title=f"{__logo__} graphlit-mcp tools ({len(definitions)})")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Required parameters")
    for definition in definitions:
        required = definition["inputSchema"].get("required", [])
        table.add_row(definition["name"], ", ".join(required) or "[dim]-[/dim]")
    console.print(table)


@app.command()
def call(
    name: str = typer.Argument(..., help="Tool name, e.g. queryContents"),
    params: str = typer.Option("{}", "--params", "-p", help="Tool parameters as a JSON object"),
    env_file: Path = _ENV_FILE,
):
    """Call one tool and print its result."""
    try:
        arguments = json.loads(params)
    except json.JSONDecodeError as e:
        err_console.print(f"[red]--params is not valid JSON: {e}[/red]")
        raise typer.Exit(2) from e
    if not isinstance(arguments, dict):
        err_console.print("[red]--params must be a JSON object[/red]")
        raise typer.Exit(2)

    config = _load(env_file)
    configure_logging(config.server.log_level, config.server.log_file)
    registry = _build_registry(config)
    result = asyncio.run(registry.execute(name, arguments))
    for item in result.content:
        console.print(item.get("text", ""), markup=False, highlight=False)
    if result.is_error:
        raise typer.Exit(1)


@app.command()
def wait(
    target: WaitTarget = typer.Argument(..., help="What to wait on: content or feed"),
    entity_id: str = typer.Argument(..., metavar="ID", help="Content or feed identifier"),
    interval: str = typer.Option("PT5S", "--interval", help="Polling interval, ISO 8601 duration"),
    timeout: str = typer.Option("PT10M", "--timeout", help="Give up after this long, ISO 8601 duration"),
    env_file: Path = _ENV_FILE,
):
    """Poll until a content or (non-recurring) feed finishes ingesting."""
    config = _load(env_file)
    configure_logging(config.server.log_level, config.server.log_file)
    client = _build_context(config).client
    check = client.is_content_done if target is WaitTarget.content else client.is_feed_done

    async def _check() -> bool | None:
        return await check(entity_id)

    try:
        with console.status(f"[dim]Waiting for {target.value} {entity_id}...[/dim]", spinner="dots"):
            asyncio.run(poll_until_done(
                _check, interval=interval, timeout=timeout, operation=f"wait {target.value} {entity_id}"
            ))
    except GraphlitMCPError as e:
        err_console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1) from e
    console.print(f"[green]✓[/green] {target.value} {entity_id} is done")


@app.command()
def status(env_file: Path = _ENV_FILE):
    """Show which settings and connector credentials are configured (never their values)."""
    config = _load(env_file, require_identity=False)
    console.print(f"{__logo__} graphlit-mcp Status\n")

    missing = config.platform.missing()
    console.print(f"API: {config.platform.api_url}")
    if missing:
        console.print(f"Platform identity: [red]✗[/red] missing {', '.join(missing)}")
    else:
        console.print("Platform identity: [green]✓[/green]")

    table = Table(title="Connector credentials")
    table.add_column("Requirement", style="cyan")
    table.add_column("Configured")
    resolver = CredentialResolver.from_settings(config.credentials)
    for key, configured in resolver.status().items():
        table.add_row(key, "[green]✓[/green]" if configured else "[dim]not set[/dim]")
    console.print(table)


@app.command()
def version():
    """Show version."""
    console.print(f"{__logo__} graphlit-mcp v{__version__}")


if __name__ == "__main__":
    app()
