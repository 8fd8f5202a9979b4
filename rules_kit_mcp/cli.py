"""CLI entry point: agent-rules-kit-mcp.

Subcommands:
    agent-rules-kit-mcp serve                 # MCP over stdio
    agent-rules-kit-mcp http --port 3001      # HTTP mode
    agent-rules-kit-mcp detect [PATH]         # Print the detected stack
    agent-rules-kit-mcp options               # Print available options
    agent-rules-kit-mcp install [OPTIONS]     # Install rules into a project
"""

from __future__ import annotations

import asyncio
import json
import sys
from typing import Any

import click

from rules_kit_mcp.core.config import Settings
from rules_kit_mcp.core.logging import setup_logging
from rules_kit_mcp.exceptions import ConfigError
from rules_kit_mcp.models import InstallRequest
from rules_kit_mcp.operations import RulesKitOperations


def _echo_json(payload: dict[str, Any]) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Agent Rules Kit MCP server: detect project stacks and install rules."""
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    setup_logging(
        settings,
        level="DEBUG" if verbose else None,
        http=ctx.invoked_subcommand == "http",
    )
    ctx.obj = settings


@main.command("serve")
@click.pass_obj
def serve(settings: Settings) -> None:
    """Run the MCP server over stdio."""
    from rules_kit_mcp.server import create_mcp_server

    click.echo("Agent Rules Kit MCP Server started", err=True)
    create_mcp_server(settings).run("stdio")


@main.command("http")
@click.option("--host", default=None, help="Bind address (default: $HOST or 127.0.0.1)")
@click.option("--port", type=int, default=None, help="Port (default: $PORT or 3001)")
@click.pass_obj
def http(settings: Settings, host: str | None, port: int | None) -> None:
    """Run the HTTP server."""
    import uvicorn

    from rules_kit_mcp.api import create_app

    host = host or settings.host
    port = port or settings.port
    click.echo(f"Agent Rules Kit MCP Server (HTTP) running on port {port}", err=True)
    click.echo("Available endpoints:", err=True)
    for label, path in (("Health", "/health"), ("Info", "/info"), ("Tools", "/tools"), ("Call Tool", "/tools/call")):
        click.echo(f"  - {label}: http://{host}:{port}{path}", err=True)
    uvicorn.run(create_app(settings), host=host, port=port, log_config=None)


@main.command("detect")
@click.argument("project_path", required=False, type=click.Path(exists=True, file_okay=False))
@click.pass_obj
def detect(settings: Settings, project_path: str | None) -> None:
    """Detect the technology stack of PROJECT_PATH (default: current directory)."""
    result = asyncio.run(RulesKitOperations(settings).get_project_info(project_path))
    _echo_json(result)
    if not result["success"]:
        sys.exit(1)


@main.command("options")
@click.pass_obj
def options(settings: Settings) -> None:
    """Show stacks, architectures, MCP tools and IDEs the installer supports."""
    _echo_json(asyncio.run(RulesKitOperations(settings).get_available_options()))


@main.command("install")
@click.option("--stack", default=None, help="Stack to install (detected when omitted)")
@click.option("--version", "stack_version", default=None, help="Stack version, e.g. 11")
@click.option("--architecture", default=None, help="Architecture pattern, e.g. ddd")
@click.option("--mcp-tool", "mcp_tools", multiple=True, help="MCP tool to include (repeatable)")
@click.option("--ide", default=None, help="Target IDE, e.g. cursor")
@click.option("--project-path", default=None, type=click.Path(file_okay=False), help="Project path")
@click.option("--global", "global_install", is_flag=True, help="Install globally")
@click.option("--force", is_flag=True, help="Overwrite existing rules")
@click.pass_obj
def install(
    settings: Settings,
    stack: str | None,
    stack_version: str | None,
    architecture: str | None,
    mcp_tools: tuple[str, ...],
    ide: str | None,
    project_path: str | None,
    global_install: bool,
    force: bool,
) -> None:
    """Install Agent Rules Kit rules into a project."""
    request = InstallRequest(
        stack=stack,
        version=stack_version,
        architecture=architecture,
        mcp_tools=list(mcp_tools) or None,
        ide=ide,
        project_path=project_path,
        global_install=global_install,
        force=force,
    )
    result = asyncio.run(RulesKitOperations(settings).install_rules(request))
    _echo_json(result)
    if not result["success"]:
        sys.exit(1)


if __name__ == "__main__":
    main()
