"""FastMCP server exposing the rules-kit tools, resources and prompt."""

from __future__ import annotations

import json
from typing import Any

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.resources import TextResource

from rules_kit_mcp.core.config import SERVER_NAME, Settings
from rules_kit_mcp.models import InstallRequest
from rules_kit_mcp.operations import RulesKitOperations
from rules_kit_mcp.prompts import SETUP_PROMPT_DESCRIPTION, SETUP_PROMPT_NAME, render_setup_prompt
from rules_kit_mcp.resources import RESOURCES

_INSTRUCTIONS = (
    "Detect a project's technology stack and install Agent Rules Kit rules "
    "(.cursor/rules) into it. Call get_project_info first, then install_rules."
)


def _dump(payload: dict[str, Any]) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def create_mcp_server(
    settings: Settings | None = None,
    operations: RulesKitOperations | None = None,
) -> FastMCP:
    """Create a FastMCP server with the rules-kit tools registered.

    *operations* is captured by closure so tests can pass a stubbed one.
    """
    ops = operations or RulesKitOperations(settings)
    mcp = FastMCP(SERVER_NAME, instructions=_INSTRUCTIONS)

    @mcp.tool()
    async def get_project_info(project_path: str | None = None) -> str:
        """Analyzes the current project to determine which technology stack it uses.

        project_path defaults to the server's current directory.
        """
        return _dump(await ops.get_project_info(project_path))

    @mcp.tool()
    async def get_available_options() -> str:
        """Gets available stacks, versions, architectures, MCP tools, and IDEs from Agent Rules Kit."""
        return _dump(await ops.get_available_options())

    @mcp.tool()
    async def install_rules(
        stack: str | None = None,
        version: str | None = None,
        architecture: str | None = None,
        mcp_tools: list[str] | None = None,
        ide: str | None = None,
        project_path: str | None = None,
        global_install: bool = False,
        force: bool = False,
    ) -> str:
        """Installs appropriate Cursor rules with advanced options like version, architecture, and MCP tools.

        stack is detected automatically when omitted. Set force to overwrite
        existing rules and global_install to install globally instead of
        into the project.
        """
        request = InstallRequest(
            stack=stack,
            version=version,
            architecture=architecture,
            mcp_tools=mcp_tools,
            ide=ide,
            project_path=project_path,
            global_install=global_install,
            force=force,
        )
        return _dump(await ops.install_rules(request))

    for resource in RESOURCES:
        mcp.add_resource(
            TextResource(
                uri=resource.uri,
                name=resource.name,
                description=resource.description,
                mime_type=resource.mime_type,
                text=resource.text,
            )
        )

    @mcp.prompt(name=SETUP_PROMPT_NAME, description=SETUP_PROMPT_DESCRIPTION)
    def setup_project_rules(project_path: str | None = None, force_reinstall: bool = False) -> str:
        return render_setup_prompt(project_path, force_reinstall)

    return mcp
