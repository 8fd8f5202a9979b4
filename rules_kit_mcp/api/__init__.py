"""HTTP mode: FastAPI application exposing the rules-kit tools."""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rules_kit_mcp.api.errors import register_error_handlers
from rules_kit_mcp.api.schemas import (
    InstallRulesArguments,
    ProjectInfoArguments,
    PromptRequest,
    ToolCallRequest,
    ToolDescriptor,
)
from rules_kit_mcp.core.config import SERVER_NAME, SERVER_VERSION, Settings
from rules_kit_mcp.exceptions import UnknownToolError
from rules_kit_mcp.operations import RulesKitOperations
from rules_kit_mcp.prompts import SETUP_PROMPT_DESCRIPTION, SETUP_PROMPT_NAME, get_prompt
from rules_kit_mcp.resources import RESOURCES, read_resource
from rules_kit_mcp.server import create_mcp_server

ToolHandler = Callable[[RulesKitOperations, dict[str, Any]], Awaitable[dict[str, Any]]]


async def _call_project_info(ops: RulesKitOperations, args: dict[str, Any]) -> dict[str, Any]:
    return await ops.get_project_info(ProjectInfoArguments.model_validate(args).project_path)


async def _call_available_options(ops: RulesKitOperations, _args: dict[str, Any]) -> dict[str, Any]:
    return await ops.get_available_options()


async def _call_install_rules(ops: RulesKitOperations, args: dict[str, Any]) -> dict[str, Any]:
    return await ops.install_rules(InstallRulesArguments.model_validate(args).to_request())


TOOL_HANDLERS: dict[str, ToolHandler] = {
    "get_project_info": _call_project_info,
    "get_available_options": _call_available_options,
    "install_rules": _call_install_rules,
}


def _text_content(payload: dict[str, Any]) -> dict[str, Any]:
    """Wrap a payload the way an MCP tool result carries it."""
    return {"content": [{"type": "text", "text": json.dumps(payload, indent=2, ensure_ascii=False)}]}


def create_app(
    settings: Settings | None = None,
    operations: RulesKitOperations | None = None,
) -> FastAPI:
    """Build and return the FastAPI application."""
    settings = settings or Settings.from_env()
    ops = operations or RulesKitOperations(settings)
    mcp = create_mcp_server(settings, ops)

    app = FastAPI(title="Agent Rules Kit MCP Server", version=SERVER_VERSION)
    register_error_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["ops"])
    async def health() -> JSONResponse:
        return JSONResponse(
            {
                "status": "healthy",
                "server": SERVER_NAME,
                "version": SERVER_VERSION,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )

    @app.get("/info", tags=["ops"])
    async def info() -> dict[str, Any]:
        return {
            "name": "Agent Rules Kit MCP Server",
            "description": "MCP server to execute Agent Rules Kit",
            "version": SERVER_VERSION,
            "capabilities": ["tools", "resources", "prompts"],
            "tools": list(TOOL_HANDLERS),
        }

    @app.get("/tools", tags=["tools"])
    async def list_tools() -> dict[str, list[ToolDescriptor]]:
        tools = await mcp.list_tools()
        return {
            "tools": [
                ToolDescriptor(
                    name=t.name,
                    description=t.description or "",
                    inputSchema=t.inputSchema or {"type": "object", "properties": {}},
                )
                for t in tools
            ]
        }

    @app.post("/tools/call", tags=["tools"])
    async def call_tool(body: ToolCallRequest) -> dict[str, Any]:
        handler = TOOL_HANDLERS.get(body.name)
        if handler is None:
            raise UnknownToolError(body.name)
        return _text_content(await handler(ops, body.arguments or {}))

    @app.get("/resources", tags=["resources"])
    async def list_resources() -> dict[str, Any]:
        return {
            "resources": [
                {
                    "uri": r.uri,
                    "name": r.name,
                    "description": r.description,
                    "mimeType": r.mime_type,
                }
                for r in RESOURCES
            ]
        }

    @app.get("/resources/read", tags=["resources"])
    async def get_resource(uri: str) -> dict[str, Any]:
        resource = read_resource(uri)
        return {"contents": [{"uri": resource.uri, "mimeType": resource.mime_type, "text": resource.text}]}

    @app.get("/prompts", tags=["prompts"])
    async def list_prompts() -> dict[str, Any]:
        return {
            "prompts": [
                {
                    "name": SETUP_PROMPT_NAME,
                    "description": SETUP_PROMPT_DESCRIPTION,
                    "arguments": [
                        {
                            "name": "project_path",
                            "description": "Project path (optional, uses current directory by default)",
                            "required": False,
                        },
                        {
                            "name": "force_reinstall",
                            "description": "Force reinstallation of existing rules",
                            "required": False,
                        },
                    ],
                }
            ]
        }

    @app.post("/prompts/get", tags=["prompts"])
    async def render_prompt(body: PromptRequest) -> dict[str, Any]:
        text = get_prompt(body.name, body.arguments)
        return {
            "description": "Automatic Cursor rules configuration for the project",
            "messages": [{"role": "user", "content": {"type": "text", "text": text}}],
        }

    return app
