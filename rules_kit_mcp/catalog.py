"""Static option catalog used when the installer cannot describe itself."""

from __future__ import annotations

import copy
from typing import Any

STATIC_STACKS: list[dict[str, Any]] = [
    {"name": "laravel", "versions": ["8", "9", "10", "11"], "architectures": ["standard", "ddd", "hexagonal"]},
    {"name": "nextjs", "versions": ["12", "13", "14", "15"], "architectures": ["app-router", "pages-router"]},
    {"name": "react", "versions": ["16", "17", "18", "19"], "architectures": ["standard", "hooks", "concurrent"]},
    {
        "name": "angular",
        "versions": ["12", "13", "14", "15", "16", "17", "18"],
        "architectures": ["standard", "standalone", "micro-frontends"],
    },
    {"name": "vue", "versions": ["2", "3"], "architectures": ["options-api", "composition-api", "nuxt"]},
    {"name": "nestjs", "versions": ["8", "9", "10"], "architectures": ["standard", "microservices", "graphql"]},
    {"name": "spring-boot", "versions": ["2", "3"], "architectures": ["standard", "reactive", "microservices"]},
    {"name": "django", "versions": ["4", "5"], "architectures": ["mvt", "api", "full-stack"]},
    {"name": "fastapi", "versions": ["0.100+"], "architectures": ["standard", "async", "microservices"]},
]

STATIC_MCP_TOOLS: list[str] = [
    "pampa",
    "github",
    "filesystem",
    "puppeteer",
    "brave-search",
    "memory",
    "fetch",
    "postgres",
    "sqlite",
    "everart",
    "cloudflare",
    "aws",
]

STATIC_IDES: list[str] = ["cursor", "vscode", "webstorm", "phpstorm"]

INSTALL_SUGGESTION = "Install with: npm install -g agent-rules-kit"

USAGE_EXAMPLES: dict[str, Any] = {
    "basic": {
        "command": "install_rules",
        "parameters": {"stack": "laravel", "version": "11", "architecture": "ddd"},
    },
    "advanced": {
        "command": "install_rules",
        "parameters": {
            "stack": "nextjs",
            "version": "14",
            "architecture": "app",
            "mcp_tools": ["pampa", "github", "filesystem"],
            "ide": "cursor",
            "global_install": False,
        },
    },
}

_STATIC_USAGE_EXAMPLE: dict[str, Any] = {
    "command": "install_rules",
    "parameters": {
        "stack": "laravel",
        "version": "11",
        "architecture": "ddd",
        "mcp_tools": ["pampa", "github"],
        "global_install": True,
    },
}


def static_options(*, installer_available: bool) -> dict[str, Any]:
    """Fallback payload for ``get_available_options``.

    Returns a fresh copy; callers may mutate it.
    """
    payload: dict[str, Any] = {
        "success": True,
        "installer_available": installer_available,
        "available_options": {
            "stacks": copy.deepcopy(STATIC_STACKS),
            "mcp_tools": list(STATIC_MCP_TOOLS),
            "ides": list(STATIC_IDES),
        },
        "usage_example": copy.deepcopy(_STATIC_USAGE_EXAMPLE),
    }
    if not installer_available:
        payload["message"] = "Agent Rules Kit is not installed or not available in PATH"
        payload["suggestion"] = INSTALL_SUGGESTION
    return payload
