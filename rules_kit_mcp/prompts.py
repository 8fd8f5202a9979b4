"""Guided prompt that walks an agent through detect → install → report."""

from __future__ import annotations

import os

from rules_kit_mcp.exceptions import UnknownPromptError

SETUP_PROMPT_NAME = "setup_project_rules"
SETUP_PROMPT_DESCRIPTION = "Automatically configures Cursor rules for the current project"

_FORCE_LINE = "IMPORTANT: Force reinstallation even if rules already exist."
_SAFE_LINE = "Only install if no previous rules exist."


def render_setup_prompt(project_path: str | None = None, force_reinstall: bool = False) -> str:
    """Instruction text for configuring rules in *project_path* (default: cwd)."""
    path = project_path or os.getcwd()
    force = _FORCE_LINE if force_reinstall else _SAFE_LINE
    return (
        f'Analyze the project at "{path}" and automatically configure the most '
        "appropriate Cursor rules.\n"
        "\n"
        "Steps to follow:\n"
        "1. Detect the project's technology stack\n"
        "2. Install the corresponding rules\n"
        "3. Report which rules were installed and why\n"
        "\n"
        f"{force}\n"
        "\n"
        "Use the available MCP tools to complete this task automatically."
    )


def get_prompt(name: str, arguments: dict[str, object] | None = None) -> str:
    """Render a prompt by name. Unknown names raise :class:`UnknownPromptError`."""
    if name != SETUP_PROMPT_NAME:
        raise UnknownPromptError(name)
    arguments = arguments or {}
    force = arguments.get("force_reinstall", False)
    if isinstance(force, str):
        force = force.strip().lower() in ("1", "true", "yes")
    project_path = arguments.get("project_path")
    return render_setup_prompt(str(project_path) if project_path else None, bool(force))
