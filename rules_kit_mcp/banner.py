"""Best-effort parser for the ``agent-rules-kit --info`` banner.

The banner is human-readable text; section labels and entry patterns are
matched literally. Any irregularity yields ``None`` and callers fall back
to the static catalog.
"""

from __future__ import annotations

import re
from typing import Any

import structlog

log = structlog.get_logger("rules_kit_mcp.banner")

_VERSION_RE = re.compile(r"v(\d+\.\d+\.\d+)")
_VERSIONS_RE = re.compile(r"Versions: (.+)")
_ARCHITECTURES_RE = re.compile(r"Architectures: (.+)")
_DEFAULT_RE = re.compile(r"Default: (.+)")
# • pampa - Semantic code search
_TOOL_RE = re.compile(r"• (\w+) - (.+)")
# • Cursor (cursor): .cursor/rules
_IDE_RE = re.compile(r"• (.+?) \((\w+)\): (.+)")

_VERSION_MARKER = "Agent Rules Kit v"
_STACKS_LABEL = "📚 Supported Stacks:"
_TOOLS_LABEL = "🔧 MCP Tools:"
_IDES_LABEL = "🎯 Supported IDEs:"
_USAGE_LABEL = "💡 Usage Examples:"

# Entry lines are tagged with an emoji before these labels; match the label.
_VERSIONS_TAG = "Versions:"
_ARCHITECTURES_TAG = "Architectures:"
_DEFAULT_TAG = "Default:"


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(", ")]


def _section(lines: list[str], start: str, end: str) -> list[str]:
    """Lines strictly between the *start* label and the *end* label (or EOF)."""
    inside = False
    body: list[str] = []
    for line in lines:
        if start in line:
            inside = True
            continue
        if inside and end in line:
            break
        if inside:
            body.append(line)
    return body


def _parse_stacks(lines: list[str]) -> list[dict[str, Any]]:
    stacks: list[dict[str, Any]] = []
    current: dict[str, Any] | None = None

    for line in lines:
        stripped = line.strip()
        is_tagged = any(tag in line for tag in (_VERSIONS_TAG, _ARCHITECTURES_TAG, _DEFAULT_TAG))

        # An all-uppercase untagged line opens a new stack.
        if (
            stripped
            and not is_tagged
            and stripped.upper() == stripped
            and any(c.isalpha() for c in stripped)
        ):
            if current:
                stacks.append(current)
            current = {
                "name": stripped.lower(),
                "versions": [],
                "architectures": [],
                "default_architecture": "",
            }
            continue

        if current is None:
            continue

        if _VERSIONS_TAG in line:
            m = _VERSIONS_RE.search(line)
            if m:
                current["versions"] = _split_list(m.group(1))
        elif _ARCHITECTURES_TAG in line:
            m = _ARCHITECTURES_RE.search(line)
            if m:
                current["architectures"] = _split_list(m.group(1))
        elif _DEFAULT_TAG in line:
            m = _DEFAULT_RE.search(line)
            if m:
                current["default_architecture"] = m.group(1).strip()

    if current:
        stacks.append(current)
    return stacks


def _parse_tools(lines: list[str]) -> list[dict[str, str]]:
    tools = []
    for line in lines:
        m = _TOOL_RE.search(line)
        if m:
            tools.append({"name": m.group(1).lower(), "description": m.group(2)})
    return tools


def _parse_ides(lines: list[str]) -> list[dict[str, str]]:
    ides = []
    for line in lines:
        m = _IDE_RE.search(line)
        if m:
            ides.append({"name": m.group(1), "key": m.group(2), "output": m.group(3)})
    return ides


def parse_info_banner(output: str) -> dict[str, Any] | None:
    """Scrape stacks, MCP tools and IDEs out of the ``--info`` banner.

    Returns ``None`` when nothing recognisable was found or anything went
    wrong while scraping.
    """
    try:
        lines = output.split("\n")
        info: dict[str, Any] = {"version": "", "stacks": [], "mcp_tools": [], "ides": []}

        version_line = next((line for line in lines if _VERSION_MARKER in line), None)
        if version_line:
            m = _VERSION_RE.search(version_line)
            if m:
                info["version"] = m.group(1)

        info["stacks"] = _parse_stacks(_section(lines, _STACKS_LABEL, _TOOLS_LABEL))
        info["mcp_tools"] = _parse_tools(_section(lines, _TOOLS_LABEL, _IDES_LABEL))
        info["ides"] = _parse_ides(_section(lines, _IDES_LABEL, _USAGE_LABEL))
    except Exception as exc:
        log.debug("banner.parse_failed", error=str(exc))
        return None

    if not (info["stacks"] or info["mcp_tools"] or info["ides"]):
        log.debug("banner.empty")
        return None
    return info
