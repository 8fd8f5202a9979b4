"""Classifier for the JavaScript/TypeScript ecosystem (package.json)."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from rules_kit_mcp.detection.files import read_json
from rules_kit_mcp.models import StackGuess
from rules_kit_mcp.runner import run_command

_NODE_VERSION_TIMEOUT = 10.0


def _merged_dependencies(manifest: dict[str, Any]) -> dict[str, Any]:
    deps: dict[str, Any] = {}
    deps.update(manifest.get("dependencies") or {})
    deps.update(manifest.get("devDependencies") or {})
    return deps


async def _runtime_version(manifest: dict[str, Any]) -> str | None:
    """Declared ``engines.node`` constraint, else the installed node's version."""
    engines = manifest.get("engines") or {}
    if isinstance(engines, dict) and engines.get("node"):
        return str(engines["node"])
    result = await run_command(["node", "--version"], _NODE_VERSION_TIMEOUT)
    if result.success and result.output.strip():
        return result.output.strip()
    return None


async def classify(root: Path) -> StackGuess | None:
    manifest = await read_json(root / "package.json")
    deps = _merged_dependencies(manifest)

    # Meta-frameworks are checked together with their base framework.
    if deps.get("react"):
        if deps.get("next"):
            return StackGuess("Next.js", version=deps["next"])
        return StackGuess("React", version=deps["react"])

    if deps.get("vue"):
        if deps.get("nuxt"):
            return StackGuess("Vue.js", version=deps["vue"], architecture="Nuxt")
        return StackGuess("Vue.js", version=deps["vue"])

    if deps.get("@angular/core"):
        return StackGuess("Angular", version=deps["@angular/core"])

    if deps.get("@nestjs/core"):
        return StackGuess("NestJS", version=deps["@nestjs/core"])

    if deps.get("express"):
        return StackGuess("Express.js", version=deps["express"])

    if deps.get("react-native"):
        return StackGuess("React Native", version=deps["react-native"])

    return StackGuess("Node.js", version=await _runtime_version(manifest))
