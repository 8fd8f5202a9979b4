"""Classifier for PHP projects (composer.json)."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from rules_kit_mcp.detection.files import read_json
from rules_kit_mcp.models import StackGuess


async def classify(root: Path) -> StackGuess | None:
    manifest = await read_json(root / "composer.json")
    deps: dict[str, Any] = {}
    deps.update(manifest.get("require") or {})
    deps.update(manifest.get("require-dev") or {})

    if deps.get("laravel/framework"):
        return StackGuess("Laravel", version=deps["laravel/framework"])

    return StackGuess("PHP", version=deps.get("php"))
