"""Classifier for Python projects."""

from __future__ import annotations

from pathlib import Path

from rules_kit_mcp.detection.files import file_exists, read_text
from rules_kit_mcp.models import StackGuess

# Entry modules scanned for a FastAPI import, in order.
_ENTRY_MODULES = ("main.py", "app.py")


async def classify(root: Path) -> StackGuess | None:
    if await file_exists(root / "manage.py"):
        return StackGuess("Django")

    for name in _ENTRY_MODULES:
        path = root / name
        if not await file_exists(path):
            continue
        content = await read_text(path)
        if "fastapi" in content or "FastAPI" in content:
            return StackGuess("FastAPI")

    return StackGuess("Python")
