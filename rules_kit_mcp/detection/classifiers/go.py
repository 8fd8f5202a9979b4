"""Classifier for Go modules (go.mod)."""

from __future__ import annotations

import re
from pathlib import Path

from rules_kit_mcp.detection.files import read_text
from rules_kit_mcp.models import StackGuess

# go directive: go 1.21
_GO_DIRECTIVE_RE = re.compile(r"^go\s+(\d+(?:\.\d+)*)\s*$", re.MULTILINE)


async def classify(root: Path) -> StackGuess | None:
    m = _GO_DIRECTIVE_RE.search(await read_text(root / "go.mod"))
    return StackGuess("Go", version=m.group(1) if m else None)
