"""Ordered stack signatures: marker files mapped to classifier routines."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from rules_kit_mcp.detection.classifiers import go, java, node, php, python
from rules_kit_mcp.models import StackGuess

Classifier = Callable[[Path], Awaitable[StackGuess | None]]


@dataclass(frozen=True)
class StackSignature:
    """Marker files whose presence triggers *classify*."""

    name: str
    markers: tuple[str, ...]
    classify: Classifier


# Ordered by priority; the first signature whose classifier matches wins.
SIGNATURES: tuple[StackSignature, ...] = (
    StackSignature("node", ("package.json",), node.classify),
    StackSignature("php", ("composer.json",), php.classify),
    StackSignature("python", ("requirements.txt", "pyproject.toml", "setup.py"), python.classify),
    StackSignature("java", ("pom.xml", "build.gradle"), java.classify),
    StackSignature("go", ("go.mod",), go.classify),
)

# Weak fallback when no signature matches.
STATIC_SITE_MARKER = "index.html"
STATIC_SITE_STACK = "HTML/CSS/JS"
