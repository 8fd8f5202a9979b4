"""Classifier for JVM projects (Maven or Gradle)."""

from __future__ import annotations

from pathlib import Path

from rules_kit_mcp.detection.files import file_exists, read_text
from rules_kit_mcp.models import StackGuess

_BUILD_FILES = ("pom.xml", "build.gradle")


async def classify(root: Path) -> StackGuess | None:
    for name in _BUILD_FILES:
        path = root / name
        if await file_exists(path) and "spring-boot" in await read_text(path):
            return StackGuess("Spring Boot")
    return StackGuess("Java")
