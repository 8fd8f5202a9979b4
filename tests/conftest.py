"""Shared pytest fixtures for the rules-kit MCP server tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from rules_kit_mcp.core.config import Settings


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    return Settings(installer_command=("npx", "-y", "agent-rules-kit"))


@pytest.fixture
def write_json():
    """Write *data* as JSON to *path* and return the path."""

    def _write(path: Path, data: object) -> Path:
        path.write_text(json.dumps(data))
        return path

    return _write
