"""Async filesystem helpers used by the detector and installer."""

from __future__ import annotations

import asyncio
import json
import os
from pathlib import Path
from typing import Any


def _readable(path: Path) -> bool:
    return os.access(path, os.R_OK)


async def file_exists(path: Path) -> bool:
    """True if *path* exists and is readable; unreadable counts as missing."""
    return await asyncio.to_thread(_readable, path)


async def read_text(path: Path) -> str:
    return await asyncio.to_thread(path.read_text, encoding="utf-8", errors="replace")


async def read_json(path: Path) -> Any:
    """Read and decode a JSON file. Raises on I/O or decode errors."""
    return json.loads(await read_text(path))


async def list_dir(path: Path) -> list[str]:
    """Names of the immediate entries of *path*; empty if it cannot be listed."""
    try:
        return await asyncio.to_thread(os.listdir, path)
    except OSError:
        return []
