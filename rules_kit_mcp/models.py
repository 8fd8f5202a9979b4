"""Data models shared by the detector, runner and installer."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class ProcessResult:
    """Outcome of one external command."""

    success: bool
    output: str = ""
    error: str | None = None


@dataclass
class StackGuess:
    """What a classifier concluded from a project's manifest files."""

    stack: str
    version: str | None = None
    architecture: str | None = None


@dataclass
class ProjectClassification:
    """Stack detection result."""

    stack: str
    version: str | None = None
    architecture: str | None = None
    files_detected: list[str] = field(default_factory=list)
    confidence: int = 0  # 90 signature match | 60 index.html heuristic | 0 unknown

    def to_dict(self) -> dict[str, Any]:
        """Serialise, leaving out version/architecture when unset."""
        data = asdict(self)
        for key in ("version", "architecture"):
            if data[key] is None:
                del data[key]
        return data


@dataclass
class InstallRequest:
    """Optional parameters for a rules installation.

    Unset fields are left for the detector or the installer to decide.
    """

    stack: str | None = None
    version: str | None = None
    architecture: str | None = None
    mcp_tools: list[str] | None = None
    ide: str | None = None
    project_path: str | None = None
    global_install: bool = False
    force: bool = False
