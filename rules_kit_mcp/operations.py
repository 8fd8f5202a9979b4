"""The three public operations behind the MCP tools and HTTP routes.

Each returns a JSON-serialisable payload with a ``success`` flag and never
raises; unexpected errors become ``{"success": False, "message", "error"}``.
"""

from __future__ import annotations

import os
import shutil
from typing import Any

import structlog

from rules_kit_mcp.banner import parse_info_banner
from rules_kit_mcp.catalog import USAGE_EXAMPLES, static_options
from rules_kit_mcp.core.config import Settings
from rules_kit_mcp.detection import StackDetector
from rules_kit_mcp.installer import RuleInstaller
from rules_kit_mcp.models import InstallRequest
from rules_kit_mcp.runner import probe_available, run_command

log = structlog.get_logger("rules_kit_mcp.operations")


def _failure(message: str, exc: Exception) -> dict[str, Any]:
    return {"success": False, "message": message, "error": str(exc)}


async def installer_available(settings: Settings) -> bool:
    """Availability gate: launcher on PATH and ``--version`` prints something."""
    launcher = settings.installer_command[0]
    if shutil.which(launcher) is None:
        log.info("installer.launcher_missing", launcher=launcher)
        return False
    return await probe_available(
        [*settings.installer_command, "--version"], settings.probe_timeout
    )


class RulesKitOperations:
    """Bundle of the public operations sharing one :class:`Settings`."""

    def __init__(
        self,
        settings: Settings | None = None,
        detector: StackDetector | None = None,
        installer: RuleInstaller | None = None,
    ) -> None:
        self.settings = settings or Settings.from_env()
        self.detector = detector or StackDetector()
        self.installer = installer or RuleInstaller(self.settings, self.detector)

    async def get_available_options(self) -> dict[str, Any]:
        """Stacks, versions, architectures, MCP tools and IDEs.

        Scraped from ``--info`` when the installer answers; otherwise, or when
        the banner cannot be parsed, the static catalog.
        """
        try:
            if not await installer_available(self.settings):
                return static_options(installer_available=False)

            result = await run_command(
                [*self.settings.installer_command, "--info"], self.settings.query_timeout
            )
            info = parse_info_banner(result.output) if result.success and result.output else None
            if info is None:
                log.info("operations.static_fallback", run_ok=result.success)
                return static_options(installer_available=True)

            return {
                "success": True,
                "installer_available": True,
                "agent_rules_kit_info": info,
                "usage_examples": USAGE_EXAMPLES,
            }
        except Exception as exc:
            log.exception("operations.options_failed")
            return _failure("Error getting available options", exc)

    async def get_project_info(self, project_path: str | None = None) -> dict[str, Any]:
        """Detect the stack of *project_path* (default: current directory)."""
        try:
            path = project_path or os.getcwd()
            info = await self.detector.detect(path)
            version = f" v{info.version}" if info.version else ""
            return {
                "success": True,
                "project_path": path,
                "detected_stack": info.to_dict(),
                "recommendation": (
                    f"Detected {info.stack}{version} with {info.confidence}% confidence."
                ),
            }
        except Exception as exc:
            log.exception("operations.project_info_failed")
            return _failure("Error analyzing project", exc)

    async def install_rules(self, request: InstallRequest | None = None) -> dict[str, Any]:
        """Install rules; see :meth:`RuleInstaller.install`."""
        try:
            return await self.installer.install(request or InstallRequest())
        except Exception as exc:
            log.exception("operations.install_failed")
            return _failure("Error installing rules", exc)
