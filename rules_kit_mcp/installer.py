"""RuleInstaller: detect, pre-flight check, then drive the interactive installer."""

from __future__ import annotations

import os
import shlex
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import structlog

from rules_kit_mcp.core.config import Settings
from rules_kit_mcp.detection import StackDetector
from rules_kit_mcp.detection.files import file_exists
from rules_kit_mcp.models import InstallRequest
from rules_kit_mcp.runner import run_script

log = structlog.get_logger("rules_kit_mcp.installer")


def build_installer_args(request: InstallRequest, stack: str) -> list[str]:
    """Installer flags for *request*; unset options are omitted."""
    args = [f"--stack={stack}", "--auto"]
    if request.version:
        args.append(f"--version={request.version}")
    if request.architecture:
        args.append(f"--architecture={request.architecture}")
    if request.mcp_tools:
        args.append(f"--mcp-tools={','.join(request.mcp_tools)}")
    if request.ide:
        args.append(f"--ide={request.ide}")
    if request.global_install:
        args.append("--global")
    if request.force:
        args.append("--force")
    return args


def build_install_script(
    project_path: str,
    command: Sequence[str],
    args: Sequence[str],
    answers: int,
) -> str:
    """Shell script that enters *project_path* and answers each prompt with Enter.

    Every interpolated value is shell-quoted.
    """
    invocation = " ".join(shlex.quote(part) for part in [*command, *args])
    blank_lines = "\\n" * answers
    return (
        f"cd {shlex.quote(project_path)} || exit 1\n"
        f"printf '{blank_lines}' | {invocation}\n"
    )


class RuleInstaller:
    """Install rules into a project through the external installer."""

    def __init__(
        self,
        settings: Settings | None = None,
        detector: StackDetector | None = None,
    ) -> None:
        self._settings = settings or Settings.from_env()
        self._detector = detector or StackDetector()

    def rules_path(self, project_path: str) -> Path:
        return Path(project_path) / self._settings.rules_dir

    async def install(self, request: InstallRequest) -> dict[str, Any]:
        """Run one installation.

        Returns a payload with ``success`` and ``message``; existing rules
        without ``force`` produce a refusal and no process is spawned.
        """
        project_path = request.project_path or os.getcwd()

        stack = request.stack
        if not stack:
            classification = await self._detector.detect(project_path)
            stack = classification.stack
            log.info("installer.stack_detected", stack=stack, project_path=project_path)

        rules_path = self.rules_path(project_path)
        if await file_exists(rules_path) and not request.force:
            log.info("installer.rules_exist", path=str(rules_path))
            return {
                "success": False,
                "message": "Cursor rules already exist in the project",
                "suggestion": "Use force: true to overwrite existing rules",
                "existing_rules_path": str(rules_path),
            }

        args = build_installer_args(request, stack)
        script = build_install_script(
            project_path,
            self._settings.installer_command,
            args,
            self._settings.prompt_answers,
        )
        log.info("installer.run", stack=stack, project_path=project_path, args=args)
        result = await run_script(script, self._settings.install_timeout)

        if result.success:
            log.info("installer.done", stack=stack)
        else:
            log.warning("installer.failed", stack=stack, error=result.error)

        return {
            "success": result.success,
            "message": f"{stack} rules installed successfully"
            if result.success
            else "Error installing rules",
            "stack_installed": stack,
            "project_path": project_path,
            "output": result.output,
            "error": result.error,
        }
