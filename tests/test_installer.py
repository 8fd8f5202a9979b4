"""Tests for RuleInstaller: the shell script runner is mocked."""

from __future__ import annotations

import sys
from unittest.mock import AsyncMock, patch

import pytest

from rules_kit_mcp.core.config import Settings
from rules_kit_mcp.installer import RuleInstaller, build_install_script, build_installer_args
from rules_kit_mcp.models import InstallRequest, ProcessResult
from rules_kit_mcp.runner import run_script


def _ok(output: str = "done") -> AsyncMock:
    return AsyncMock(return_value=ProcessResult(success=True, output=output))


class TestBuildInstallerArgs:
    def test_minimal(self):
        assert build_installer_args(InstallRequest(), "laravel") == ["--stack=laravel", "--auto"]

    def test_all_options(self):
        request = InstallRequest(
            version="11",
            architecture="ddd",
            mcp_tools=["pampa", "github"],
            ide="cursor",
            global_install=True,
            force=True,
        )
        assert build_installer_args(request, "laravel") == [
            "--stack=laravel",
            "--auto",
            "--version=11",
            "--architecture=ddd",
            "--mcp-tools=pampa,github",
            "--ide=cursor",
            "--global",
            "--force",
        ]

    def test_empty_tool_list_is_omitted(self):
        args = build_installer_args(InstallRequest(mcp_tools=[]), "go")
        assert not any(a.startswith("--mcp-tools") for a in args)


class TestBuildInstallScript:
    def test_script_shape(self):
        script = build_install_script("/tmp/proj", ("npx", "-y", "agent-rules-kit"), ["--stack=go", "--auto"], 5)
        lines = script.splitlines()
        assert lines[0] == "cd /tmp/proj || exit 1"
        assert lines[1] == "printf '\\n\\n\\n\\n\\n' | npx -y agent-rules-kit --stack=go --auto"

    def test_values_are_shell_quoted(self):
        script = build_install_script(
            "/tmp/my project", ("agent-rules-kit",), ["--stack=$(rm -rf ~)"], 1
        )
        assert "cd '/tmp/my project'" in script
        assert "'--stack=$(rm -rf ~)'" in script

    @pytest.mark.asyncio
    async def test_script_feeds_answers_to_command(self, tmp_path):
        reader = (sys.executable, "-c", "import sys; print(sys.stdin.read().count(chr(10)))")
        script = build_install_script(str(tmp_path), reader, [], 5)
        result = await run_script(script, timeout=10)
        assert result.success is True
        assert result.output.strip() == "5"


class TestRuleInstaller:
    @pytest.mark.asyncio
    async def test_refuses_when_rules_exist(self, tmp_path, settings):
        (tmp_path / ".cursor" / "rules").mkdir(parents=True)
        fake = _ok()
        with patch("rules_kit_mcp.installer.run_script", fake):
            result = await RuleInstaller(settings).install(
                InstallRequest(stack="laravel", project_path=str(tmp_path))
            )
        assert result["success"] is False
        assert result["message"] == "Cursor rules already exist in the project"
        assert "force" in result["suggestion"]
        assert result["existing_rules_path"] == str(tmp_path / ".cursor" / "rules")
        fake.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_force_overrides_existing_rules(self, tmp_path, settings):
        (tmp_path / ".cursor" / "rules").mkdir(parents=True)
        fake = _ok("installed")
        with patch("rules_kit_mcp.installer.run_script", fake):
            result = await RuleInstaller(settings).install(
                InstallRequest(stack="laravel", project_path=str(tmp_path), force=True)
            )
        fake.assert_awaited_once()
        script, timeout = fake.await_args.args
        assert "--force" in script
        assert timeout == 30.0
        assert result == {
            "success": True,
            "message": "laravel rules installed successfully",
            "stack_installed": "laravel",
            "project_path": str(tmp_path),
            "output": "installed",
            "error": None,
        }

    @pytest.mark.asyncio
    async def test_detects_stack_when_missing(self, tmp_path, settings):
        (tmp_path / "go.mod").write_text("module x\n")
        fake = _ok()
        with patch("rules_kit_mcp.installer.run_script", fake):
            result = await RuleInstaller(settings).install(InstallRequest(project_path=str(tmp_path)))
        assert result["stack_installed"] == "Go"
        assert "--stack=Go" in fake.await_args.args[0]

    @pytest.mark.asyncio
    async def test_defaults_to_current_directory(self, tmp_path, settings, monkeypatch):
        monkeypatch.chdir(tmp_path)
        fake = _ok()
        with patch("rules_kit_mcp.installer.run_script", fake):
            result = await RuleInstaller(settings).install(InstallRequest(stack="react"))
        assert result["project_path"] == str(tmp_path)

    @pytest.mark.asyncio
    async def test_failure_is_reported(self, tmp_path, settings):
        fake = AsyncMock(
            return_value=ProcessResult(
                success=False, output="partial", error="Timeout: Process took more than 30 seconds"
            )
        )
        with patch("rules_kit_mcp.installer.run_script", fake):
            result = await RuleInstaller(settings).install(
                InstallRequest(stack="django", project_path=str(tmp_path))
            )
        assert result["success"] is False
        assert result["message"] == "Error installing rules"
        assert result["output"] == "partial"
        assert "Timeout" in result["error"]

    @pytest.mark.asyncio
    async def test_custom_settings(self, tmp_path):
        settings = Settings(installer_command=("agent-rules-kit",), install_timeout=5.0, prompt_answers=2)
        fake = _ok()
        with patch("rules_kit_mcp.installer.run_script", fake):
            await RuleInstaller(settings).install(InstallRequest(stack="vue", project_path=str(tmp_path)))
        script, timeout = fake.await_args.args
        assert "printf '\\n\\n' | agent-rules-kit --stack=vue --auto" in script
        assert timeout == 5.0
