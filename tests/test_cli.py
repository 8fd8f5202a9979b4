"""Tests for the click CLI."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, patch

from click.testing import CliRunner

from rules_kit_mcp.cli import main


class TestCli:
    def test_detect(self, tmp_path):
        (tmp_path / "go.mod").write_text("module x\ngo 1.22\n")
        result = CliRunner().invoke(main, ["detect", str(tmp_path)])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["detected_stack"]["stack"] == "Go"
        assert payload["recommendation"] == "Detected Go v1.22 with 90% confidence."

    def test_options_offline(self):
        with patch("rules_kit_mcp.operations.installer_available", AsyncMock(return_value=False)):
            result = CliRunner().invoke(main, ["options"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["installer_available"] is False

    def test_install_refusal_exits_nonzero(self, tmp_path):
        (tmp_path / ".cursor" / "rules").mkdir(parents=True)
        result = CliRunner().invoke(
            main, ["install", "--stack", "go", "--project-path", str(tmp_path)]
        )
        assert result.exit_code == 1
        assert json.loads(result.stdout)["message"] == "Cursor rules already exist in the project"

    def test_install_passes_options(self, tmp_path):
        fake = AsyncMock(return_value={"success": True})
        with patch("rules_kit_mcp.cli.RulesKitOperations.install_rules", fake):
            result = CliRunner().invoke(
                main,
                [
                    "install",
                    "--stack", "nextjs",
                    "--version", "14",
                    "--mcp-tool", "pampa",
                    "--mcp-tool", "github",
                    "--global",
                    "--project-path", str(tmp_path),
                ],
            )
        assert result.exit_code == 0, result.output
        request = fake.await_args.args[0]
        assert request.stack == "nextjs"
        assert request.version == "14"
        assert request.mcp_tools == ["pampa", "github"]
        assert request.global_install is True
        assert request.force is False

    def test_bad_config(self):
        result = CliRunner().invoke(main, ["options"], env={"RULES_KIT_PROBE_TIMEOUT": "nan-ish"})
        assert result.exit_code == 1
        assert "RULES_KIT_PROBE_TIMEOUT" in result.output
