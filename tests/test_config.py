"""Tests for Settings.from_env."""

from __future__ import annotations

import pytest

from rules_kit_mcp.core.config import Settings
from rules_kit_mcp.exceptions import ConfigError


class TestSettings:
    def test_defaults(self):
        s = Settings.from_env({})
        assert s.installer_command == ("npx", "-y", "agent-rules-kit")
        assert s.query_timeout == 15.0
        assert s.probe_timeout == 10.0
        assert s.install_timeout == 30.0
        assert s.prompt_answers == 5
        assert s.rules_dir == ".cursor/rules"
        assert s.port == 3001

    def test_overrides(self):
        s = Settings.from_env(
            {
                "RULES_KIT_COMMAND": "agent-rules-kit --no-color",
                "RULES_KIT_INSTALL_TIMEOUT": "45",
                "RULES_KIT_PROMPT_ANSWERS": "2",
                "RULES_KIT_LOG_LEVEL": "debug",
                "RULES_KIT_LOG_FORMAT": "JSON",
                "PORT": "8080",
            }
        )
        assert s.installer_command == ("agent-rules-kit", "--no-color")
        assert s.install_timeout == 45.0
        assert s.prompt_answers == 2
        assert s.log_level == "DEBUG"
        assert s.log_format == "json"
        assert s.port == 8080

    @pytest.mark.parametrize(
        "env",
        [
            {"RULES_KIT_QUERY_TIMEOUT": "soon"},
            {"RULES_KIT_PROBE_TIMEOUT": "0"},
            {"RULES_KIT_PROMPT_ANSWERS": "-1"},
            {"RULES_KIT_COMMAND": "   "},
            {"RULES_KIT_LOG_FORMAT": "xml"},
            {"RULES_KIT_RULES_DIR": "/etc/rules"},
            {"PORT": "http"},
        ],
    )
    def test_invalid_values(self, env):
        with pytest.raises(ConfigError):
            Settings.from_env(env)

    def test_blank_numeric_uses_default(self):
        assert Settings.from_env({"RULES_KIT_QUERY_TIMEOUT": ""}).query_timeout == 15.0
