"""Runtime settings resolved from environment variables."""

from __future__ import annotations

import os
import shlex
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import PurePath

from rules_kit_mcp.exceptions import ConfigError

SERVER_NAME = "agent-rules-kit-mcp"
SERVER_VERSION = "1.0.0"

# Confidence tiers reported by the stack detector.
SIGNATURE_CONFIDENCE = 90
HEURISTIC_CONFIDENCE = 60
UNKNOWN_CONFIDENCE = 0

_DEFAULT_COMMAND = "npx -y agent-rules-kit"


def _float_env(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(name, raw, "a number of seconds") from None
    if value <= 0:
        raise ConfigError(name, raw, "a positive number of seconds")
    return value


def _int_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(name, raw, "an integer") from None
    if value < 0:
        raise ConfigError(name, raw, "a non-negative integer")
    return value


@dataclass(frozen=True)
class Settings:
    """Server settings.

    Every field has a default; :meth:`from_env` overrides them from
    ``RULES_KIT_*`` variables (plus ``HOST``/``PORT`` for HTTP mode).
    """

    installer_command: tuple[str, ...] = field(
        default_factory=lambda: tuple(shlex.split(_DEFAULT_COMMAND))
    )
    query_timeout: float = 15.0
    probe_timeout: float = 10.0
    install_timeout: float = 30.0
    prompt_answers: int = 5
    rules_dir: str = ".cursor/rules"
    log_level: str = "INFO"
    log_format: str = "console"
    host: str = "127.0.0.1"
    port: int = 3001

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *env* (defaults to ``os.environ``)."""
        env = os.environ if env is None else env

        command = env.get("RULES_KIT_COMMAND", _DEFAULT_COMMAND)
        argv = tuple(shlex.split(command))
        if not argv:
            raise ConfigError("RULES_KIT_COMMAND", command, "a non-empty command line")

        log_format = env.get("RULES_KIT_LOG_FORMAT", "console").lower()
        if log_format not in ("console", "json"):
            raise ConfigError("RULES_KIT_LOG_FORMAT", log_format, "'console' or 'json'")

        rules_dir = env.get("RULES_KIT_RULES_DIR", ".cursor/rules")
        if PurePath(rules_dir).is_absolute():
            raise ConfigError("RULES_KIT_RULES_DIR", rules_dir, "a path relative to the project")

        return cls(
            installer_command=argv,
            query_timeout=_float_env(env, "RULES_KIT_QUERY_TIMEOUT", 15.0),
            probe_timeout=_float_env(env, "RULES_KIT_PROBE_TIMEOUT", 10.0),
            install_timeout=_float_env(env, "RULES_KIT_INSTALL_TIMEOUT", 30.0),
            prompt_answers=_int_env(env, "RULES_KIT_PROMPT_ANSWERS", 5),
            rules_dir=rules_dir,
            log_level=env.get("RULES_KIT_LOG_LEVEL", "INFO").upper(),
            log_format=log_format,
            host=env.get("HOST", "127.0.0.1"),
            port=_int_env(env, "PORT", 3001),
        )
