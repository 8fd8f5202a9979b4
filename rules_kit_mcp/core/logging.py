"""Structured logging configuration: structlog + stdlib logging.

Records always go to stderr; in stdio mode stdout carries the MCP stream.
"""

from __future__ import annotations

import logging
import logging.config
from typing import Any

import structlog

from rules_kit_mcp.core.config import Settings

# Library loggers that would otherwise echo every request at INFO.
_TRANSPORT_LEVELS = {"mcp": "WARNING"}
_HTTP_LEVELS = {"uvicorn.access": "WARNING", "uvicorn.error": "INFO"}


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def _logger_levels(log_level: str, http: bool) -> dict[str, dict[str, Any]]:
    levels = {"rules_kit_mcp": log_level, **_TRANSPORT_LEVELS}
    if http:
        levels.update(_HTTP_LEVELS)
    return {name: {"level": lvl} for name, lvl in levels.items()}


def setup_logging(
    settings: Settings | None = None,
    *,
    level: str | None = None,
    http: bool = False,
) -> None:
    """Configure structlog and route stdlib records through it.

    Level and renderer come from *settings* (``RULES_KIT_LOG_LEVEL`` and
    ``RULES_KIT_LOG_FORMAT``); *level* overrides the level, e.g. for ``-v``.
    *http* also tunes the uvicorn loggers.
    """
    settings = settings or Settings.from_env()
    log_level = (level or settings.log_level).upper()

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": pre_chain,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        _renderer(settings.log_format),
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "structlog",
                },
            },
            "root": {"handlers": ["stderr"], "level": log_level},
            "loggers": _logger_levels(log_level, http),
        }
    )
