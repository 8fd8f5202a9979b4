"""Unified error handling: RulesKitError + ValidationError → JSON."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from rules_kit_mcp.exceptions import (
    RulesKitError,
    UnknownPromptError,
    UnknownResourceError,
    UnknownToolError,
)

_STATUS_MAP: dict[type[RulesKitError], int] = {
    UnknownToolError: 400,
    UnknownResourceError: 404,
    UnknownPromptError: 404,
}


async def _rules_kit_error_handler(_request: Request, exc: RulesKitError) -> JSONResponse:
    status = 500
    for cls in type(exc).__mro__:
        if cls in _STATUS_MAP:
            status = _STATUS_MAP[cls]
            break
    return JSONResponse(status_code=status, content={"error": str(exc)})


async def _validation_error_handler(_request: Request, exc: ValidationError) -> JSONResponse:
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"])
        messages.append(f"{loc}: {err['msg']}")
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid arguments", "message": "; ".join(messages)},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the app."""
    app.add_exception_handler(RulesKitError, _rules_kit_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(ValidationError, _validation_error_handler)  # type: ignore[arg-type]
