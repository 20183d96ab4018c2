"""Exception handlers mapping failures to the JSON error envelope.

Every error response has the shape ``{"error": {"message": ..., "code": ...}}``.

- Request validation failures answer 400 ``validation`` with
  ``"field: detail; ..."`` messages.
- ``DispatchError`` subclasses answer with their own status and code; the
  message (including upstream provider text) is surfaced verbatim.
- Anything else answers 500 ``internal``; the detail is hidden in production.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ...base.errors import DispatchError, ErrorCode, RequestValidationFailed
from ...base.logging import LogContext, get_logger, log_event

_logger = get_logger("jobhunter.service")


def error_envelope(message: str, code: str) -> Dict[str, Any]:
    return {"error": {"message": message, "code": code}}


def format_validation_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """Render pydantic error dicts as ``"path: message; ..."``."""
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "header", "path")]
        path = ".".join(loc) or "body"
        parts.append(f"{path}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


async def _handle_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    failure = RequestValidationFailed(format_validation_errors(exc.errors()))
    return await _handle_dispatch_error(request, failure)


async def _handle_dispatch_error(request: Request, exc: DispatchError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(exc.message, exc.code.value),
    )


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    settings = request.app.state.settings_loader()
    log_event(
        _logger,
        "service.unhandled_error",
        LogContext(extra={"path": request.url.path}),
        level=logging.ERROR,
        error_type=exc.__class__.__name__,
        error=str(exc),
    )
    message = "Internal server error" if settings.is_production else str(exc)
    return JSONResponse(status_code=500, content=error_envelope(message, ErrorCode.INTERNAL.value))


def install_exception_handlers(app: FastAPI) -> None:
    """Register the envelope handlers on ``app``."""
    app.add_exception_handler(RequestValidationError, _handle_validation)
    app.add_exception_handler(DispatchError, _handle_dispatch_error)
    app.add_exception_handler(Exception, _handle_unexpected)


__all__ = ["install_exception_handlers", "error_envelope", "format_validation_errors"]
