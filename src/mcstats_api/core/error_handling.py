"""Exception handlers for mcstats-api.

Every error is returned as a structured JSON body carrying the request's
correlation ID. Log lines pick the ID up from the structlog context bound by
``CorrelationIdMiddleware``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import TYPE_CHECKING, Any

import structlog
from litestar import Response
from litestar.exceptions import HTTPException
from litestar.status_codes import HTTP_500_INTERNAL_SERVER_ERROR

from mcstats_api.exceptions import MalformedRecordError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from litestar import Request

logger = structlog.get_logger(__name__)

INTERNAL_ERROR = "internal_error"


@dataclass
class ErrorDetail:
    """One problem behind an error, such as the file that failed to parse."""

    field: str | None = None
    message: str = ""
    code: str = "error"


@dataclass
class ErrorResponse:
    """Structured error body."""

    message: str
    code: str = INTERNAL_ERROR
    correlation_id: str | None = None
    details: list[ErrorDetail] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"status": "error", "message": self.message, "code": self.code}
        if self.correlation_id:
            result["correlation_id"] = self.correlation_id
        if self.details:
            result["details"] = [{"field": d.field, "message": d.message, "code": d.code} for d in self.details]
        return result


def error_code_for(status_code: int) -> str:
    """Map an HTTP status to a snake_case error code, e.g. 404 -> ``not_found``."""
    if status_code == HTTP_500_INTERNAL_SERVER_ERROR:
        return INTERNAL_ERROR
    try:
        return HTTPStatus(status_code).phrase.lower().replace(" ", "_").replace("-", "_")
    except ValueError:
        return "error"


def get_correlation_id(request: Request) -> str | None:
    """Extract the correlation ID from request state or headers."""
    correlation_id = request.scope.get("state", {}).get("correlation_id")
    if correlation_id:
        return correlation_id
    return request.headers.get("X-Correlation-ID") or request.headers.get("X-Request-ID")


def _respond(
    request: Request,
    status_code: int,
    body: ErrorResponse,
    headers: Mapping[str, str] | None = None,
) -> Response[dict[str, Any]]:
    body.correlation_id = get_correlation_id(request)
    return Response(content=body.to_dict(), status_code=status_code, media_type="application/json", headers=headers)


def http_exception_handler(request: Request, exc: HTTPException) -> Response[dict[str, Any]]:
    """Handle HTTP exceptions such as unknown routes or write methods."""
    code = error_code_for(exc.status_code)
    log = logger.warning if exc.status_code < 500 else logger.error
    log("HTTP exception", path=request.url.path, status_code=exc.status_code, error_code=code)

    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return _respond(request, exc.status_code, ErrorResponse(message=message, code=code), headers=exc.headers)


def malformed_record_handler(request: Request, exc: MalformedRecordError) -> Response[dict[str, Any]]:
    """Fail the request when a snapshot file exists but cannot be parsed.

    The offending file path is reported in ``details[0].field``.
    """
    logger.error("Malformed snapshot record", file=exc.path, reason=exc.reason)
    body = ErrorResponse(
        message="A player data file could not be parsed.",
        code="malformed_record",
        details=[ErrorDetail(field=exc.path, message=exc.reason, code="parse_error")],
    )
    return _respond(request, HTTP_500_INTERNAL_SERVER_ERROR, body)


def generic_exception_handler(request: Request, exc: Exception) -> Response[dict[str, Any]]:
    """Log the full exception but return a safe message to the client."""
    logger.exception("Unhandled exception", path=request.url.path, exc_info=exc)
    body = ErrorResponse(message="An unexpected error occurred. Please try again later.")
    return _respond(request, HTTP_500_INTERNAL_SERVER_ERROR, body)


def get_exception_handlers() -> dict:
    """Get all exception handlers for the application.

    Returns:
        Dictionary mapping exception types to handler functions.
    """
    return {
        HTTPException: http_exception_handler,
        MalformedRecordError: malformed_record_handler,
        Exception: generic_exception_handler,
    }
