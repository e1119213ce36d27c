"""Structured logging for mcstats-api.

``configure_logging`` sets up structlog once per app. Two ASGI middlewares
tag every request with a correlation ID and log one line per completed
request; anything logged while handling the request (for example the player
being summarized) carries the same correlation ID.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from litestar.types import ASGIApp, Message, Receive, Scope, Send

HEALTH_PATHS = frozenset({"/health", "/ready"})

# Checked in order; the first non-empty header wins
CORRELATION_HEADERS: tuple[bytes, ...] = (b"x-correlation-id", b"x-request-id")
CORRELATION_RESPONSE_HEADER = b"x-correlation-id"

_SHARED_PROCESSORS: tuple = (
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
)


def _renderers(*, json_logs: bool) -> list:
    if json_logs:
        return [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=True)]


def configure_logging(*, debug: bool = False, json_logs: bool = False) -> None:
    """Configure structured logging for the application.

    Args:
        debug: Enable debug level logging.
        json_logs: Output logs as JSON (for production).
    """
    structlog.configure(
        processors=[*_SHARED_PROCESSORS, *_renderers(json_logs=json_logs)],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if debug else logging.INFO),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def correlation_id_from(scope: Scope) -> str:
    """Return the caller-supplied correlation ID, or a fresh UUID."""
    headers = dict(scope.get("headers", []))
    for name in CORRELATION_HEADERS:
        value = headers.get(name, b"").decode()
        if value:
            return value
    return str(uuid.uuid4())


class CorrelationIdMiddleware:
    """Bind a correlation ID to the structlog context of each HTTP request.

    The ID is also stored in ``scope["state"]`` for the error handlers and
    echoed back in the X-Correlation-ID response header.
    """

    def __init__(self, app: ASGIApp) -> None:
        """Initialize the middleware.

        Args:
            app: The ASGI application.
        """
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Bind the correlation ID for the duration of the request."""
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        correlation_id = correlation_id_from(scope)
        scope.setdefault("state", {})["correlation_id"] = correlation_id

        async def send_with_header(message: Message) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (CORRELATION_RESPONSE_HEADER, correlation_id.encode()),
                ]
            await send(message)

        with structlog.contextvars.bound_contextvars(
            correlation_id=correlation_id,
            path=scope.get("path", ""),
            method=scope.get("method", ""),
        ):
            await self.app(scope, receive, send_with_header)


def _level_for(status_code: int) -> str:
    if status_code >= 500:
        return "error"
    if status_code >= 400:
        return "warning"
    return "info"


class RequestLoggingMiddleware:
    """Log one ``Request completed`` line per HTTP request.

    The line carries status code, duration, response size and client address.
    Health probes are not logged so orchestrator polling does not flood the
    output.
    """

    def __init__(self, app: ASGIApp, *, exclude_paths: frozenset[str] | set[str] | None = None) -> None:
        """Initialize the middleware.

        Args:
            app: The ASGI application.
            exclude_paths: Paths that are not logged. Defaults to the health
                probe paths.
        """
        self.app = app
        self.exclude_paths = frozenset(HEALTH_PATHS if exclude_paths is None else exclude_paths)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Serve the request and log its outcome."""
        if scope["type"] != "http" or scope.get("path", "") in self.exclude_paths:
            await self.app(scope, receive, send)
            return

        logger = structlog.get_logger(__name__)
        client = scope.get("client")
        client_ip = client[0] if client else "unknown"
        started = time.perf_counter()
        status_code = 500
        response_bytes = 0

        async def send_and_measure(message: Message) -> None:
            nonlocal status_code, response_bytes
            if message["type"] == "http.response.start":
                status_code = message.get("status", 500)
            elif message["type"] == "http.response.body":
                response_bytes += len(message.get("body", b""))
            await send(message)

        try:
            await self.app(scope, receive, send_and_measure)
        except Exception:
            logger.exception("Request failed with exception", client_ip=client_ip)
            raise
        finally:
            getattr(logger, _level_for(status_code))(
                "Request completed",
                status_code=status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
                response_bytes=response_bytes,
                client_ip=client_ip,
            )


def get_middleware() -> list:
    """Get the logging middleware stack.

    Returns:
        List of middleware classes in the order they should be applied.
    """
    return [CorrelationIdMiddleware, RequestLoggingMiddleware]
