"""Router configuration for the mcstats-api endpoints."""

from __future__ import annotations

from litestar import Router

from mcstats_api.web.controllers import PlayersController, StatusController


def create_router(path: str = "/") -> Router:
    """Create the mcstats-api router.

    Args:
        path: The base path for all API routes. Defaults to the root, which
            serves ``/status`` and ``/players``.

    Returns:
        A configured Litestar Router instance.

    Example:
        >>> router = create_router("/api")
        >>> # Serves /api/status and /api/players
    """
    return Router(
        path=path,
        route_handlers=[StatusController, PlayersController],
    )
