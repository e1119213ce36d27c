"""Main Litestar application for mcstats-api.

This module provides the application factory and a configured app instance
for running mcstats-api under uvicorn or the ``litestar`` CLI.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import structlog
from litestar import Litestar
from litestar.config.cors import CORSConfig
from litestar.openapi import OpenAPIConfig

from mcstats_api import __version__
from mcstats_api.cli import McStatsCLIPlugin
from mcstats_api.config import McStatsSettings
from mcstats_api.core.error_handling import get_exception_handlers
from mcstats_api.core.logging import configure_logging, get_middleware
from mcstats_api.core.openapi import get_openapi_plugins
from mcstats_api.plugin import McStatsConfig, McStatsPlugin

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable
    from contextlib import AbstractAsyncContextManager


def _make_lifespan(settings: McStatsSettings) -> Callable[[Litestar], AbstractAsyncContextManager[None]]:
    @asynccontextmanager
    async def lifespan(app: Litestar) -> AsyncGenerator[None, None]:
        """Log the startup message once the app is serving."""
        logger = structlog.get_logger(__name__)
        logger.info(
            "Minecraft Stats API running",
            server=f"{settings.server_address}:{settings.server_port}",
            usercache=str(settings.usercache_path),
            stats_dir=str(settings.stats_dir),
            advancements_dir=str(settings.advancements_dir),
        )
        yield
        logger.info("Minecraft Stats API stopped")

    return lifespan


def create_app(
    *,
    settings: McStatsSettings | None = None,
    plugin_config: McStatsConfig | None = None,
    debug: bool | None = None,
    json_logs: bool | None = None,
) -> Litestar:
    """Create and configure the Litestar application.

    Args:
        settings: Deployment settings. Read from the environment if None.
        plugin_config: Full plugin configuration, for injecting a storage
            backend or status service. Its settings take precedence.
        debug: Whether to enable debug mode. Defaults to ``settings.debug``.
        json_logs: Whether to output logs as JSON. Defaults to
            ``settings.json_logs``.

    Returns:
        Configured Litestar application instance.
    """
    if plugin_config is None:
        plugin_config = McStatsConfig(settings=settings or McStatsSettings())
    settings = plugin_config.settings

    debug = settings.debug if debug is None else debug
    json_logs = settings.json_logs if json_logs is None else json_logs
    configure_logging(debug=debug, json_logs=json_logs)

    return Litestar(
        plugins=[McStatsPlugin(plugin_config), McStatsCLIPlugin()],
        debug=debug,
        lifespan=[_make_lifespan(settings)],
        middleware=get_middleware(),
        exception_handlers=get_exception_handlers(),
        cors_config=CORSConfig(allow_origins=["*"], allow_methods=["GET"]),
        openapi_config=OpenAPIConfig(
            title="Minecraft Stats API",
            version=__version__,
            description="Live game server status and per-player statistics",
            path="/schema",
            render_plugins=get_openapi_plugins(),
            use_handler_docstrings=True,
        ),
    )


# Default application instance for uvicorn
app = create_app()
