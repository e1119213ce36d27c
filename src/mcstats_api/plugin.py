"""Litestar plugin for mcstats-api integration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from litestar.di import Provide
from litestar.plugins import InitPluginProtocol

from mcstats_api.config import McStatsSettings
from mcstats_api.services.players import PlayerService
from mcstats_api.services.status import StatusService
from mcstats_api.storage.filesystem import FileSystemStorage
from mcstats_api.web.router import create_router

if TYPE_CHECKING:
    from litestar.config.app import AppConfig

    from mcstats_api.storage.base import StorageProtocol


@dataclass
class McStatsConfig:
    """Configuration for the McStats plugin.

    Attributes:
        settings: Deployment settings (paths, probe target, flags). Read from
            the environment by default.
        storage: Storage backend for snapshots. If None, a FileSystemStorage
            over the configured paths is used.
        status_service: Pre-built status service. If None, one probing the
            configured server is created.
        api_path: Base path for mounting the /status and /players routes.
            Defaults to the root.
        enable_health: Whether to mount /health and /ready. Defaults to True.

    Example:
        >>> from mcstats_api.storage.memory import InMemoryStorage
        >>> config = McStatsConfig(storage=InMemoryStorage(), api_path="/api")
    """

    settings: McStatsSettings = field(default_factory=McStatsSettings)
    storage: StorageProtocol | None = None
    status_service: StatusService | None = None
    api_path: str = "/"
    enable_health: bool = True


class McStatsPlugin(InitPluginProtocol):
    """Litestar plugin wiring the player and status services into an app.

    Builds the storage backend and services from McStatsConfig, registers them
    for dependency injection as ``player_service`` and ``status_service``, and
    mounts the API routes.

    Example:
        >>> from litestar import Litestar
        >>> from mcstats_api import McStatsPlugin, McStatsConfig
        >>>
        >>> app = Litestar(plugins=[McStatsPlugin(McStatsConfig())])

    Attributes:
        _config: The plugin configuration.
        _player_service: The PlayerService (None until on_app_init).
        _status_service: The StatusService (None until on_app_init).
    """

    def __init__(self, config: McStatsConfig | None = None) -> None:
        """Initialize the plugin with optional configuration.

        Args:
            config: Plugin configuration. If None, McStatsConfig with default
                values will be used.
        """
        self._config = config or McStatsConfig()
        self._player_service: PlayerService | None = None
        self._status_service: StatusService | None = None

    def on_app_init(self, app_config: AppConfig) -> AppConfig:
        """Create the services and mount the routes.

        Args:
            app_config: The Litestar application configuration object.

        Returns:
            The modified application configuration.
        """
        settings = self._config.settings
        storage = self._config.storage or FileSystemStorage.from_settings(settings)

        self._player_service = PlayerService(storage, skip_malformed=settings.skip_malformed)
        self._status_service = self._config.status_service or StatusService.from_settings(settings)

        app_config.dependencies["player_service"] = Provide(self._provide_player_service, sync_to_thread=False)
        app_config.dependencies["status_service"] = Provide(self._provide_status_service, sync_to_thread=False)

        app_config.route_handlers.append(create_router(path=self._config.api_path))

        if self._config.enable_health:
            from mcstats_api.web.health import HealthController

            app_config.route_handlers.append(HealthController)

        return app_config

    def _provide_player_service(self) -> PlayerService:
        return self.player_service

    def _provide_status_service(self) -> StatusService:
        return self.status_service

    @property
    def player_service(self) -> PlayerService:
        """Get the initialized player service.

        Raises:
            RuntimeError: If on_app_init has not been called yet.
        """
        if self._player_service is None:
            msg = "Plugin not initialized. Call on_app_init first."
            raise RuntimeError(msg)
        return self._player_service

    @property
    def status_service(self) -> StatusService:
        """Get the initialized status service.

        Raises:
            RuntimeError: If on_app_init has not been called yet.
        """
        if self._status_service is None:
            msg = "Plugin not initialized. Call on_app_init first."
            raise RuntimeError(msg)
        return self._status_service
