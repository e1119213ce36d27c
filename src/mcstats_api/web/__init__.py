"""Web layer for mcstats-api."""

from mcstats_api.web.controllers import PlayersController, StatusController
from mcstats_api.web.health import HealthController
from mcstats_api.web.router import create_router

__all__ = ["HealthController", "PlayersController", "StatusController", "create_router"]
