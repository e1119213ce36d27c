"""Business logic services for mcstats-api."""

from mcstats_api.services.advancements import extract_names
from mcstats_api.services.diet import classify
from mcstats_api.services.players import PlayerService, aggregate
from mcstats_api.services.status import StatusService, probe

__all__ = ["PlayerService", "StatusService", "aggregate", "classify", "extract_names", "probe"]
