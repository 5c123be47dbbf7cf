"""Reference data loaders."""

from .telemetry import DEFAULT_DEMAND, DEFAULT_WEATHER, DEFAULT_ZONE_MULTIPLIERS
from .zones_repository import DEFAULT_ZONES, get_zone, load_zones, load_zones_from_file

__all__ = [
    "DEFAULT_DEMAND",
    "DEFAULT_WEATHER",
    "DEFAULT_ZONE_MULTIPLIERS",
    "DEFAULT_ZONES",
    "get_zone",
    "load_zones",
    "load_zones_from_file",
]
