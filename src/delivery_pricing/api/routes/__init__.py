"""Route group exports."""

from . import delivery, health, surge, zones

__all__ = ["delivery", "health", "surge", "zones"]
