"""Surge pricing helpers."""

from datetime import timedelta

from ...config import settings
from ...data.telemetry import DEFAULT_DEMAND, DEFAULT_WEATHER, DEFAULT_ZONE_MULTIPLIERS
from .calculator import SurgePriceCalculator, get_surge_level, round_half_up
from .clock import Clock, FixedClock, SystemClock
from .monitor import SurgePriceMonitor


def get_calculator(clock: Clock | None = None) -> SurgePriceCalculator:
    """Build a calculator over the default telemetry tables."""

    return SurgePriceCalculator(
        demand_table=DEFAULT_DEMAND,
        default_weather=DEFAULT_WEATHER,
        zone_multipliers=DEFAULT_ZONE_MULTIPLIERS,
        clock=clock,
        activation_threshold=settings.surge_activation_threshold,
        check_interval=timedelta(minutes=settings.surge_check_interval_minutes),
    )


__all__ = [
    "Clock",
    "FixedClock",
    "SurgePriceCalculator",
    "SurgePriceMonitor",
    "SystemClock",
    "get_calculator",
    "get_surge_level",
    "round_half_up",
]
