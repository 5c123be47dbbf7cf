"""Static telemetry samples standing in for a live demand and weather feed."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..models.domain import DemandSnapshot, WeatherSnapshot

DEFAULT_DEMAND: Mapping[int, DemandSnapshot] = MappingProxyType(
    {
        1: DemandSnapshot(
            zone_id=1,
            current_orders=45,
            available_drivers=8,
            average_delivery_time=180,
            completion_rate=0.85,
        ),
        2: DemandSnapshot(
            zone_id=2,
            current_orders=32,
            available_drivers=12,
            average_delivery_time=150,
            completion_rate=0.92,
        ),
        3: DemandSnapshot(
            zone_id=3,
            current_orders=18,
            available_drivers=15,
            average_delivery_time=120,
            completion_rate=0.95,
        ),
        4: DemandSnapshot(
            zone_id=4,
            current_orders=8,
            available_drivers=20,
            average_delivery_time=90,
            completion_rate=0.98,
        ),
        5: DemandSnapshot(
            zone_id=5,
            current_orders=25,
            available_drivers=5,
            average_delivery_time=200,
            completion_rate=0.78,
        ),
    }
)

DEFAULT_WEATHER = WeatherSnapshot(
    condition="rain",
    severity="moderate",
    temperature=15,
    visibility=5,
)

# difficulty/distance of each zone
DEFAULT_ZONE_MULTIPLIERS: Mapping[int, float] = MappingProxyType(
    {
        1: 1.0,
        2: 1.1,
        3: 1.25,
        4: 1.4,
        5: 0.9,
    }
)


def neutral_demand(zone_id: int) -> DemandSnapshot:
    """Demand snapshot that contributes no surcharge."""

    return DemandSnapshot(
        zone_id=zone_id,
        current_orders=0,
        available_drivers=1,
        average_delivery_time=0,
        completion_rate=1.0,
    )
