"""Surge price calculation."""

from __future__ import annotations

import logging
import math
from datetime import timedelta
from typing import Mapping, Optional

from ...models.domain import (
    DemandHistoryEntry,
    DemandSnapshot,
    SurgeLevel,
    SurgePricingFactors,
    SurgePricingResult,
    WeatherSnapshot,
)
from ...data.telemetry import neutral_demand
from .clock import Clock, SystemClock
from .factors import (
    calculate_demand_multiplier,
    calculate_holiday_multiplier,
    calculate_time_multiplier,
    calculate_weather_multiplier,
    calculate_zone_multiplier,
)

logger = logging.getLogger(__name__)

REASON_THRESHOLD = 1.1
ZONE_REASON_THRESHOLD = 1.2


def round_half_up(value: float, digits: int = 2) -> float:
    """Round on the scaled value, halves going up."""

    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def get_surge_level(multiplier: float) -> SurgeLevel:
    if multiplier >= 2.5:
        return "extreme"
    if multiplier >= 2.0:
        return "high"
    if multiplier >= 1.5:
        return "medium"
    return "low"


def _surge_reasons(factors: SurgePricingFactors) -> list[str]:
    reasons: list[str] = []
    if factors.time_multiplier > REASON_THRESHOLD:
        reasons.append("Peak hours")
    if factors.demand_multiplier > REASON_THRESHOLD:
        reasons.append("High demand")
    if factors.weather_multiplier > REASON_THRESHOLD:
        reasons.append("Weather conditions")
    if factors.holiday_multiplier > REASON_THRESHOLD:
        reasons.append("Holiday/Special event")
    if factors.zone_multiplier > ZONE_REASON_THRESHOLD:
        reasons.append("Extended delivery area")
    return reasons


def _estimated_duration(factors: SurgePricingFactors) -> str:
    if factors.demand_multiplier > 2:
        return "1-2 hours"
    if factors.weather_multiplier > 1.3:
        return "2-4 hours"
    if factors.holiday_multiplier > 1.2:
        return "4-8 hours"
    return "15-30 minutes"


class SurgePriceCalculator:
    """Combine time, demand, weather, holiday and zone factors into a price.

    All inputs other than the base price are injected: the clock, the per-zone
    demand table, the fallback weather sample and the zone multiplier table.
    The calculator holds no mutable state and is safe to share across threads.
    """

    def __init__(
        self,
        *,
        demand_table: Mapping[int, DemandSnapshot],
        default_weather: WeatherSnapshot,
        zone_multipliers: Mapping[int, float],
        clock: Clock | None = None,
        activation_threshold: float = 1.15,
        check_interval: timedelta = timedelta(minutes=5),
    ) -> None:
        self.demand_table = demand_table
        self.default_weather = default_weather
        self.zone_multipliers = zone_multipliers
        self.clock = clock or SystemClock()
        self.activation_threshold = activation_threshold
        self.check_interval = check_interval

    def _resolve_demand(self, zone_id: int, demand: Optional[DemandSnapshot]) -> DemandSnapshot:
        if demand is not None:
            return demand
        snapshot = self.demand_table.get(zone_id)
        if snapshot is None:
            logger.warning(f"No demand sample for zone {zone_id}; assuming no demand surcharge")
            return neutral_demand(zone_id)
        return snapshot

    def compute_factors(
        self,
        zone_id: int,
        demand: Optional[DemandSnapshot] = None,
        weather: Optional[WeatherSnapshot] = None,
    ) -> SurgePricingFactors:
        now = self.clock.now()
        return SurgePricingFactors(
            base_multiplier=1.0,
            time_multiplier=calculate_time_multiplier(now),
            demand_multiplier=calculate_demand_multiplier(self._resolve_demand(zone_id, demand)),
            weather_multiplier=calculate_weather_multiplier(weather or self.default_weather),
            capacity_multiplier=1.0,  # reserved for capacity-based pricing
            holiday_multiplier=calculate_holiday_multiplier(now.date()),
            zone_multiplier=calculate_zone_multiplier(zone_id, self.zone_multipliers),
        )

    def calculate_surge_price(
        self,
        base_price: float,
        zone_id: int,
        demand: Optional[DemandSnapshot] = None,
        weather: Optional[WeatherSnapshot] = None,
    ) -> SurgePricingResult:
        factors = self.compute_factors(zone_id, demand, weather)
        total_multiplier = factors.product()
        surge_price = base_price * total_multiplier

        logger.debug(
            f"Surge for zone {zone_id}: base={base_price} multiplier={total_multiplier:.4f} factors={factors}"
        )

        return SurgePricingResult(
            original_price=base_price,
            surge_price=round_half_up(surge_price),
            surge_multiplier=round_half_up(total_multiplier),
            factors=factors,
            is_surge_active=total_multiplier > self.activation_threshold,
            surge_reason=_surge_reasons(factors),
            estimated_duration=_estimated_duration(factors),
            next_price_check=self.clock.now() + self.check_interval,
        )

    def track_demand_history(
        self,
        zone_id: int,
        demand_level: float,
        surge_multiplier: float,
        weather_condition: str,
        orders_completed: int,
    ) -> DemandHistoryEntry:
        return DemandHistoryEntry(
            timestamp=self.clock.now(),
            zone_id=zone_id,
            demand_level=demand_level,
            surge_multiplier=surge_multiplier,
            weather_condition=weather_condition,
            orders_completed=orders_completed,
        )
