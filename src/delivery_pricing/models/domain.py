"""Domain models for delivery zones and surge pricing."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, Optional

WeatherCondition = Literal["clear", "rain", "snow", "storm", "fog"]
WeatherSeverity = Literal["light", "moderate", "heavy"]
SurgeLevel = Literal["low", "medium", "high", "extreme"]


@dataclass(slots=True, frozen=True)
class ZoneRestrictions:
    """Optional delivery restrictions attached to a zone."""

    no_weekend_delivery: bool = False
    no_evening_delivery: bool = False
    requires_signature: bool = False
    fragile_items_only: bool = False


@dataclass(slots=True, frozen=True)
class DeliveryZone:
    """A delivery coverage area mapped to a set of postal codes."""

    id: int
    name: str
    description: str
    postal_codes: tuple[str, ...]
    delivery_fee: float
    min_order_amount: float
    max_delivery_time: int
    is_active: bool = True
    priority: int = 0
    restrictions: ZoneRestrictions = field(default_factory=ZoneRestrictions)

    def serves(self, postal_code: str) -> bool:
        return postal_code in self.postal_codes


@dataclass(slots=True)
class ZoneValidationResult:
    is_valid: bool
    message: str
    zone: Optional[DeliveryZone] = None
    alternative_zones: list[DeliveryZone] = field(default_factory=list)


@dataclass(slots=True)
class DeliveryOption:
    """A zone annotated for display in the checkout delivery selector."""

    zone: DeliveryZone
    estimated_delivery: str
    is_eligible: bool
    savings: float


@dataclass(slots=True, frozen=True)
class DemandSnapshot:
    """Point-in-time demand telemetry for a zone."""

    zone_id: int
    current_orders: int
    available_drivers: int
    average_delivery_time: float
    completion_rate: float
    timestamp: Optional[datetime] = None


@dataclass(slots=True, frozen=True)
class WeatherSnapshot:
    condition: WeatherCondition
    severity: WeatherSeverity
    temperature: float
    visibility: float


@dataclass(slots=True)
class SurgePricingFactors:
    """Independent multipliers combined by multiplication."""

    base_multiplier: float = 1.0
    time_multiplier: float = 1.0
    demand_multiplier: float = 1.0
    weather_multiplier: float = 1.0
    capacity_multiplier: float = 1.0
    holiday_multiplier: float = 1.0
    zone_multiplier: float = 1.0

    def values(self) -> tuple[float, ...]:
        return (
            self.base_multiplier,
            self.time_multiplier,
            self.demand_multiplier,
            self.weather_multiplier,
            self.capacity_multiplier,
            self.holiday_multiplier,
            self.zone_multiplier,
        )

    def product(self) -> float:
        total = 1.0
        for value in self.values():
            total *= value
        return total


@dataclass(slots=True)
class SurgePricingResult:
    original_price: float
    surge_price: float
    surge_multiplier: float
    factors: SurgePricingFactors
    is_surge_active: bool
    surge_reason: list[str]
    estimated_duration: str
    next_price_check: datetime


@dataclass(slots=True)
class DemandHistoryEntry:
    """Demand observation recorded for analytics."""

    timestamp: datetime
    zone_id: int
    demand_level: float
    surge_multiplier: float
    weather_condition: str
    orders_completed: int
