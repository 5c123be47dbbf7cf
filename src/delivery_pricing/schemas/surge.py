"""Pydantic request/response models for surge pricing endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.domain import DemandSnapshot, SurgePricingResult, WeatherSnapshot
from ..services.surge.calculator import get_surge_level


class DemandSnapshotModel(BaseModel):
    current_orders: int = Field(..., ge=0)
    available_drivers: int = Field(..., ge=0)
    average_delivery_time: float = Field(default=0.0, ge=0.0, description="Average delivery time in minutes.")
    completion_rate: float = Field(default=1.0, ge=0.0, le=1.0)
    timestamp: Optional[datetime] = None

    def to_domain(self, zone_id: int) -> DemandSnapshot:
        return DemandSnapshot(
            zone_id=zone_id,
            current_orders=self.current_orders,
            available_drivers=self.available_drivers,
            average_delivery_time=self.average_delivery_time,
            completion_rate=self.completion_rate,
            timestamp=self.timestamp,
        )


class WeatherSnapshotModel(BaseModel):
    condition: Literal["clear", "rain", "snow", "storm", "fog"]
    severity: Literal["light", "moderate", "heavy"] = "light"
    temperature: float = Field(default=15.0, description="Temperature in degrees Celsius.")
    visibility: float = Field(default=10.0, ge=0.0, description="Visibility in kilometres.")

    def to_domain(self) -> WeatherSnapshot:
        return WeatherSnapshot(
            condition=self.condition,
            severity=self.severity,
            temperature=self.temperature,
            visibility=self.visibility,
        )


class SurgePriceRequest(BaseModel):
    base_price: float = Field(..., ge=0.0, description="Price before surge adjustments.")
    zone_id: int
    demand: Optional[DemandSnapshotModel] = Field(
        default=None, description="Live demand sample; the zone's default sample is used when omitted."
    )
    weather: Optional[WeatherSnapshotModel] = Field(
        default=None, description="Current weather; the default sample is used when omitted."
    )


class SurgeFactorsModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    base_multiplier: float
    time_multiplier: float
    demand_multiplier: float
    weather_multiplier: float
    capacity_multiplier: float
    holiday_multiplier: float
    zone_multiplier: float


class SurgePriceResponse(BaseModel):
    original_price: float
    surge_price: float
    surge_multiplier: float
    surge_level: Literal["low", "medium", "high", "extreme"]
    factors: SurgeFactorsModel
    is_surge_active: bool
    surge_reason: list[str]
    estimated_duration: str
    next_price_check: datetime

    @classmethod
    def from_result(cls, result: SurgePricingResult) -> "SurgePriceResponse":
        return cls(
            original_price=result.original_price,
            surge_price=result.surge_price,
            surge_multiplier=result.surge_multiplier,
            surge_level=get_surge_level(result.surge_multiplier),
            factors=SurgeFactorsModel.model_validate(result.factors),
            is_surge_active=result.is_surge_active,
            surge_reason=list(result.surge_reason),
            estimated_duration=result.estimated_duration,
            next_price_check=result.next_price_check,
        )
