"""Pydantic response models for delivery zone endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ..models.domain import DeliveryZone
from ..services.zones.resolver import format_delivery_time, get_delivery_restrictions


class ZoneRestrictionsModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    no_weekend_delivery: bool = False
    no_evening_delivery: bool = False
    requires_signature: bool = False
    fragile_items_only: bool = False


class DeliveryZoneModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    postal_codes: list[str]
    delivery_fee: float
    min_order_amount: float
    max_delivery_time: int
    is_active: bool
    priority: int
    restrictions: ZoneRestrictionsModel


class ZoneDetailModel(DeliveryZoneModel):
    estimated_delivery: str
    restriction_notes: list[str]

    @classmethod
    def from_zone(cls, zone: DeliveryZone) -> "ZoneDetailModel":
        base = DeliveryZoneModel.model_validate(zone).model_dump()
        return cls(
            **base,
            estimated_delivery=format_delivery_time(zone.max_delivery_time),
            restriction_notes=get_delivery_restrictions(zone),
        )
