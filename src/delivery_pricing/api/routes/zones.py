"""Delivery zone reference endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Path, Query, status

from ...data.zones_repository import get_zone, load_zones
from ...models.domain import DeliveryZone
from ...schemas.zones import ZoneDetailModel

router = APIRouter(prefix="/zones", tags=["zones"])


def _zone_table() -> tuple[DeliveryZone, ...]:
    try:
        return load_zones()
    except (FileNotFoundError, ValueError) as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc


@router.get("", response_model=list[ZoneDetailModel])
def list_zones(
    active_only: bool = Query(default=False, description="Only return zones that accept deliveries"),
) -> list[ZoneDetailModel]:
    zones = sorted(_zone_table(), key=lambda zone: zone.priority)
    if active_only:
        zones = [zone for zone in zones if zone.is_active]
    return [ZoneDetailModel.from_zone(zone) for zone in zones]


@router.get("/{zone_id}", response_model=ZoneDetailModel)
def get_zone_detail(zone_id: int = Path(..., description="Delivery zone identifier")) -> ZoneDetailModel:
    zone = get_zone(zone_id, _zone_table())
    if zone is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Delivery zone {zone_id} not found.")
    return ZoneDetailModel.from_zone(zone)
