"""Surge pricing endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...schemas.surge import SurgePriceRequest, SurgePriceResponse
from ...services.surge import get_calculator

router = APIRouter(prefix="/surge", tags=["surge"])


@router.post("/price", response_model=SurgePriceResponse, status_code=status.HTTP_200_OK)
def surge_price(payload: SurgePriceRequest) -> SurgePriceResponse:
    calculator = get_calculator()
    demand = payload.demand.to_domain(payload.zone_id) if payload.demand else None
    weather = payload.weather.to_domain() if payload.weather else None
    result = calculator.calculate_surge_price(payload.base_price, payload.zone_id, demand, weather)
    return SurgePriceResponse.from_result(result)
