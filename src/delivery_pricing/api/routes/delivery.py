"""Checkout delivery endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from ...schemas.delivery import (
    DeliveryOptionModel,
    DeliveryQuoteResponse,
    DeliveryRequest,
    ZoneValidationResponse,
)
from ...services.quotes import quote_delivery
from ...services.surge import get_calculator
from ...services.zones import get_resolver

router = APIRouter(prefix="/delivery", tags=["delivery"])


@router.post("/validate", response_model=ZoneValidationResponse, status_code=status.HTTP_200_OK)
def validate_address(payload: DeliveryRequest) -> ZoneValidationResponse:
    """Check whether an address can be delivered to for the given order amount.

    An undeliverable address is a normal response with ``is_valid`` false, not an error.
    """
    try:
        resolver = get_resolver()
    except (FileNotFoundError, ValueError) as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    result = resolver.validate_delivery_address(payload.postal_code, payload.order_amount)
    return ZoneValidationResponse.from_result(result)


@router.post("/options", response_model=list[DeliveryOptionModel], status_code=status.HTTP_200_OK)
def delivery_options(payload: DeliveryRequest) -> list[DeliveryOptionModel]:
    try:
        resolver = get_resolver()
    except (FileNotFoundError, ValueError) as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    options = resolver.calculate_delivery_options(payload.postal_code, payload.order_amount)
    return [DeliveryOptionModel.from_option(option) for option in options]


@router.post("/quote", response_model=DeliveryQuoteResponse, status_code=status.HTTP_200_OK)
def delivery_quote(payload: DeliveryRequest) -> DeliveryQuoteResponse:
    """Delivery options with surge-adjusted fees and zone restrictions."""
    try:
        resolver = get_resolver()
    except (FileNotFoundError, ValueError) as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    result = quote_delivery(resolver, get_calculator(), payload.postal_code, payload.order_amount)
    return DeliveryQuoteResponse.from_result(result)
