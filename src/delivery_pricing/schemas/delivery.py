"""Pydantic request/response models for checkout delivery endpoints."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..models.domain import DeliveryOption, ZoneValidationResult
from ..services.quotes import DeliveryQuote, DeliveryQuoteResult
from .surge import SurgePriceResponse
from .zones import DeliveryZoneModel


class DeliveryRequest(BaseModel):
    postal_code: str = Field(..., min_length=1, description="Postal code of the delivery address.")
    order_amount: float = Field(default=0.0, description="Cart subtotal used for minimum order checks.")

    @field_validator("postal_code")
    @classmethod
    def strip_postal_code(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("postal_code must not be blank")
        return value


class ZoneValidationResponse(BaseModel):
    is_valid: bool
    message: str
    zone: Optional[DeliveryZoneModel] = None
    alternative_zones: list[DeliveryZoneModel] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ZoneValidationResult) -> "ZoneValidationResponse":
        return cls(
            is_valid=result.is_valid,
            message=result.message,
            zone=DeliveryZoneModel.model_validate(result.zone) if result.zone else None,
            alternative_zones=[DeliveryZoneModel.model_validate(zone) for zone in result.alternative_zones],
        )


class DeliveryOptionModel(DeliveryZoneModel):
    estimated_delivery: str
    is_eligible: bool
    savings: float

    @classmethod
    def from_option(cls, option: DeliveryOption) -> "DeliveryOptionModel":
        base = DeliveryZoneModel.model_validate(option.zone).model_dump()
        return cls(
            **base,
            estimated_delivery=option.estimated_delivery,
            is_eligible=option.is_eligible,
            savings=option.savings,
        )


class DeliveryQuoteModel(BaseModel):
    option: DeliveryOptionModel
    pricing: SurgePriceResponse
    restrictions: list[str]
    total_fee: float

    @classmethod
    def from_quote(cls, quote: DeliveryQuote) -> "DeliveryQuoteModel":
        return cls(
            option=DeliveryOptionModel.from_option(quote.option),
            pricing=SurgePriceResponse.from_result(quote.pricing),
            restrictions=quote.restrictions,
            total_fee=quote.total_fee,
        )


class DeliveryQuoteResponse(BaseModel):
    validation: ZoneValidationResponse
    quotes: list[DeliveryQuoteModel]

    @classmethod
    def from_result(cls, result: DeliveryQuoteResult) -> "DeliveryQuoteResponse":
        return cls(
            validation=ZoneValidationResponse.from_result(result.validation),
            quotes=[DeliveryQuoteModel.from_quote(quote) for quote in result.quotes],
        )
