"""Delivery quotes combining zone options with surge-adjusted fees."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..models.domain import DeliveryOption, SurgePricingResult, ZoneValidationResult
from .surge.calculator import SurgePriceCalculator, round_half_up
from .zones.resolver import DeliveryZoneResolver, get_delivery_restrictions


@dataclass(slots=True)
class DeliveryQuote:
    option: DeliveryOption
    pricing: SurgePricingResult
    restrictions: list[str]

    @property
    def total_fee(self) -> float:
        """Surge-adjusted delivery fee minus the large-order savings."""
        return round_half_up(max(self.pricing.surge_price - self.option.savings, 0.0))


@dataclass(slots=True)
class DeliveryQuoteResult:
    validation: ZoneValidationResult
    quotes: list[DeliveryQuote] = field(default_factory=list)


def quote_delivery(
    resolver: DeliveryZoneResolver,
    calculator: SurgePriceCalculator,
    postal_code: str,
    order_amount: float,
) -> DeliveryQuoteResult:
    """Price every eligible delivery option for a checkout address."""

    validation = resolver.validate_delivery_address(postal_code, order_amount)
    quotes = [
        DeliveryQuote(
            option=option,
            pricing=calculator.calculate_surge_price(option.zone.delivery_fee, option.zone.id),
            restrictions=get_delivery_restrictions(option.zone),
        )
        for option in resolver.calculate_delivery_options(postal_code, order_amount)
    ]
    return DeliveryQuoteResult(validation=validation, quotes=quotes)
