"""Postal code to delivery zone resolution."""

from __future__ import annotations

import logging
from typing import Sequence

from ...models.domain import DeliveryOption, DeliveryZone, ZoneValidationResult

logger = logging.getLogger(__name__)

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 1440


def format_delivery_time(minutes: int) -> str:
    """Render a delivery time bound as minutes, hours or days."""

    if minutes < MINUTES_PER_HOUR:
        return f"{minutes} minutes"
    if minutes < MINUTES_PER_DAY:
        hours = minutes // MINUTES_PER_HOUR
        return f"{hours} hour{'s' if hours > 1 else ''}"
    days = minutes // MINUTES_PER_DAY
    return f"{days} day{'s' if days > 1 else ''}"


def get_delivery_restrictions(zone: DeliveryZone) -> list[str]:
    restrictions: list[str] = []
    if zone.restrictions.no_weekend_delivery:
        restrictions.append("No weekend delivery")
    if zone.restrictions.no_evening_delivery:
        restrictions.append("No evening delivery (after 6 PM)")
    if zone.restrictions.requires_signature:
        restrictions.append("Signature required")
    if zone.restrictions.fragile_items_only:
        restrictions.append("Fragile items only")
    return restrictions


def _parse_postal_number(postal_code: str) -> int | None:
    try:
        return int(postal_code.strip())
    except (AttributeError, ValueError):
        return None


class DeliveryZoneResolver:
    """Match postal codes and order amounts against a zone table.

    The zone table is injected so callers and tests can substitute their own
    fixtures. Failure cases are reported as data, never raised.
    """

    def __init__(
        self,
        zones: Sequence[DeliveryZone],
        *,
        nearby_distance: int = 5,
        nearby_limit: int = 3,
        large_order_margin: float = 25.0,
        large_order_discount: float = 0.1,
    ) -> None:
        self.zones = tuple(zones)
        self.nearby_distance = nearby_distance
        self.nearby_limit = nearby_limit
        self.large_order_margin = large_order_margin
        self.large_order_discount = large_order_discount

    def zones_serving(self, postal_code: str) -> list[DeliveryZone]:
        """Active zones covering the postal code, best priority first."""

        matches = [zone for zone in self.zones if zone.is_active and zone.serves(postal_code)]
        return sorted(matches, key=lambda zone: zone.priority)

    def validate_delivery_address(self, postal_code: str, order_amount: float = 0) -> ZoneValidationResult:
        available = self.zones_serving(postal_code)

        if not available:
            nearby = self.find_nearby_zones(postal_code)
            logger.debug(f"No zone serves {postal_code}; {len(nearby)} nearby suggestions")
            return ZoneValidationResult(
                is_valid=False,
                message=f"Sorry, we don't deliver to postal code {postal_code}. Please check nearby areas.",
                alternative_zones=nearby,
            )

        eligible = [zone for zone in available if order_amount >= zone.min_order_amount]
        if not eligible:
            lowest_min_order = min(zone.min_order_amount for zone in available)
            return ZoneValidationResult(
                is_valid=False,
                message=f"Minimum order amount for delivery to {postal_code} is ${lowest_min_order:.2f}",
                zone=available[0],
            )

        return ZoneValidationResult(
            is_valid=True,
            message=f"Delivery available to {postal_code}",
            zone=eligible[0],
            alternative_zones=eligible[1:],
        )

    def find_nearby_zones(self, postal_code: str) -> list[DeliveryZone]:
        """Suggest zones whose postal codes are numerically close to the query.

        Only meaningful for sequential numeric postal codes. A code that does
        not parse as an integer has no neighbours.
        """

        code_number = _parse_postal_number(postal_code)
        if code_number is None:
            return []

        nearby: list[DeliveryZone] = []
        for zone in self.zones:
            if len(nearby) >= self.nearby_limit:
                break
            for zone_code in zone.postal_codes:
                zone_number = _parse_postal_number(zone_code)
                if zone_number is None:
                    continue
                if abs(code_number - zone_number) <= self.nearby_distance:
                    nearby.append(zone)
                    break
        return nearby

    def calculate_delivery_options(self, postal_code: str, order_amount: float) -> list[DeliveryOption]:
        options: list[DeliveryOption] = []
        for zone in self.zones_serving(postal_code):
            if order_amount < zone.min_order_amount:
                continue
            savings = 0.0
            if order_amount >= zone.min_order_amount + self.large_order_margin:
                savings = zone.delivery_fee * self.large_order_discount
            options.append(
                DeliveryOption(
                    zone=zone,
                    estimated_delivery=format_delivery_time(zone.max_delivery_time),
                    is_eligible=True,
                    savings=savings,
                )
            )
        return options
