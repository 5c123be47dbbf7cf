"""Delivery zone resolution helpers."""

from ...config import settings
from ...data.zones_repository import load_zones
from .resolver import DeliveryZoneResolver, format_delivery_time, get_delivery_restrictions


def get_resolver() -> DeliveryZoneResolver:
    """Build a resolver over the configured zone table."""

    return DeliveryZoneResolver(
        load_zones(),
        nearby_distance=settings.nearby_zone_max_distance,
        nearby_limit=settings.nearby_zone_limit,
        large_order_margin=settings.large_order_margin,
        large_order_discount=settings.large_order_discount_rate,
    )


__all__ = [
    "DeliveryZoneResolver",
    "format_delivery_time",
    "get_delivery_restrictions",
    "get_resolver",
]
