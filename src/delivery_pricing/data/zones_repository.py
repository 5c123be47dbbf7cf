"""Delivery zone reference data with optional file-based override."""

from __future__ import annotations

import functools
import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional

from openpyxl import load_workbook

from ..config import settings
from ..models.domain import DeliveryZone, ZoneRestrictions

logger = logging.getLogger(__name__)

RESTRICTION_FLAGS = (
    "no_weekend_delivery",
    "no_evening_delivery",
    "requires_signature",
    "fragile_items_only",
)

DEFAULT_ZONES: tuple[DeliveryZone, ...] = (
    DeliveryZone(
        id=1,
        name="Downtown Core",
        description="Central business district with premium delivery",
        postal_codes=("10001", "10002", "10003", "10004", "10005"),
        delivery_fee=5.99,
        min_order_amount=25.0,
        max_delivery_time=120,
        is_active=True,
        priority=1,
        restrictions=ZoneRestrictions(requires_signature=True),
    ),
    DeliveryZone(
        id=2,
        name="Metropolitan Area",
        description="Standard delivery zone covering most of the city",
        postal_codes=tuple(str(code) for code in range(10006, 10016)),
        delivery_fee=9.99,
        min_order_amount=35.0,
        max_delivery_time=240,
        is_active=True,
        priority=2,
    ),
    DeliveryZone(
        id=3,
        name="Suburban Zone",
        description="Extended delivery area with longer delivery times",
        postal_codes=tuple(str(code) for code in range(10016, 10026)),
        delivery_fee=14.99,
        min_order_amount=50.0,
        max_delivery_time=480,
        is_active=True,
        priority=3,
        restrictions=ZoneRestrictions(no_weekend_delivery=True),
    ),
    DeliveryZone(
        id=4,
        name="Extended Area",
        description="Outer delivery zone with next-day delivery only",
        postal_codes=tuple(str(code) for code in range(10026, 10036)),
        delivery_fee=19.99,
        min_order_amount=75.0,
        max_delivery_time=1440,
        is_active=True,
        priority=4,
        restrictions=ZoneRestrictions(no_weekend_delivery=True, no_evening_delivery=True),
    ),
    DeliveryZone(
        id=5,
        name="Premium Express Zone",
        description="Ultra-fast delivery for premium customers",
        # overlaps downtown for the express option
        postal_codes=("10001", "10002", "10003"),
        delivery_fee=15.99,
        min_order_amount=100.0,
        max_delivery_time=60,
        is_active=True,
        priority=0,
        restrictions=ZoneRestrictions(requires_signature=True),
    ),
)


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y"}
    return bool(value)


def _split_postal_codes(value: Any) -> tuple[str, ...]:
    if value is None:
        return tuple()
    if isinstance(value, (list, tuple)):
        items = value
    else:
        items = str(value).replace(";", ",").split(",")
    return tuple(str(item).strip() for item in items if str(item).strip())


def zone_from_record(record: dict[str, Any]) -> DeliveryZone:
    """Build a zone from a loosely typed mapping (JSON object or spreadsheet row)."""

    try:
        raw_restrictions = record.get("restrictions") or {}
        if not isinstance(raw_restrictions, dict):
            raise ValueError("restrictions must be an object")
        restrictions = ZoneRestrictions(
            **{
                flag: _coerce_bool(raw_restrictions.get(flag, record.get(flag, False)))
                for flag in RESTRICTION_FLAGS
            }
        )
        zone = DeliveryZone(
            id=int(record["id"]),
            name=str(record["name"]).strip(),
            description=str(record.get("description") or "").strip(),
            postal_codes=_split_postal_codes(record.get("postal_codes")),
            delivery_fee=float(record["delivery_fee"]),
            min_order_amount=float(record.get("min_order_amount") or 0.0),
            max_delivery_time=int(record["max_delivery_time"]),
            is_active=True if record.get("is_active") is None else _coerce_bool(record["is_active"]),
            priority=int(record.get("priority") or 0),
            restrictions=restrictions,
        )
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Invalid delivery zone record: {exc}") from exc

    if zone.delivery_fee < 0:
        raise ValueError(f"Zone {zone.id} has a negative delivery fee.")
    if zone.min_order_amount < 0:
        raise ValueError(f"Zone {zone.id} has a negative minimum order amount.")
    if zone.max_delivery_time <= 0:
        raise ValueError(f"Zone {zone.id} must have a positive max delivery time.")
    return zone


def _load_zones_from_json(path: Path) -> list[dict[str, Any]]:
    with path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    if isinstance(payload, dict):
        payload = payload.get("zones", [])
    if not isinstance(payload, list):
        raise ValueError(f"Zones file '{path}' must contain a list of zones.")
    return payload


def _load_zones_from_workbook(path: Path) -> list[dict[str, Any]]:
    wb = load_workbook(path, data_only=True, read_only=True)
    try:
        sheet = wb.active
        rows = sheet.iter_rows(min_row=1, values_only=True)
        header = next(rows, None)
        if header is None:
            raise ValueError(f"Zones workbook '{path}' is empty.")

        columns = [str(name).strip() if name is not None else "" for name in header]
        missing_columns = {"id", "name", "postal_codes", "delivery_fee", "max_delivery_time"} - set(columns)
        if missing_columns:
            raise ValueError(f"Zones workbook missing columns: {', '.join(sorted(missing_columns))}")

        records: list[dict[str, Any]] = []
        for row in rows:
            record = {name: value for name, value in zip(columns, row) if name}
            if record.get("id") in (None, ""):
                continue
            records.append(record)
        return records
    finally:
        wb.close()


def load_zones_from_file(source: Path) -> tuple[DeliveryZone, ...]:
    """Load a zone table from a JSON or XLSX file."""

    if not source.exists():
        raise FileNotFoundError(f"Zones file not found: {source}")

    suffix = source.suffix.lower()
    if suffix == ".json":
        records = _load_zones_from_json(source)
    elif suffix in {".xlsx", ".xlsm"}:
        records = _load_zones_from_workbook(source)
    else:
        raise ValueError(f"Unsupported zones file type '{source.suffix}'.")

    zones = tuple(zone_from_record(record) for record in records)
    ids = [zone.id for zone in zones]
    if len(ids) != len(set(ids)):
        raise ValueError(f"Zones file '{source}' contains duplicate zone ids.")
    return zones


@functools.lru_cache(maxsize=1)
def load_zones(source: Optional[Path] = None) -> tuple[DeliveryZone, ...]:
    """Return the configured zone table, loading it once."""

    path = source or settings.zones_file
    if path is None:
        logger.info(f"Using built-in delivery zone table ({len(DEFAULT_ZONES)} zones)")
        return DEFAULT_ZONES

    zones = load_zones_from_file(path)
    logger.info(f"Loaded {len(zones)} delivery zones from {path}")
    return zones


def get_zone(zone_id: int, zones: Iterable[DeliveryZone] | None = None) -> DeliveryZone | None:
    for zone in zones if zones is not None else load_zones():
        if zone.id == zone_id:
            return zone
    return None
