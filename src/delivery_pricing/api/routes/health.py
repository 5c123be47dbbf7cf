"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...data.zones_repository import load_zones

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/zones", status_code=status.HTTP_200_OK)
def health_zones() -> dict:
    """Report whether the delivery zone table can be loaded."""
    try:
        zones = load_zones()
    except (FileNotFoundError, ValueError) as exc:
        return {"service": "zones", "healthy": False, "error": str(exc)}
    active = sum(1 for zone in zones if zone.is_active)
    return {"service": "zones", "healthy": True, "zones": len(zones), "active_zones": active}
