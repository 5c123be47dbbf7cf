"""Application configuration and settings management."""

from pathlib import Path
from typing import Annotated, Any, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="DP_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Delivery Pricing API"
    api_prefix: str = "/api"
    zones_file: Optional[Path] = Field(
        default=None,
        description="Optional JSON or XLSX file replacing the built-in delivery zone table.",
    )
    nearby_zone_max_distance: int = Field(
        default=5,
        ge=0,
        description="Maximum numeric distance between postal codes for nearby-zone suggestions.",
    )
    nearby_zone_limit: int = Field(default=3, ge=0)
    large_order_margin: float = Field(
        default=25.0,
        ge=0.0,
        description="Amount above a zone's minimum order that qualifies for the large-order discount.",
    )
    large_order_discount_rate: float = Field(default=0.1, ge=0.0, le=1.0)
    surge_activation_threshold: float = Field(
        default=1.15,
        ge=1.0,
        description="Overall multiplier above which surge pricing is reported as active.",
    )
    surge_check_interval_minutes: int = Field(
        default=5,
        ge=1,
        description="Minutes until the next recommended surge recalculation.",
    )
    frontend_allowed_origins: Annotated[tuple[str, ...], NoDecode] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:8000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("zones_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Optional[Path]:
        if value is None or value == "":
            return None
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
