"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from food_quantity.domain.units import (
    VolumeExplicitUnit,
    VolumeUnit,
    volume_overrides_from_codes,
)

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    last_used_table: str = "food_last_used_quantities"
    user_settings_table: str = "user_settings"
    standard_volume_units: str | None = None

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_volume_preferences(
    raw: str | None,
) -> dict[VolumeUnit, VolumeExplicitUnit]:
    """Parse volume overrides such as ``cup=cup_metric,tablespoon=tablespoon_metric``.

    Entries naming unknown units, or a concrete unit of the wrong kind, are
    skipped.
    """
    if raw is None:
        return {}
    codes: dict[str, str] = {}
    for chunk in raw.split(","):
        key, sep, value = chunk.partition("=")
        if sep:
            codes[key] = value
    return volume_overrides_from_codes(codes)
