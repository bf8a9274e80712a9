"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # UI
    ui_origin: str = "http://localhost:3000"

    # Day layout
    day_start_hour: int = 9
    activity_buffer_min: int = 15
    max_experiences_per_day: int = 5

    # Durations (minutes)
    default_duration_min: int = 120

    # Legs
    default_leg_days: int = 3
    max_legs: int = 20

    # Geography (kilometers)
    proximity_radius_km: float = 3.0
    walk_threshold_km: float = 2.0

    # Verification thresholds (minutes)
    long_transit_min: int = 360


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
