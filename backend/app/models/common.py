"""Common types and enums shared across all models."""

from enum import Enum

from pydantic import BaseModel, Field


class Geo(BaseModel):
    """Geographic coordinates (WGS84)."""

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class ItemKind(str, Enum):
    """Type of scheduled itinerary item."""

    experience = "experience"
    transit = "transit"
    flight = "flight"
    hotel = "hotel"


class TransitMode(str, Enum):
    """Transit mode (display hint only)."""

    walk = "walk"
    drive = "drive"


class TimeOfDay(str, Enum):
    """Preferred part of the day for an experience."""

    morning = "morning"
    afternoon = "afternoon"
    evening = "evening"
    anytime = "anytime"
