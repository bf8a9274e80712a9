"""Trip models - legs and the bookings/experiences selected for them."""

import logging
from datetime import date, datetime, time
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from backend.app.models.common import Geo
from backend.app.models.duration import Duration, coerce_duration

logger = logging.getLogger(__name__)


def parse_clock(raw: Any) -> time | None:
    """Normalize a provider time value to a wall-clock time.

    Accepts ``time`` and ``datetime`` objects, ``HH:MM``/``HH:MM:SS`` strings and
    ISO-8601 datetime strings. Anything unparseable becomes None so the
    bookend builder falls back to placeholder times.
    """
    if raw is None or isinstance(raw, time):
        return raw
    if isinstance(raw, datetime):
        return raw.time().replace(tzinfo=None)
    if not isinstance(raw, str) or not raw.strip():
        return None

    text = raw.strip()
    try:
        return time.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).time()
    except ValueError:
        logger.debug("Unparseable flight time %r, using placeholder", text)
        return None


class Destination(BaseModel):
    """Destination of a trip leg."""

    id: str | None = None
    name: str
    country: str | None = None
    geo: Geo | None = None


class Flight(BaseModel):
    """Flight booking attached to a leg."""

    id: str
    flight_number: str | None = None
    airline: str | None = None
    departure_time: time | None = None
    arrival_time: time | None = None
    duration: Duration | None = None

    @field_validator("departure_time", "arrival_time", mode="before")
    @classmethod
    def normalize_times(cls, v: Any) -> time | None:
        """Reduce provider timestamps to local wall-clock times."""
        return parse_clock(v)

    @field_validator("duration", mode="before")
    @classmethod
    def wrap_duration(cls, v: Any) -> Any:
        """Wrap raw durations into the tagged union."""
        return coerce_duration(v)


class Hotel(BaseModel):
    """Hotel booking attached to a leg."""

    id: str
    name: str
    address: str | None = None
    geo: Geo | None = None


class Experience(BaseModel):
    """Activity or point of interest selected by the user."""

    id: str
    name: str
    category: str = ""
    duration: Duration | None = None
    geo: Geo | None = None
    tip: str | None = None

    @field_validator("duration", mode="before")
    @classmethod
    def wrap_duration(cls, v: Any) -> Any:
        """Wrap raw durations into the tagged union."""
        return coerce_duration(v)

    @field_validator("category", mode="before")
    @classmethod
    def default_category(cls, v: Any) -> Any:
        """Treat a missing category as uncategorized."""
        return "" if v is None else v


class TripLeg(BaseModel):
    """One destination segment of a multi-destination trip."""

    id: str
    destination: Destination
    start_date: date | None = None
    end_date: date | None = None
    days: int | None = Field(default=None, ge=1)
    inbound_flight: Flight | None = None
    outbound_flight: Flight | None = None
    hotel: Hotel | None = None
    experiences: list[Experience] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_leg(self) -> "TripLeg":
        """Ensure dates are ordered and experience ids are unique."""
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError(f"end_date {self.end_date} precedes start_date {self.start_date}")

        seen: set[str] = set()
        for exp in self.experiences:
            if exp.id in seen:
                raise ValueError(f"Duplicate experience id in leg {self.id}: {exp.id}")
            seen.add(exp.id)
        return self

    def total_days(self, default_days: int) -> int:
        """Number of calendar days covered by this leg.

        Explicit ``days`` wins, then the inclusive span between start and end
        date, then ``default_days``.
        """
        if self.days is not None:
            return self.days
        if self.start_date and self.end_date:
            return (self.end_date - self.start_date).days + 1
        return default_days
