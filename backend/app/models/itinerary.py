"""Itinerary models - scheduled output for the calendar/timeline view."""

from datetime import date

from pydantic import BaseModel, Field

from backend.app.models.common import Geo, ItemKind, TransitMode
from backend.app.models.violations import Violation


class ItineraryItem(BaseModel):
    """Single scheduled unit of time within a day.

    ``start_time``/``end_time`` are local ``HH:MM`` strings. ``day_offset``
    counts midnights the schedule crossed before this item started; it is 0
    for every item of a day that fits before midnight.
    """

    id: str
    kind: ItemKind
    title: str
    start_time: str
    end_time: str
    duration_minutes: int = Field(..., ge=0)
    day_offset: int = 0

    # Experience fields
    experience_id: str | None = None
    category: str | None = None
    location: Geo | None = None
    notes: str | None = None

    # Transit fields
    transit_mode: TransitMode | None = None
    transit_distance_km: float | None = None

    # Flight fields
    flight_number: str | None = None

    # Set on bookend items whose times are placeholders
    estimated: bool = False


class ItineraryDay(BaseModel):
    """One calendar day of the trip."""

    date: date
    day_number: int
    items: list[ItineraryItem] = Field(default_factory=list)
    leg_id: str | None = None
    is_transition_day: bool = False
    from_leg: str | None = None
    to_leg: str | None = None
    notes: str | None = None

    def experience_items(self) -> list[ItineraryItem]:
        """Experience items in schedule order."""
        return [item for item in self.items if item.kind == ItemKind.experience]


class LegBreakdown(BaseModel):
    """Per-leg day and experience counts."""

    leg_id: str
    destination: str
    days: int
    experiences: int


class ItinerarySummary(BaseModel):
    """Trip-level totals."""

    total_experiences: int = 0
    total_transit_time: int = 0
    leg_breakdown: list[LegBreakdown] = Field(default_factory=list)


class Itinerary(BaseModel):
    """Complete itinerary output."""

    days: list[ItineraryDay] = Field(default_factory=list)
    total_days: int = 0
    summary: ItinerarySummary = Field(default_factory=ItinerarySummary)
    advisories: list[Violation] = Field(default_factory=list)
