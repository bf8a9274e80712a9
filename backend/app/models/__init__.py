"""Models package - re-exports for convenience."""

from backend.app.models.common import Geo, ItemKind, TimeOfDay, TransitMode
from backend.app.models.duration import Duration, FreeText, IsoDuration, Minutes, coerce_duration
from backend.app.models.itinerary import (
    Itinerary,
    ItineraryDay,
    ItineraryItem,
    ItinerarySummary,
    LegBreakdown,
)
from backend.app.models.trip import Destination, Experience, Flight, Hotel, TripLeg
from backend.app.models.violations import Violation, ViolationKind, ViolationSeverity

__all__ = [
    # Common
    "Geo",
    "ItemKind",
    "TimeOfDay",
    "TransitMode",
    # Duration
    "Duration",
    "Minutes",
    "IsoDuration",
    "FreeText",
    "coerce_duration",
    # Trip
    "Destination",
    "Flight",
    "Hotel",
    "Experience",
    "TripLeg",
    # Itinerary
    "Itinerary",
    "ItineraryDay",
    "ItineraryItem",
    "ItinerarySummary",
    "LegBreakdown",
    # Violations
    "Violation",
    "ViolationKind",
    "ViolationSeverity",
]
