"""Top-level itinerary assembly across all trip legs."""

import logging
from datetime import date, timedelta

from backend.app.config import get_settings
from backend.app.models.common import ItemKind
from backend.app.models.itinerary import Itinerary, ItineraryDay, ItinerarySummary, LegBreakdown
from backend.app.models.trip import TripLeg
from backend.app.scheduling.bookends import (
    build_arrival_day,
    build_departure_day,
    build_transition_day,
)
from backend.app.scheduling.distributor import build_leg_days
from backend.app.verification.verifiers import run_verifiers

logger = logging.getLogger(__name__)


def content_day_count(leg: TripLeg, default_days: int) -> int:
    """Days available for a leg's experiences.

    One day of every leg is reserved for arrival/transition overhead. A leg
    with experiences always gets at least one content day so nothing is
    dropped.
    """
    available = leg.total_days(default_days) - 1
    if leg.experiences and available < 1:
        return 1
    return max(available, 0)


def leg_dates(leg: TripLeg, fallback_start: date, default_days: int) -> tuple[date, date]:
    """Start and end date of a leg, deriving whichever is missing."""
    start = leg.start_date or fallback_start
    end = leg.end_date or start + timedelta(days=leg.total_days(default_days) - 1)
    return start, end


def generate_full_itinerary(
    legs: list[TripLeg],
    *,
    reference_date: date | None = None,
    start_hour: int | None = None,
) -> Itinerary:
    """Build the complete day-by-day itinerary for a trip.

    Layout:
    - Arrival day for the first leg
    - Content days per leg (``days - 1``), starting the day after the leg starts
    - Transition day between consecutive legs, dated at the departing leg's end
    - Departure day after the last leg

    Day numbers run 1..N across the whole trip regardless of leg boundaries.
    The function is pure: identical input always yields identical output.

    Args:
        legs: Trip legs in travel order
        reference_date: Start date for legs that carry no dates; a dateless
            leg after the first starts on the previous leg's end date
        start_hour: Hour content days start (default: settings.day_start_hour)

    Returns:
        Itinerary with days, totals, per-leg breakdown, and advisories
    """
    if not legs:
        return Itinerary()

    settings = get_settings()
    default_days = settings.default_leg_days

    if reference_date is None and any(leg.start_date is None for leg in legs):
        reference_date = date.today()
        logger.debug("Dateless legs present, anchoring itinerary at %s", reference_date)

    all_days: list[ItineraryDay] = []
    leg_breakdown: list[LegBreakdown] = []
    cursor = legs[0].start_date or reference_date or date.today()
    end = cursor

    for index, leg in enumerate(legs):
        start, end = leg_dates(leg, cursor, default_days)

        if index == 0:
            all_days.append(build_arrival_day(leg, start))

        leg_days = build_leg_days(
            leg.experiences,
            content_day_count(leg, default_days),
            start + timedelta(days=1),
            start_hour,
        )
        for day in leg_days:
            day.leg_id = leg.id
        all_days.extend(leg_days)

        # A one-day leg's forced content day would otherwise follow its departure
        if leg_days and leg_days[-1].date > end:
            end = leg_days[-1].date

        leg_breakdown.append(
            LegBreakdown(
                leg_id=leg.id,
                destination=leg.destination.name,
                days=len(leg_days) + 1,
                experiences=len(leg.experiences),
            )
        )

        if index < len(legs) - 1:
            all_days.append(build_transition_day(leg, legs[index + 1], end))

        cursor = end

    all_days.append(build_departure_day(legs[-1], end))

    for number, day in enumerate(all_days, start=1):
        day.day_number = number

    total_transit = sum(
        item.duration_minutes
        for day in all_days
        for item in day.items
        if item.kind == ItemKind.transit
    )

    return Itinerary(
        days=all_days,
        total_days=len(all_days),
        summary=ItinerarySummary(
            total_experiences=sum(len(leg.experiences) for leg in legs),
            total_transit_time=total_transit,
            leg_breakdown=leg_breakdown,
        ),
        advisories=run_verifiers(all_days),
    )
