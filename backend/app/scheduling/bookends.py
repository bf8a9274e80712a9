"""Arrival, transition, and departure days built from flight/hotel data.

Missing flight or hotel data never blocks the itinerary: fixed wall-clock
placeholders are substituted and the affected items are marked ``estimated``.
"""

from datetime import date, time

from backend.app.models.common import ItemKind, TransitMode
from backend.app.models.itinerary import ItineraryDay, ItineraryItem
from backend.app.models.trip import Flight, TripLeg
from backend.app.scheduling.duration import resolve_duration
from backend.app.scheduling.schedule import MINUTES_PER_DAY, parse_clock_string

# Placeholder windows (start, end)
ARRIVAL_FLIGHT_WINDOW = ("10:00", "14:00")
ARRIVAL_CHECKIN_WINDOW = ("15:00", "16:00")
CHECKOUT_WINDOW = ("10:00", "11:00")
TRANSITION_FLIGHT_WINDOW = ("14:00", "16:00")
TRANSITION_DRIVE_WINDOW = ("12:00", "16:00")
TRANSITION_CHECKIN_WINDOW = ("17:00", "18:00")
DEPARTURE_FLIGHT_WINDOW = ("14:00", "20:00")


def _fmt(value: time) -> str:
    return value.strftime("%H:%M")


def _span_minutes(start: str, end: str) -> int:
    """Minutes from start to end, wrapping past midnight."""
    return (parse_clock_string(end) - parse_clock_string(start)) % MINUTES_PER_DAY


def _hotel_item(item_id: str, title: str, window: tuple[str, str]) -> ItineraryItem:
    start, end = window
    return ItineraryItem(
        id=item_id,
        kind=ItemKind.hotel,
        title=title,
        start_time=start,
        end_time=end,
        duration_minutes=_span_minutes(start, end),
    )


def flight_item(
    item_id: str,
    title: str,
    flight: Flight,
    placeholder: tuple[str, str],
) -> ItineraryItem:
    """Flight item using the flight's own times where present.

    Duration is the flight's stated duration when it has one, otherwise the
    span between the displayed times. Departure and arrival are local times at
    each airport, so across a time-zone change a stated duration differs from
    ``end_time - start_time``; flights are the only items where that holds.
    """
    start = _fmt(flight.departure_time) if flight.departure_time else placeholder[0]
    end = _fmt(flight.arrival_time) if flight.arrival_time else placeholder[1]
    if flight.duration is not None:
        minutes = resolve_duration(flight.duration)
    else:
        minutes = _span_minutes(start, end)

    return ItineraryItem(
        id=item_id,
        kind=ItemKind.flight,
        title=title,
        start_time=start,
        end_time=end,
        duration_minutes=minutes,
        flight_number=flight.flight_number,
        estimated=flight.departure_time is None or flight.arrival_time is None,
    )


def _hotel_name(leg: TripLeg) -> str:
    return leg.hotel.name if leg.hotel else "hotel"


def build_arrival_day(leg: TripLeg, day_date: date) -> ItineraryDay:
    """First day of the trip: inbound flight (if booked) and hotel check-in."""
    items: list[ItineraryItem] = []

    if leg.inbound_flight:
        items.append(
            flight_item(
                f"arrival-flight-{leg.id}",
                f"Arrive in {leg.destination.name}",
                leg.inbound_flight,
                ARRIVAL_FLIGHT_WINDOW,
            )
        )

    items.append(
        _hotel_item(f"checkin-{leg.id}", f"Check in at {_hotel_name(leg)}", ARRIVAL_CHECKIN_WINDOW)
    )

    return ItineraryDay(
        date=day_date,
        day_number=0,
        items=items,
        leg_id=leg.id,
        notes=f"Arrival day in {leg.destination.name}",
    )


def build_transition_day(from_leg: TripLeg, to_leg: TripLeg, day_date: date) -> ItineraryDay:
    """Travel day between two legs: checkout, flight or drive, check-in."""
    items: list[ItineraryItem] = [
        _hotel_item(
            f"checkout-{from_leg.id}",
            f"Check out from {_hotel_name(from_leg)} in {from_leg.destination.name}",
            CHECKOUT_WINDOW,
        )
    ]

    flight = from_leg.outbound_flight or to_leg.inbound_flight
    if flight is not None:
        items.append(
            flight_item(
                f"flight-{from_leg.id}-{to_leg.id}",
                f"Flight to {to_leg.destination.name}",
                flight,
                TRANSITION_FLIGHT_WINDOW,
            )
        )
    else:
        start, end = TRANSITION_DRIVE_WINDOW
        items.append(
            ItineraryItem(
                id=f"transit-{from_leg.id}-{to_leg.id}",
                kind=ItemKind.transit,
                title=f"Travel to {to_leg.destination.name}",
                start_time=start,
                end_time=end,
                duration_minutes=_span_minutes(start, end),
                transit_mode=TransitMode.drive,
                estimated=True,
            )
        )

    items.append(
        _hotel_item(
            f"checkin-{to_leg.id}",
            f"Check in at {_hotel_name(to_leg)} in {to_leg.destination.name}",
            TRANSITION_CHECKIN_WINDOW,
        )
    )

    return ItineraryDay(
        date=day_date,
        day_number=0,
        items=items,
        is_transition_day=True,
        from_leg=from_leg.id,
        to_leg=to_leg.id,
        notes=f"Travel day: {from_leg.destination.name} → {to_leg.destination.name}",
    )


def build_departure_day(leg: TripLeg, day_date: date) -> ItineraryDay:
    """Last day of the trip: checkout and outbound flight (if booked)."""
    items: list[ItineraryItem] = [
        _hotel_item(
            f"checkout-final-{leg.id}", f"Check out from {_hotel_name(leg)}", CHECKOUT_WINDOW
        )
    ]

    if leg.outbound_flight:
        items.append(
            flight_item(
                f"departure-flight-{leg.id}",
                "Departure flight home",
                leg.outbound_flight,
                DEPARTURE_FLIGHT_WINDOW,
            )
        )

    return ItineraryDay(
        date=day_date,
        day_number=0,
        items=items,
        leg_id=leg.id,
        notes="Departure day",
    )
