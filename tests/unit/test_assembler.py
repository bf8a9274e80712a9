"""Unit tests for full itinerary assembly."""

from datetime import date

from backend.app.models.common import Geo, ItemKind
from backend.app.models.itinerary import Itinerary
from backend.app.models.trip import Destination, Experience, Flight, TripLeg
from backend.app.scheduling.assembler import content_day_count, generate_full_itinerary
from backend.app.scheduling.schedule import parse_clock_string

KM_PER_DEG_LAT = 111.195
LISBON = Geo(lat=38.7139, lon=-9.1394)
PORTO = Geo(lat=41.1579, lon=-8.6291)


def make_experience(
    exp_id: str,
    category: str = "shopping",
    base: Geo = LISBON,
    north_km: float | None = 0.0,
) -> Experience:
    """Helper to create test experience ``north_km`` north of ``base``."""
    geo = None
    if north_km is not None:
        geo = Geo(lat=base.lat + north_km / KM_PER_DEG_LAT, lon=base.lon)
    return Experience(id=exp_id, name=f"Experience {exp_id}", category=category, geo=geo)


def make_leg(
    leg_id: str,
    city: str,
    experiences: list[Experience],
    start: date | None = None,
    end: date | None = None,
    days: int | None = None,
    inbound: Flight | None = None,
    outbound: Flight | None = None,
) -> TripLeg:
    """Helper to create test leg."""
    return TripLeg(
        id=leg_id,
        destination=Destination(name=city),
        start_date=start,
        end_date=end,
        days=days,
        inbound_flight=inbound,
        outbound_flight=outbound,
        experiences=experiences,
    )


def experience_item_count(itinerary: Itinerary) -> int:
    return sum(1 for day in itinerary.days for item in day.items if item.kind == ItemKind.experience)


def test_empty_legs_returns_empty_itinerary() -> None:
    """Test no legs yields an empty result with zero totals."""
    itinerary = generate_full_itinerary([])

    assert itinerary.days == []
    assert itinerary.total_days == 0
    assert itinerary.summary.total_experiences == 0
    assert itinerary.summary.total_transit_time == 0
    assert itinerary.summary.leg_breakdown == []
    assert itinerary.advisories == []


def test_single_leg_end_to_end() -> None:
    """Test arrival, two content days, and departure for a three-day leg."""
    exps = [
        make_experience("beach", "beach", north_km=0.0),
        make_experience("m1", "museum", north_km=0.2),
        make_experience("m2", "museum", north_km=0.4),
        make_experience("club", "nightlife", north_km=0.6),
    ]
    leg = make_leg("l1", "Lisbon", exps, start=date(2024, 6, 1), days=3)

    itinerary = generate_full_itinerary([leg])

    assert [d.date for d in itinerary.days] == [
        date(2024, 6, 1),
        date(2024, 6, 2),
        date(2024, 6, 3),
        date(2024, 6, 3),
    ]
    assert [d.day_number for d in itinerary.days] == [1, 2, 3, 4]
    assert itinerary.total_days == 4
    assert itinerary.days[0].notes == "Arrival day in Lisbon"
    assert itinerary.days[-1].notes == "Departure day"
    assert itinerary.summary.total_experiences == 4
    assert experience_item_count(itinerary) == 4

    for day in itinerary.days[1:3]:
        assert day.leg_id == "l1"
        ids = [i.experience_id for i in day.experience_items()]
        if "beach" in ids and "club" in ids:
            assert ids.index("beach") < ids.index("club")

    # Two short walks on the first content day
    assert itinerary.summary.total_transit_time == 20
    assert itinerary.summary.leg_breakdown[0].days == 3
    assert itinerary.summary.leg_breakdown[0].experiences == 4


def test_transition_day_without_flights_is_drive_placeholder() -> None:
    """Test two legs without connecting flights get a 12:00-16:00 drive."""
    leg1 = make_leg("l1", "Lisbon", [make_experience("a")], start=date(2024, 6, 1), days=3)
    leg2 = make_leg(
        "l2", "Porto", [make_experience("b", base=PORTO)], start=date(2024, 6, 3), days=3
    )

    itinerary = generate_full_itinerary([leg1, leg2])

    transition = next(d for d in itinerary.days if d.is_transition_day)
    middle = transition.items[1]
    assert middle.kind == ItemKind.transit
    assert (middle.start_time, middle.end_time) == ("12:00", "16:00")
    assert not any(i.kind == ItemKind.flight for i in transition.items)
    assert transition.date == date(2024, 6, 3)
    assert (transition.from_leg, transition.to_leg) == ("l1", "l2")
    assert any(a.code == "PLACEHOLDER_TIMES" for a in itinerary.advisories)


def test_day_numbers_increase_across_legs() -> None:
    """Test day numbers run 1..N across leg boundaries."""
    leg1 = make_leg(
        "l1", "Lisbon", [make_experience("a"), make_experience("b")], start=date(2024, 6, 1), days=3
    )
    leg2 = make_leg(
        "l2",
        "Porto",
        [make_experience("c", base=PORTO), make_experience("d", base=PORTO)],
        start=date(2024, 6, 3),
        days=3,
    )

    itinerary = generate_full_itinerary([leg1, leg2])

    # arrival + 2 content + transition + 2 content + departure
    assert itinerary.total_days == 7
    assert [d.day_number for d in itinerary.days] == list(range(1, 8))
    assert [d.date for d in itinerary.days] == [
        date(2024, 6, 1),
        date(2024, 6, 2),
        date(2024, 6, 3),
        date(2024, 6, 3),
        date(2024, 6, 4),
        date(2024, 6, 5),
        date(2024, 6, 5),
    ]
    assert sum(1 for d in itinerary.days if d.is_transition_day) == 1
    assert [b.leg_id for b in itinerary.summary.leg_breakdown] == ["l1", "l2"]


def test_total_transit_includes_transition_drive() -> None:
    """Test the summary counts every transit item, including leg-to-leg drives."""
    leg1 = make_leg("l1", "Lisbon", [make_experience("a")], start=date(2024, 6, 1), days=2)
    leg2 = make_leg("l2", "Porto", [make_experience("b", base=PORTO)], start=date(2024, 6, 2), days=2)

    itinerary = generate_full_itinerary([leg1, leg2])

    assert itinerary.summary.total_transit_time == 240


def test_transition_uses_flight_when_available() -> None:
    """Test a departing outbound flight replaces the drive placeholder."""
    flight = Flight(id="f1", flight_number="TP1947", departure_time="11:05", arrival_time="12:00")
    leg1 = make_leg(
        "l1", "Lisbon", [], start=date(2024, 6, 1), end=date(2024, 6, 3), outbound=flight
    )
    leg2 = make_leg("l2", "Porto", [], start=date(2024, 6, 3), end=date(2024, 6, 5))

    itinerary = generate_full_itinerary([leg1, leg2])

    transition = next(d for d in itinerary.days if d.is_transition_day)
    assert transition.items[1].kind == ItemKind.flight
    assert transition.items[1].flight_number == "TP1947"


def test_days_derived_from_dates() -> None:
    """Test inclusive start/end dates determine the content day count."""
    leg = make_leg(
        "l1",
        "Lisbon",
        [make_experience(f"e{i}") for i in range(8)],
        start=date(2024, 6, 1),
        end=date(2024, 6, 5),
    )

    itinerary = generate_full_itinerary([leg])

    content = itinerary.days[1:-1]
    assert len(content) == 4
    assert content[0].date == date(2024, 6, 2)
    assert content[-1].date == date(2024, 6, 5)
    assert itinerary.days[-1].date == date(2024, 6, 5)
    assert experience_item_count(itinerary) == 8


def test_dateless_legs_chain_from_reference_date() -> None:
    """Test legs without dates are anchored at the caller's reference date."""
    leg1 = make_leg("l1", "Lisbon", [make_experience("a")], days=2)
    leg2 = make_leg("l2", "Porto", [make_experience("b", base=PORTO)], days=2)

    itinerary = generate_full_itinerary([leg1, leg2], reference_date=date(2025, 3, 10))

    assert [d.date for d in itinerary.days] == [
        date(2025, 3, 10),  # arrival
        date(2025, 3, 11),  # l1 content
        date(2025, 3, 11),  # transition
        date(2025, 3, 12),  # l2 content
        date(2025, 3, 12),  # departure
    ]


def test_one_day_leg_with_experiences_keeps_them() -> None:
    """Test a one-day leg still schedules its experiences."""
    leg = make_leg("l1", "Lisbon", [make_experience("a"), make_experience("b")], days=1)

    itinerary = generate_full_itinerary([leg], reference_date=date(2024, 6, 1))

    assert content_day_count(leg, 3) == 1
    assert experience_item_count(itinerary) == 2
    assert [d.date for d in itinerary.days] == [
        date(2024, 6, 1),
        date(2024, 6, 2),
        date(2024, 6, 2),
    ]


def test_experience_conservation_across_legs() -> None:
    """Test the experience item count matches the input across many legs."""
    legs = [
        make_leg(
            f"l{n}",
            f"City {n}",
            [make_experience(f"l{n}-e{i}", north_km=i * 7.0) for i in range(n * 4)],
            days=n + 1,
        )
        for n in range(1, 5)
    ]

    itinerary = generate_full_itinerary(legs, reference_date=date(2024, 1, 1))

    assert experience_item_count(itinerary) == itinerary.summary.total_experiences == 40


def test_generation_is_idempotent() -> None:
    """Test identical input produces identical output."""
    categories = ["beach", "museum", "nightlife"]
    exps = [make_experience(f"e{i}", categories[i % 3], north_km=i) for i in range(6)]
    legs = [make_leg("l1", "Lisbon", exps, start=date(2024, 6, 1), days=4)]

    first = generate_full_itinerary(legs)
    second = generate_full_itinerary(legs)

    assert first.model_dump() == second.model_dump()


def test_content_days_are_chronological() -> None:
    """Test items never overlap within a generated content day."""
    exps = [make_experience(f"e{i}", "museum", north_km=i * 1.1) for i in range(9)]
    leg = make_leg("l1", "Lisbon", exps, start=date(2024, 6, 1), days=4)

    itinerary = generate_full_itinerary([leg])

    for day in itinerary.days:
        for current, following in zip(day.items, day.items[1:], strict=False):
            assert parse_clock_string(current.end_time) <= parse_clock_string(following.start_time)
