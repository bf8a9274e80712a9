"""Tests for trip input models."""

from datetime import date, time

import pytest
from pydantic import ValidationError

from backend.app.models.duration import IsoDuration, Minutes
from backend.app.models.trip import Destination, Experience, Flight, TripLeg, parse_clock


def make_leg(**overrides: object) -> TripLeg:
    """Helper to create test leg."""
    data: dict[str, object] = {"id": "l1", "destination": {"name": "Lisbon"}}
    data.update(overrides)
    return TripLeg.model_validate(data)


def test_leg_from_json_payload() -> None:
    """Test a UI payload validates into typed models."""
    leg = make_leg(
        start_date="2024-06-01",
        end_date="2024-06-04",
        hotel={"id": "h1", "name": "Memmo"},
        inbound_flight={"id": "f1", "flight_number": "TP1", "duration": "PT2H"},
        experiences=[
            {"id": "e1", "name": "Belem", "category": "landmark", "geo": {"lat": 38.69, "lon": -9.2}},
            {"id": "e2", "name": "Fado", "duration": 90},
        ],
    )

    assert leg.start_date == date(2024, 6, 1)
    assert leg.destination == Destination(name="Lisbon")
    assert leg.inbound_flight is not None
    assert leg.inbound_flight.duration == IsoDuration(value="PT2H")
    assert leg.experiences[1].duration == Minutes(value=90)
    assert leg.experiences[1].geo is None


def test_duplicate_experience_ids_rejected() -> None:
    """Test experience ids must be unique within a leg."""
    with pytest.raises(ValidationError, match="Duplicate experience id"):
        make_leg(experiences=[{"id": "e1", "name": "A"}, {"id": "e1", "name": "B"}])


def test_end_date_before_start_rejected() -> None:
    """Test dates must be ordered."""
    with pytest.raises(ValidationError, match="precedes"):
        make_leg(start_date="2024-06-05", end_date="2024-06-01")


def test_days_must_be_positive() -> None:
    """Test explicit days must be at least 1."""
    with pytest.raises(ValidationError):
        make_leg(days=0)


def test_total_days_resolution_order() -> None:
    """Test explicit days, then the inclusive date span, then the default."""
    assert make_leg(days=4, start_date="2024-06-01", end_date="2024-06-10").total_days(3) == 4
    assert make_leg(start_date="2024-06-01", end_date="2024-06-03").total_days(7) == 3
    assert make_leg(start_date="2024-06-01").total_days(3) == 3


def test_experience_category_defaults_to_empty() -> None:
    """Test a null category is treated as uncategorized."""
    assert Experience(id="e1", name="A", category=None).category == ""


def test_experience_geo_range_validated() -> None:
    """Test coordinates outside WGS84 ranges are rejected."""
    with pytest.raises(ValidationError):
        Experience(id="e1", name="A", geo={"lat": 120, "lon": 0})


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("08:30", time(8, 30)),
        ("08:30:15", time(8, 30, 15)),
        ("2024-06-01T14:05:00", time(14, 5)),
        ("2024-06-01T14:05:00Z", time(14, 5)),
        ("not a time", None),
        ("", None),
        (None, None),
        (time(9, 0), time(9, 0)),
    ],
)
def test_parse_clock(raw: object, expected: time | None) -> None:
    """Test provider time values normalize to wall-clock times."""
    parsed = parse_clock(raw)
    if parsed is not None:
        parsed = parsed.replace(tzinfo=None)
    assert parsed == expected


def test_flight_with_unparseable_time_keeps_other_fields() -> None:
    """Test a bad time does not reject the flight."""
    flight = Flight(id="f1", flight_number="TP1", departure_time="soon", arrival_time="12:00")

    assert flight.departure_time is None
    assert flight.arrival_time == time(12, 0)
