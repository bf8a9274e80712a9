"""Day-schedule generation: concrete times for an ordered experience list."""

from collections.abc import Sequence
from dataclasses import dataclass

from backend.app.config import get_settings
from backend.app.models.common import ItemKind
from backend.app.models.itinerary import ItineraryItem
from backend.app.models.trip import Experience
from backend.app.scheduling.duration import experience_duration
from backend.app.scheduling.geo import (
    classify_transit_mode,
    distance_between,
    estimate_transit_minutes,
)

MINUTES_PER_DAY = 24 * 60


def format_clock(minutes: int) -> str:
    """Format minutes since midnight as ``HH:MM``, wrapping at 24h."""
    wrapped = minutes % MINUTES_PER_DAY
    return f"{wrapped // 60:02d}:{wrapped % 60:02d}"


def parse_clock_string(value: str) -> int:
    """Minutes since midnight for an ``HH:MM`` string."""
    hours, minutes = value.split(":", 1)
    return int(hours) * 60 + int(minutes[:2])


@dataclass
class Clock:
    """Running schedule clock in absolute minutes since the day's midnight.

    The absolute value keeps counting past 24:00; only the formatted times
    wrap, and ``day_offset`` reports how many midnights were crossed.
    """

    minutes: int

    @classmethod
    def at(cls, hour: int, minute: int = 0) -> "Clock":
        return cls(hour * 60 + minute)

    @property
    def day_offset(self) -> int:
        return self.minutes // MINUTES_PER_DAY

    def advance(self, minutes: int) -> None:
        self.minutes += minutes

    def span(self, minutes: int) -> tuple[str, str]:
        """Formatted start/end for an item starting now."""
        return format_clock(self.minutes), format_clock(self.minutes + minutes)


def first_free_minute(
    start: int, length: int, blocked: Sequence[tuple[int, int]], gap: int
) -> int:
    """Earliest minute from ``start`` where ``length`` minutes fit between blocked spans.

    A placement must keep ``gap`` minutes clear on both sides of every
    blocked span; when it would not, it is pushed past the span's end.
    """
    moved = True
    while moved:
        moved = False
        for block_start, block_end in blocked:
            if start < block_end + gap and block_start < start + length + gap:
                start = block_end + gap
                moved = True
    return start


def transit_item(clock: Clock, previous: Experience, current: Experience) -> ItineraryItem | None:
    """Transit item from ``previous`` to ``current``, if both are located."""
    distance = distance_between(previous, current)
    if distance is None:
        return None

    minutes = estimate_transit_minutes(distance)
    start, end = clock.span(minutes)
    return ItineraryItem(
        id=f"transit-{previous.id}-{current.id}",
        kind=ItemKind.transit,
        title=f"Travel to {current.name}",
        start_time=start,
        end_time=end,
        duration_minutes=minutes,
        day_offset=clock.day_offset,
        transit_mode=classify_transit_mode(distance),
        transit_distance_km=round(distance, 1),
    )


def experience_item(clock: Clock, experience: Experience) -> ItineraryItem:
    """Experience item starting at the current clock."""
    minutes = experience_duration(experience)
    start, end = clock.span(minutes)
    return ItineraryItem(
        id=f"exp-{experience.id}",
        kind=ItemKind.experience,
        title=experience.name,
        start_time=start,
        end_time=end,
        duration_minutes=minutes,
        day_offset=clock.day_offset,
        experience_id=experience.id,
        category=experience.category or None,
        location=experience.geo,
        notes=experience.tip,
    )


def generate_day_schedule(
    experiences: list[Experience],
    start_hour: int | None = None,
    *,
    buffer_minutes: int | None = None,
    blocked: Sequence[tuple[int, int]] = (),
) -> list[ItineraryItem]:
    """Lay out an ordered experience list with concrete times.

    For each experience: a transit item from the previous experience when both
    have coordinates, then the experience itself, then a buffer that is not
    emitted as an item. Transit and experience are placed together in the
    first gap that avoids every ``blocked`` span.

    Args:
        experiences: Experiences in visiting order
        start_hour: Hour the day starts (default: settings.day_start_hour)
        buffer_minutes: Gap after each experience (default: settings.activity_buffer_min)
        blocked: Absolute (start, end) minute spans already taken by fixed
            items such as flights and hotel check-ins

    Returns:
        Time-ordered items for the day, never overlapping a blocked span
    """
    settings = get_settings()
    if start_hour is None:
        start_hour = settings.day_start_hour
    if buffer_minutes is None:
        buffer_minutes = settings.activity_buffer_min

    clock = Clock.at(start_hour)
    items: list[ItineraryItem] = []
    previous: Experience | None = None

    for exp in experiences:
        needed = experience_duration(exp)
        if previous is not None and (distance := distance_between(previous, exp)) is not None:
            needed += estimate_transit_minutes(distance)
        clock.minutes = first_free_minute(clock.minutes, needed, blocked, buffer_minutes)

        if previous is not None:
            transit = transit_item(clock, previous, exp)
            if transit is not None:
                items.append(transit)
                clock.advance(transit.duration_minutes)

        item = experience_item(clock, exp)
        items.append(item)
        clock.advance(item.duration_minutes)
        clock.advance(buffer_minutes)
        previous = exp

    return items
