"""Interactive edits: reorder within a day and move between days.

Every edit regenerates the affected days wholesale from their experience
order; items are never patched in place and inputs are never mutated.
"""

from backend.app.models.common import ItemKind
from backend.app.models.duration import Minutes
from backend.app.models.itinerary import ItineraryDay, ItineraryItem
from backend.app.models.trip import Experience
from backend.app.scheduling.distributor import FREE_DAY_NOTE
from backend.app.scheduling.schedule import MINUTES_PER_DAY, generate_day_schedule, parse_clock_string


class ItineraryEditError(ValueError):
    """Raised when an edit addresses a day or item that does not exist."""


def experience_from_item(item: ItineraryItem) -> Experience:
    """Rebuild the experience behind a scheduled experience item."""
    return Experience(
        id=item.experience_id or item.id.removeprefix("exp-"),
        name=item.title,
        category=item.category or "",
        duration=Minutes(value=item.duration_minutes),
        geo=item.location,
        tip=item.notes,
    )


def is_fixed_item(item: ItineraryItem) -> bool:
    """Items that survive regeneration: flights, hotel stays, leg-to-leg travel."""
    if item.kind in (ItemKind.flight, ItemKind.hotel):
        return True
    # Transit between experiences always carries a distance
    return item.kind == ItemKind.transit and item.transit_distance_km is None


def _start_key(item: ItineraryItem) -> int:
    return item.day_offset * MINUTES_PER_DAY + parse_clock_string(item.start_time)


def _occupied_span(item: ItineraryItem) -> tuple[int, int]:
    """Absolute minutes a fixed item occupies, covering its displayed end time."""
    start = _start_key(item)
    shown = parse_clock_string(item.end_time) - parse_clock_string(item.start_time)
    shown %= MINUTES_PER_DAY
    return start, start + max(item.duration_minutes, shown)


def regenerate_day(
    day: ItineraryDay, experiences: list[Experience], start_hour: int | None = None
) -> ItineraryDay:
    """Copy of ``day`` rescheduled for the given experience order.

    Fixed items are kept in place; experiences are laid out in the gaps
    around them and the result is ordered by start time.
    """
    fixed = [item for item in day.items if is_fixed_item(item)]
    scheduled = generate_day_schedule(
        experiences, start_hour, blocked=[_occupied_span(item) for item in fixed]
    )
    items = sorted(fixed + scheduled, key=_start_key)

    notes = day.notes
    if not experiences and not fixed:
        notes = FREE_DAY_NOTE
    elif experiences and notes == FREE_DAY_NOTE:
        notes = None

    return day.model_copy(update={"items": items, "notes": notes})


def reorder_day_items(
    day: ItineraryDay,
    from_index: int,
    to_index: int,
    start_hour: int | None = None,
) -> ItineraryDay:
    """Move one experience within a day and regenerate the whole day.

    Indices address the day's experience items only (transit items are
    derived and get rebuilt).

    Args:
        day: Day to edit
        from_index: Current position of the experience
        to_index: Target position of the experience
        start_hour: Hour the day starts (default: settings.day_start_hour)

    Returns:
        New day with fully regenerated items

    Raises:
        ItineraryEditError: If either index is out of range
    """
    experiences = [experience_from_item(item) for item in day.experience_items()]
    for name, index in (("from_index", from_index), ("to_index", to_index)):
        if not 0 <= index < len(experiences):
            raise ItineraryEditError(
                f"{name} {index} out of range for day {day.day_number} "
                f"with {len(experiences)} experiences"
            )

    moved = experiences.pop(from_index)
    experiences.insert(to_index, moved)
    return regenerate_day(day, experiences, start_hour)


def move_item_between_days(
    days: list[ItineraryDay],
    from_day_index: int,
    to_day_index: int,
    item_id: str,
    start_hour: int | None = None,
) -> list[ItineraryDay]:
    """Move an experience to the end of another day, regenerating both days.

    Args:
        days: Current itinerary days
        from_day_index: Index of the day holding the item
        to_day_index: Index of the receiving day
        item_id: ItineraryItem.id of the experience to move
        start_hour: Hour days start (default: settings.day_start_hour)

    Returns:
        New list of days; unchanged copy if ``item_id`` is not on the source day

    Raises:
        ItineraryEditError: If a day index is out of range or the item is not
            an experience
    """
    for name, index in (("from_day_index", from_day_index), ("to_day_index", to_day_index)):
        if not 0 <= index < len(days):
            raise ItineraryEditError(f"{name} {index} out of range for {len(days)} days")

    source = days[from_day_index]
    item = next((i for i in source.items if i.id == item_id), None)
    if item is None:
        return list(days)
    if item.kind != ItemKind.experience:
        raise ItineraryEditError(f"Only experience items can be moved, got {item.kind.value}")

    remaining = [experience_from_item(i) for i in source.experience_items() if i.id != item_id]
    moved = experience_from_item(item)

    updated = list(days)
    if from_day_index == to_day_index:
        updated[from_day_index] = regenerate_day(source, remaining + [moved], start_hour)
        return updated

    target = days[to_day_index]
    target_experiences = [experience_from_item(i) for i in target.experience_items()]
    updated[from_day_index] = regenerate_day(source, remaining, start_hour)
    updated[to_day_index] = regenerate_day(target, target_experiences + [moved], start_hour)
    return updated
