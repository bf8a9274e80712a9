"""Greedy distribution of a leg's experiences across its content days."""

import logging
import math
from datetime import date, timedelta

from backend.app.config import get_settings
from backend.app.models.common import TimeOfDay
from backend.app.models.itinerary import ItineraryDay
from backend.app.models.trip import Experience
from backend.app.scheduling.grouping import can_group, group_by_proximity
from backend.app.scheduling.schedule import generate_day_schedule
from backend.app.scheduling.time_of_day import categorize_by_time_of_day, day_order_rank

logger = logging.getLogger(__name__)

FREE_DAY_NOTE = "Free day - explore on your own!"

# Slots a day may fill before proximity is required
BOOTSTRAP_SLOTS = 2


def per_day_cap(total: int, num_days: int, max_per_day: int | None = None) -> int:
    """Maximum experiences per day: one above the even share, capped."""
    if max_per_day is None:
        max_per_day = get_settings().max_experiences_per_day
    target = math.ceil(total / num_days)
    return min(max_per_day, target + 1)


def distribute_experiences(
    experiences: list[Experience],
    num_days: int,
    *,
    max_per_day: int | None = None,
    radius_km: float | None = None,
) -> list[list[Experience]]:
    """Spread experiences across days, one ordered list per day.

    Per day: seed with one unused morning experience, fill with anytime then
    afternoon experiences (after the first two slots only those near an
    experience already placed that day), then add one evening experience if
    room remains. Each day is stably sorted so beach/sunrise items come first
    and nightlife/dinner items last. Experiences still unused once every day is
    filled go one by one to the day with the fewest experiences (earliest day
    wins ties), appended at the end of that day.

    Args:
        experiences: Experiences of one leg, in selection order
        num_days: Content days available for the leg
        max_per_day: Hard cap per day (default: settings.max_experiences_per_day)
        radius_km: Proximity radius (default: settings.proximity_radius_km)

    Returns:
        ``num_days`` lists, or an empty list for zero experiences or zero days
    """
    if not experiences or num_days <= 0:
        return []

    cap = per_day_cap(len(experiences), num_days, max_per_day)
    buckets = categorize_by_time_of_day(experiences)
    fill_pool = buckets[TimeOfDay.anytime] + buckets[TimeOfDay.afternoon]

    group_of: dict[str, int] = {}
    for index, group in enumerate(group_by_proximity(experiences, radius_km)):
        for exp in group:
            group_of[exp.id] = index

    def is_near(candidate: Experience, placed: list[Experience]) -> bool:
        return any(
            group_of[p.id] == group_of[candidate.id] or can_group(p, candidate, radius_km)
            for p in placed
        )

    used: set[str] = set()
    days: list[list[Experience]] = []

    for _ in range(num_days):
        day: list[Experience] = []

        morning = next((e for e in buckets[TimeOfDay.morning] if e.id not in used), None)
        if morning is not None and len(day) < cap:
            day.append(morning)
            used.add(morning.id)

        for exp in fill_pool:
            if exp.id in used:
                continue
            if len(day) >= cap:
                break
            if len(day) < BOOTSTRAP_SLOTS or is_near(exp, day):
                day.append(exp)
                used.add(exp.id)

        evening = next((e for e in buckets[TimeOfDay.evening] if e.id not in used), None)
        if evening is not None and len(day) < cap:
            day.append(evening)
            used.add(evening.id)

        day.sort(key=day_order_rank)
        days.append(day)

    leftovers = [e for e in experiences if e.id not in used]
    if leftovers:
        logger.debug("Placing %d leftover experiences on least-loaded days", len(leftovers))
    for exp in leftovers:
        lightest = min(range(len(days)), key=lambda i: len(days[i]))
        days[lightest].append(exp)

    return days


def build_leg_days(
    experiences: list[Experience],
    num_days: int,
    start_date: date,
    start_hour: int | None = None,
) -> list[ItineraryDay]:
    """Distribute a leg's experiences and schedule each content day.

    Day numbers are local to the leg (1-based); the assembler renumbers them.
    """
    distribution = distribute_experiences(experiences, num_days)

    days: list[ItineraryDay] = []
    for index, day_experiences in enumerate(distribution):
        days.append(
            ItineraryDay(
                date=start_date + timedelta(days=index),
                day_number=index + 1,
                items=generate_day_schedule(day_experiences, start_hour),
                notes=None if day_experiences else FREE_DAY_NOTE,
            )
        )
    return days
