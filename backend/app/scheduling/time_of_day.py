"""Keyword heuristics for when in the day an experience fits best."""

from backend.app.models.common import TimeOfDay
from backend.app.models.trip import Experience
from backend.app.scheduling.duration import normalize_category

EVENING_CATEGORIES = {"nightlife"}
EVENING_KEYWORDS = ("dinner", "sunset")
MORNING_CATEGORIES = {"beach"}
MORNING_KEYWORDS = ("sunrise", "breakfast")
AFTERNOON_CATEGORIES = {"museum", "tour"}


def classify_time_of_day(experience: Experience) -> TimeOfDay:
    """Bucket an experience by category and name keywords.

    Precedence is evening, morning, afternoon, then anytime.
    """
    category = normalize_category(experience.category)
    name = experience.name.lower()

    if category in EVENING_CATEGORIES or any(k in name for k in EVENING_KEYWORDS):
        return TimeOfDay.evening
    if category in MORNING_CATEGORIES or any(k in name for k in MORNING_KEYWORDS):
        return TimeOfDay.morning
    if category in AFTERNOON_CATEGORIES:
        return TimeOfDay.afternoon
    return TimeOfDay.anytime


def categorize_by_time_of_day(experiences: list[Experience]) -> dict[TimeOfDay, list[Experience]]:
    """Split experiences into time-of-day buckets, keeping input order."""
    buckets: dict[TimeOfDay, list[Experience]] = {slot: [] for slot in TimeOfDay}
    for exp in experiences:
        buckets[classify_time_of_day(exp)].append(exp)
    return buckets


def day_order_rank(experience: Experience) -> int:
    """Sort key placing beach/sunrise first and nightlife/dinner last.

    The late markers win when an experience carries both.
    """
    category = normalize_category(experience.category)
    name = experience.name.lower()

    if category == "nightlife" or "dinner" in name:
        return 2
    if category == "beach" or "sunrise" in name:
        return 0
    return 1
