"""Duration resolver: heterogeneous provider durations to minutes."""

import math
import re
from typing import Any

from backend.app.config import get_settings
from backend.app.models.duration import FreeText, IsoDuration, Minutes
from backend.app.models.trip import Experience

# Default durations per experience category (minutes)
DEFAULT_DURATIONS: dict[str, int] = {
    "beach": 180,
    "museum": 120,
    "restaurant": 90,
    "tour": 240,
    "hiking": 300,
    "nightlife": 180,
    "shopping": 120,
    "landmark": 60,
    "park": 120,
    "show": 150,
    "spa": 180,
    "water-sports": 180,
}

# Provider category tags that map onto a canonical key above
CATEGORY_ALIASES: dict[str, str] = {
    "beaches": "beach",
    "museums": "museum",
    "restaurants": "restaurant",
    "dining": "restaurant",
    "tours": "tour",
    "food_tours": "tour",
    "day_trips": "tour",
    "hike": "hiking",
    "parks": "park",
    "landmarks": "landmark",
    "shows": "show",
    "wellness": "spa",
    "water_sports": "water-sports",
    "watersports": "water-sports",
}

_ISO_PATTERN = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?", re.IGNORECASE)
_TEXT_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*(h|m)", re.IGNORECASE)


def normalize_category(category: str | None) -> str:
    """Lowercase a category tag and fold provider aliases onto canonical keys."""
    key = (category or "").strip().lower()
    return CATEGORY_ALIASES.get(key, key)


def category_default_minutes(category: str | None) -> int:
    """Default duration for a category, falling back to the global default."""
    return DEFAULT_DURATIONS.get(normalize_category(category), get_settings().default_duration_min)


def _parse_iso(text: str) -> int | None:
    match = _ISO_PATTERN.search(text)
    if not match or (match.group(1) is None and match.group(2) is None):
        return None
    hours = int(match.group(1) or 0)
    minutes = int(match.group(2) or 0)
    return hours * 60 + minutes


def _parse_free_text(text: str) -> int | None:
    total = 0.0
    matched = False
    for match in _TEXT_PATTERN.finditer(text):
        matched = True
        value = float(match.group(1))
        total += value * 60 if match.group(2).lower() == "h" else value
    if not matched or total <= 0:
        return None
    return int(round(total))


def resolve_duration(value: Any, category: str | None = None) -> int:
    """Resolve a duration of unknown shape to whole minutes.

    Resolution order:
    1. Numbers (or Minutes) are returned as-is, clamped at 0
    2. ISO-8601 ``PT#H#M``
    3. Free text made of ``<number> <unit>`` tokens (hours/minutes), summed
    4. Category default table, then the global default (120)

    Never raises; a value with no usable signal yields the default.

    Args:
        value: int/float, string, Duration union member, or None
        category: Experience category used for the fallback table

    Returns:
        Non-negative duration in minutes
    """
    if isinstance(value, Minutes):
        return value.value
    if isinstance(value, IsoDuration | FreeText):
        value = value.value

    if isinstance(value, int | float) and not isinstance(value, bool):
        if math.isfinite(value):
            return max(0, int(value))

    if isinstance(value, str) and value.strip():
        parsed = _parse_iso(value)
        if parsed is None:
            parsed = _parse_free_text(value)
        if parsed is not None:
            return parsed

    return category_default_minutes(category)


def experience_duration(experience: Experience) -> int:
    """Duration in minutes for an experience."""
    return resolve_duration(experience.duration, experience.category)
