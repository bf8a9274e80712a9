"""Verification functions for generated itinerary days."""

from backend.app.config import get_settings
from backend.app.models.common import ItemKind
from backend.app.models.itinerary import ItineraryDay, ItineraryItem
from backend.app.models.violations import Violation, ViolationKind, ViolationSeverity
from backend.app.scheduling.schedule import MINUTES_PER_DAY, parse_clock_string

SCHEDULED_KINDS = (ItemKind.experience, ItemKind.transit)


def item_end_minute(item: ItineraryItem) -> int:
    """Absolute end of an item in minutes since the day's midnight."""
    start = item.day_offset * MINUTES_PER_DAY + parse_clock_string(item.start_time)
    return start + item.duration_minutes


def verify_day_overrun(days: list[ItineraryDay]) -> list[Violation]:
    """Flag days whose schedule runs past midnight.

    The day-schedule generator keeps counting past 24:00 instead of rolling
    items onto the next calendar day; displayed times wrap. Those days are
    reported here so the UI can ask the user to move something. Only
    experiences and transit are checked; flights and hotel stays keep their
    booked times.

    Args:
        days: Generated itinerary days

    Returns:
        One ADVISORY violation per overrunning day
    """
    violations: list[Violation] = []

    for day in days:
        scheduled = [item for item in day.items if item.kind in SCHEDULED_KINDS]
        overrun = [item for item in scheduled if item_end_minute(item) > MINUTES_PER_DAY]
        if not overrun:
            continue

        last_end = max(item_end_minute(item) for item in overrun)
        violations.append(
            Violation(
                kind=ViolationKind.TIMING,
                code="DAY_OVERRUN",
                message="This day's schedule runs past midnight; displayed times wrap around.",
                severity=ViolationSeverity.ADVISORY,
                affected_item_ids=[item.id for item in overrun],
                details={
                    "date": day.date.isoformat(),
                    "day_number": day.day_number,
                    "overrun_minutes": last_end - MINUTES_PER_DAY,
                },
            )
        )

    return violations


def verify_long_transit(days: list[ItineraryDay], threshold_min: int | None = None) -> list[Violation]:
    """Flag transit legs longer than the configured threshold.

    Args:
        days: Generated itinerary days
        threshold_min: Threshold in minutes (default: settings.long_transit_min)

    Returns:
        Single ADVISORY violation listing every long transit item, or []
    """
    if threshold_min is None:
        threshold_min = get_settings().long_transit_min

    long_items = [
        item
        for day in days
        for item in day.items
        if item.kind == ItemKind.transit and item.duration_minutes > threshold_min
    ]
    if not long_items:
        return []

    return [
        Violation(
            kind=ViolationKind.FEASIBILITY,
            code="LONG_TRANSIT",
            message="Some transit segments are very long, which may be tiring.",
            severity=ViolationSeverity.ADVISORY,
            affected_item_ids=[item.id for item in long_items],
            details={
                "threshold_minutes": threshold_min,
                "num_long_segments": len(long_items),
            },
        )
    ]


def verify_placeholder_times(days: list[ItineraryDay]) -> list[Violation]:
    """Flag flight and transition segments scheduled at placeholder times."""
    estimated = [item for day in days for item in day.items if item.estimated]
    if not estimated:
        return []

    return [
        Violation(
            kind=ViolationKind.TIMING,
            code="PLACEHOLDER_TIMES",
            message="Some travel segments use estimated times because booking details are missing.",
            severity=ViolationSeverity.ADVISORY,
            affected_item_ids=[item.id for item in estimated],
            details={"num_estimated_segments": len(estimated)},
        )
    ]


def run_verifiers(days: list[ItineraryDay]) -> list[Violation]:
    """Run all schedule checks and aggregate violations.

    Args:
        days: Generated itinerary days

    Returns:
        Aggregated list of all violations found
    """
    if not days:
        return []

    violations: list[Violation] = []

    violations.extend(verify_day_overrun(days))
    violations.extend(verify_long_transit(days))
    violations.extend(verify_placeholder_times(days))

    return violations
