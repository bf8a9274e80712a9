"""Proximity grouping of experiences."""

from backend.app.config import get_settings
from backend.app.models.trip import Experience
from backend.app.scheduling.geo import distance_between


def can_group(a: Experience, b: Experience, radius_km: float | None = None) -> bool:
    """Whether two experiences are close enough to share a day.

    Experiences without coordinates never group with anything.
    """
    if radius_km is None:
        radius_km = get_settings().proximity_radius_km
    distance = distance_between(a, b)
    return distance is not None and distance < radius_km


def group_by_proximity(
    experiences: list[Experience], radius_km: float | None = None
) -> list[list[Experience]]:
    """Partition experiences into radius-from-seed groups.

    Greedy single pass in input order: each unvisited experience seeds a
    group and pulls in every other unvisited experience within ``radius_km``
    of the seed. Membership is measured against the seed only, so this is not
    connected-component clustering and the result depends on input order.

    Args:
        experiences: Experiences in input order
        radius_km: Grouping radius (default: settings.proximity_radius_km)

    Returns:
        Groups in seed order; every experience appears in exactly one group
    """
    groups: list[list[Experience]] = []
    visited: set[str] = set()

    for seed in experiences:
        if seed.id in visited:
            continue
        visited.add(seed.id)
        group = [seed]

        for other in experiences:
            if other.id in visited:
                continue
            if can_group(seed, other, radius_km):
                group.append(other)
                visited.add(other.id)

        groups.append(group)

    return groups
