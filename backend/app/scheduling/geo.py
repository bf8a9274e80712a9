"""Distance and transit-time estimation between located experiences."""

import math

from backend.app.config import get_settings
from backend.app.models.common import Geo, TransitMode
from backend.app.models.trip import Experience

EARTH_RADIUS_KM = 6371.0


def haversine_km(a: Geo, b: Geo) -> float:
    """Great-circle distance between two coordinates in kilometers."""
    d_lat = math.radians(b.lat - a.lat)
    d_lon = math.radians(b.lon - a.lon)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.lat)) * math.cos(math.radians(b.lat)) * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def estimate_transit_minutes(distance_km: float) -> int:
    """Estimated transit time for a distance, as a monotonic step function.

    <1 km: 10, <5 km: 20, <15 km: 35, <30 km: 50,
    otherwise 60 plus 1.5 minutes per km beyond 30 (rounded down).
    """
    if distance_km < 1:
        return 10
    if distance_km < 5:
        return 20
    if distance_km < 15:
        return 35
    if distance_km < 30:
        return 50
    return 60 + math.floor((distance_km - 30) * 1.5)


def classify_transit_mode(distance_km: float, walk_threshold_km: float | None = None) -> TransitMode:
    """Walk for short hops, drive otherwise."""
    if walk_threshold_km is None:
        walk_threshold_km = get_settings().walk_threshold_km
    return TransitMode.walk if distance_km < walk_threshold_km else TransitMode.drive


def distance_between(a: Experience, b: Experience) -> float | None:
    """Distance between two experiences, or None if either lacks coordinates."""
    if a.geo is None or b.geo is None:
        return None
    return haversine_km(a.geo, b.geo)
