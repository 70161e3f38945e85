"""
core/geo.py – great-circle distance and walk-time estimate.
"""
import math
from typing import Optional

from ..models import Coordinate

EARTH_RADIUS_M = 6_371_000
WALK_SPEED_M_PER_MIN = 80.0
MAX_WALK_MINUTES = 15


def haversine_meters(a: Coordinate, b: Coordinate) -> float:
    d_lat = math.radians(b.lat - a.lat)
    d_lng = math.radians(b.lng - a.lng)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.lat)) * math.cos(math.radians(b.lat)) * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def estimate_walk_minutes(
    origin: Coordinate,
    dest: Optional[Coordinate],
    speed_m_per_min: float = WALK_SPEED_M_PER_MIN,
    max_minutes: int = MAX_WALK_MINUTES,
) -> Optional[int]:
    """Walking minutes rounded half up, clamped to [1, max_minutes]. None without a destination."""
    if dest is None:
        return None
    minutes = math.floor(haversine_meters(origin, dest) / speed_m_per_min + 0.5)
    return min(max(1, minutes), max_minutes)
