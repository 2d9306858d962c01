# app/services/geo.py
import math
from typing import Sequence

from app.models.routing import Coordinate

EARTH_RADIUS_KM = 6371.0


def calculate_distance(a: Coordinate, b: Coordinate) -> float:
    """
    Compute great-circle distance between two points (lat/lon in degrees), in kilometres.
    """
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlat = math.radians(b.lat - a.lat)
    dlon = math.radians(b.lon - a.lon)

    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def calculate_route_distance(points: Sequence[Coordinate]) -> float:
    """
    Total length of a polyline in kilometres (sum of its segments).
    """
    return sum(calculate_distance(a, b) for a, b in zip(points[:-1], points[1:]))
