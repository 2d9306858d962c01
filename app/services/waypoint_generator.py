# app/services/waypoint_generator.py
import math
import random
from typing import List

from app.models.routing import Coordinate

# Max jitter (degrees, per axis) added to point-to-point waypoints, ~1 km wide
POINT_TO_POINT_OFFSET_DEG = 0.01

# Loops use few waypoints so that segments stay long
MIN_LOOP_WAYPOINTS = 3
MAX_LOOP_WAYPOINTS = 5

# Spread factor applied to the radius of the circle with the target circumference
LOOP_RADIUS_FACTOR = 1.5
LOOP_ANGLE_JITTER_RAD = 0.3
LOOP_RADIUS_JITTER = (0.8, 1.2)

KM_PER_DEGREE_LAT = 111.0


def generate_random_waypoints(
    start: Coordinate,
    end: Coordinate,
    count: int = 2,
) -> List[Coordinate]:
    """
    Scatter `count` waypoints inside the bounding box spanned by start and end.

    Latitude and longitude are drawn independently, then nudged by a small
    random offset so the result is never a straight interpolation.
    """
    waypoints: List[Coordinate] = []

    for _ in range(count):
        lat = start.lat + random.random() * (end.lat - start.lat)
        lon = start.lon + random.random() * (end.lon - start.lon)

        waypoints.append(
            Coordinate(
                lat=lat + (random.random() - 0.5) * POINT_TO_POINT_OFFSET_DEG,
                lon=lon + (random.random() - 0.5) * POINT_TO_POINT_OFFSET_DEG,
            )
        )

    return waypoints


def loop_waypoint_count(variation_index: int) -> int:
    return max(MIN_LOOP_WAYPOINTS, min(MAX_LOOP_WAYPOINTS, MIN_LOOP_WAYPOINTS + variation_index))


def generate_loop_waypoints(
    start: Coordinate,
    target_distance_km: float,
    variation_index: int = 0,
) -> List[Coordinate]:
    """
    Place waypoints roughly on a circle around `start`.

    The circle's circumference is the target distance, inflated by
    LOOP_RADIUS_FACTOR since a polygon through a few of its points is
    shorter than the circle. Each variation index rotates the pattern by
    120 degrees so routes from the same start fan out in different
    directions. Angles and radii get a little jitter to avoid regular
    polygons.
    """
    num_waypoints = loop_waypoint_count(variation_index)
    base_radius = target_distance_km / (2 * math.pi) * LOOP_RADIUS_FACTOR

    # Local flat-earth conversion, fine at city scale
    lat_per_km = 1 / KM_PER_DEGREE_LAT
    lon_per_km = 1 / (KM_PER_DEGREE_LAT * math.cos(math.radians(start.lat)))

    primary_direction = variation_index * (2 * math.pi) / 3

    waypoints: List[Coordinate] = []
    for i in range(num_waypoints):
        base_angle = (i / num_waypoints) * 2 * math.pi + primary_direction
        angle = base_angle + (random.random() - 0.5) * LOOP_ANGLE_JITTER_RAD
        radius = base_radius * random.uniform(*LOOP_RADIUS_JITTER)

        # sin goes to latitude and cos to longitude; keep this pairing, the
        # route orientation clients see depends on it
        waypoints.append(
            Coordinate(
                lat=start.lat + math.sin(angle) * radius * lat_per_km,
                lon=start.lon + math.cos(angle) * radius * lon_per_km,
            )
        )

    return waypoints
