# app/services/route_generator.py
import math
from typing import List, Optional

from app.core.logger import logger
from app.models.routing import Coordinate, GeneratedRoute
from app.services import waypoint_generator
from app.services.geo import calculate_distance, calculate_route_distance

# Rough path length added by every detour waypoint on point-to-point routes
KM_PER_EXTRA_WAYPOINT = 2.0


def point_to_point_waypoint_count(start: Coordinate, end: Coordinate, distance_km: float) -> int:
    """
    Number of detour waypoints needed to stretch start -> end towards distance_km.
    Always at least one.
    """
    extra_distance = distance_km - calculate_distance(start, end)
    return max(1, math.floor(extra_distance / KM_PER_EXTRA_WAYPOINT))


def generate_routes(
    start: Coordinate,
    end: Optional[Coordinate] = None,
    num_routes: int = 3,
    distance_km: float = 5.0,
) -> List[GeneratedRoute]:
    """
    Build `num_routes` straight-line candidate routes.

    Without `end` every route is a loop around `start`; the route index is
    used as variation index so the loops point in different directions.
    With `end` each route wanders through random waypoints between the two
    points. The straight-line distance only approximates `distance_km`.
    """
    is_loop = end is None
    routes: List[GeneratedRoute] = []

    for i in range(num_routes):
        if is_loop:
            waypoints = waypoint_generator.generate_loop_waypoints(start, distance_km, i)
            points = [start, *waypoints, start]
        else:
            count = point_to_point_waypoint_count(start, end, distance_km)
            waypoints = waypoint_generator.generate_random_waypoints(start, end, count)
            points = [start, *waypoints, end]

        routes.append(
            GeneratedRoute(
                id=i,
                points=points,
                waypoints=waypoints,
                is_loop=is_loop,
                distance=calculate_route_distance(points),
            )
        )

    logger.debug(
        f"Generated {len(routes)} {'loop' if is_loop else 'point-to-point'} "
        f"candidates targeting {distance_km:.2f} km"
    )
    return routes
