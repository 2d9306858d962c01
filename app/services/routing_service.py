# app/services/routing_service.py

from time import perf_counter

from app.core.logger import logger
from app.models.routing import Coordinate, RouteRequest, RouteResponse
from app.services.osrm_client import OSRMClient
from app.services.road_router import get_routed_paths
from app.services.route_generator import generate_routes


class InvalidRouteRequest(ValueError):
    """The request cannot be served (client error)."""


class RoutingService:
    """
    High-level route generation service:
    - validates the request
    - synthesizes straight-line candidate routes
    - snaps every candidate to the road network through OSRM
    """

    def __init__(self, osrm_client: OSRMClient | None = None) -> None:
        self.osrm_client = osrm_client or OSRMClient()
        logger.info(f"RoutingService initialised (OSRM at {self.osrm_client.base_url}).")

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    @staticmethod
    def validate_request(request: RouteRequest) -> Coordinate:
        """
        Return the start coordinate, or reject requests without a usable one.

        A missing latitude or longitude, or one of exactly 0, is treated as missing.
        """
        start = request.start
        if start is None or not start.lat or not start.lon:
            raise InvalidRouteRequest("Start location with lat/lon required")
        return Coordinate(lat=start.lat, lon=start.lon)

    async def generate(self, request: RouteRequest) -> RouteResponse:
        """
        Main entry point for the /api/route endpoint.

        1. Validate the start coordinate.
        2. Generate straight-line candidates (loop or point-to-point).
        3. Replace each candidate's geometry with a road route, with
           per-route fallback to the straight line.
        """
        start = self.validate_request(request)

        t0 = perf_counter()
        end = request.end

        logger.info(
            f"Received route request: start=({start.lat:.6f}, {start.lon:.6f}), "
            f"end={'loop' if end is None else f'({end.lat:.6f}, {end.lon:.6f})'}, "
            f"mode={request.mode}, routes={request.num_routes}, "
            f"distance={request.distance_km:.2f} km"
        )

        # 1) Straight-line candidates
        routes = generate_routes(start, end, request.num_routes, request.distance_km)
        t_gen = perf_counter()
        logger.info(f"Generated {len(routes)} candidates in {(t_gen - t0) * 1000.0:.2f} ms")

        # 2) Road geometry
        routed = await get_routed_paths(routes, request.mode, client=self.osrm_client)
        t1 = perf_counter()

        num_routed = sum(1 for r in routed if r.steps is not None)
        logger.info(
            f"Road routing: {num_routed}/{len(routed)} routes snapped to roads "
            f"in {(t1 - t_gen) * 1000.0:.2f} ms"
        )
        logger.info(f"Total route generation time: {(t1 - t0) * 1000.0:.2f} ms")

        return RouteResponse(routes=routed, mode=request.mode)
