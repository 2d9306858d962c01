# app/services/osrm_client.py
from typing import Any, Dict, List, Optional, Sequence

import httpx

from app.core.config import settings
from app.models.routing import Coordinate, RoutedPath, RouteStep, TransportMode

# Transport mode -> OSRM profile name
OSRM_PROFILES: Dict[str, str] = {
    "car": "driving",
    "bike": "cycling",
}
DEFAULT_PROFILE = "foot"


class OSRMError(Exception):
    """Raised when OSRM answers with an error code or an unusable payload."""


def profile_for_mode(mode: TransportMode) -> str:
    return OSRM_PROFILES.get(mode, DEFAULT_PROFILE)


def format_coordinates(points: Sequence[Coordinate]) -> str:
    """Convert coordinates to the OSRM path format 'lon,lat;lon,lat;...'."""
    return ";".join(f"{p.lon},{p.lat}" for p in points)


class OSRMClient:
    """
    Thin async client for the OSRM /route/v1 service.

    Only talks HTTP and normalises the answer into a RoutedPath; what to do
    when routing fails is up to the caller.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or settings.OSRM_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.OSRM_TIMEOUT_S
        # Injected in tests to avoid real network calls
        self.transport = transport

    def session(self) -> httpx.AsyncClient:
        """
        HTTP client to share across the calls of one batch.

        Use as `async with osrm.session() as session: ...`.
        """
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    async def route(
        self,
        points: Sequence[Coordinate],
        profile: str,
        session: Optional[httpx.AsyncClient] = None,
    ) -> RoutedPath:
        """
        Request the full road geometry and turn steps through `points`.

        Reuses `session` when given, otherwise opens a one-off client.
        Raises OSRMError for non-"Ok" answers or malformed payloads and lets
        httpx errors (connection errors, timeouts, invalid URLs) propagate.
        """
        if len(points) < 2:
            raise ValueError("At least two coordinates are required to compute a route.")

        url = f"{self.base_url}/route/v1/{profile}/{format_coordinates(points)}"
        params = {
            "overview": "full",
            "geometries": "geojson",
            "steps": "true",
        }

        if session is None:
            async with self.session() as client:
                response = await client.get(url, params=params)
        else:
            response = await session.get(url, params=params)

        try:
            data = response.json()
        except ValueError as exc:
            raise OSRMError(f"OSRM returned non-JSON response (HTTP {response.status_code})") from exc

        return self.parse_route(data)

    @staticmethod
    def parse_route(data: Any) -> RoutedPath:
        """
        Normalise an OSRM route response into a RoutedPath.
        """
        if not isinstance(data, dict):
            raise OSRMError("Unexpected OSRM payload")
        if data.get("code") != "Ok":
            raise OSRMError(f"OSRM error {data.get('code')}: {data.get('message', 'Unknown error')}")

        routes = data.get("routes") or []
        if not routes:
            raise OSRMError("OSRM returned no routes")

        route = routes[0]
        try:
            # GeoJSON coordinates are [lon, lat]
            points = [
                Coordinate(lat=coord[1], lon=coord[0])
                for coord in route["geometry"]["coordinates"]
            ]
            steps = _flatten_steps(route.get("legs") or [])
            return RoutedPath(
                points=points,
                distance_km=float(route["distance"]) / 1000.0,
                duration_min=float(route["duration"]) / 60.0,
                steps=steps,
            )
        except (AttributeError, KeyError, IndexError, TypeError, ValueError) as exc:
            raise OSRMError(f"Malformed OSRM route payload: {exc!r}") from exc


def _flatten_steps(legs: List[Dict[str, Any]]) -> List[RouteStep]:
    steps: List[RouteStep] = []
    for leg in legs:
        for step in leg.get("steps") or []:
            instruction = (step.get("maneuver") or {}).get("instruction")
            if not instruction:
                instruction = f"Continue on {step.get('name') or 'road'}"
            steps.append(
                RouteStep(
                    instruction=instruction,
                    distance=step["distance"],
                    duration=step["duration"],
                )
            )
    return steps
