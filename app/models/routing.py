# app/models/routing.py

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.core.config import settings

TransportMode = Literal["walk", "bike", "car"]


class Coordinate(BaseModel):
    """
    Simple latitude/longitude coordinate, in degrees.
    """
    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float


class StartLocation(BaseModel):
    """
    Start point as sent by the client.

    lat/lon may be missing here; the routing service rejects such a start
    with a 400 before turning it into a Coordinate.
    """
    lat: Optional[float] = None
    lon: Optional[float] = None


class RouteRequest(BaseModel):
    """
    Request body for the /api/route endpoint.

    Without an `end` coordinate the generated routes are loops that come
    back to `start`. `start` is optional at the schema level so that a
    missing start can be reported with a proper 400 message.
    """
    model_config = ConfigDict(populate_by_name=True)

    start: Optional[StartLocation] = None
    end: Optional[Coordinate] = None
    mode: TransportMode = "walk"
    num_routes: int = Field(
        default=settings.DEFAULT_NUM_ROUTES,
        alias="numRoutes",
        ge=1,
        le=settings.MAX_NUM_ROUTES,
    )
    distance_km: float = Field(
        default=settings.DEFAULT_DISTANCE_KM,
        alias="distanceKm",
        gt=0,
        le=settings.MAX_DISTANCE_KM,
    )


class RouteStep(BaseModel):
    """
    One turn instruction as reported by the road router.

    distance is in metres, duration in seconds.
    """
    model_config = ConfigDict(frozen=True)

    instruction: str
    distance: float
    duration: float


class GeneratedRoute(BaseModel):
    """
    A single candidate route.

    `points` starts out as the straight-line sequence
    start -> waypoints -> end (or back to start for loops) and is replaced
    by road geometry when routing succeeds. `waypoints` keeps the
    synthesized intermediate points either way.

    distance is in kilometres, duration in minutes. `duration` and `steps`
    are only set on routes that went through the road router.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    points: List[Coordinate]
    waypoints: List[Coordinate]
    is_loop: bool = Field(alias="isLoop")
    distance: float
    duration: Optional[float] = None
    steps: Optional[List[RouteStep]] = None


class RouteResponse(BaseModel):
    """
    Response for the /api/route endpoint.
    """
    routes: List[GeneratedRoute]
    mode: TransportMode


class RoutedPath(BaseModel):
    """
    Normalised road-router result for one route.
    """
    points: List[Coordinate]
    distance_km: float
    duration_min: float
    steps: List[RouteStep]


class GeocodeResult(BaseModel):
    """
    Best match for a free-text address search.
    """
    model_config = ConfigDict(populate_by_name=True)

    query: str
    location: Coordinate
    display_name: Optional[str] = Field(default=None, alias="displayName")
