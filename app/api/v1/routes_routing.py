# app/api/v1/routes_routing.py
from fastapi import APIRouter, HTTPException

from app.core.logger import logger
from app.models.routing import RouteRequest, RouteResponse
from app.services.routing_service import InvalidRouteRequest, RoutingService

router = APIRouter(
    prefix="/api",
    tags=["routing"],
)

# Single shared instance (stateless between requests)
routing_service = RoutingService()


@router.post(
    "/route",
    response_model=RouteResponse,
    response_model_exclude_none=True,
    summary="Generate random routes from a start point",
)
async def generate_routes(request: RouteRequest) -> RouteResponse:
    """
    Generate `numRoutes` random routes of roughly `distanceKm`.

    - Without `end`: loops that start and finish at `start`.
    - With `end`: point-to-point routes through random waypoints.
    - Each route is snapped to roads via OSRM, falling back to the
      straight-line candidate when that fails.
    """
    try:
        return await routing_service.generate(request)
    except InvalidRouteRequest as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception:
        logger.exception("Error generating routes")
        raise HTTPException(status_code=500, detail="Failed to generate routes")
