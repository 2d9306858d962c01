# app/services/road_router.py
import asyncio
from typing import List, Optional

import httpx

from app.core.config import settings
from app.core.logger import logger
from app.models.routing import GeneratedRoute, TransportMode
from app.services.osrm_client import OSRMClient, OSRMError, profile_for_mode


async def get_routed_paths(
    routes: List[GeneratedRoute],
    mode: TransportMode,
    client: Optional[OSRMClient] = None,
    max_concurrency: Optional[int] = None,
) -> List[GeneratedRoute]:
    """
    Replace the straight-line geometry of each route with a road path.

    One OSRM call per route, run concurrently over a shared HTTP session but
    never more than `max_concurrency` at once. Results come back in input
    order. A route whose call fails for any reason is returned unchanged
    (straight line, no duration or steps) without affecting the others.
    """
    client = client or OSRMClient()
    profile = profile_for_mode(mode)
    semaphore = asyncio.Semaphore(max_concurrency or settings.OSRM_MAX_CONCURRENCY)

    async with client.session() as session:

        async def route_one(route: GeneratedRoute) -> GeneratedRoute:
            async with semaphore:
                return await _route_with_fallback(client, session, route, profile)

        return list(await asyncio.gather(*(route_one(route) for route in routes)))


async def _route_with_fallback(
    client: OSRMClient,
    session: Optional[httpx.AsyncClient],
    route: GeneratedRoute,
    profile: str,
) -> GeneratedRoute:
    try:
        routed = await client.route(route.points, profile, session=session)
    except OSRMError as exc:
        logger.warning(f"OSRM routing failed for route {route.id}, using straight line: {exc}")
        return route
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning(
            f"Error calling OSRM for route {route.id}, using straight line: "
            f"{type(exc).__name__}: {exc}"
        )
        return route
    except Exception as exc:
        # Any other per-route failure still only degrades this route
        logger.warning(
            f"Unexpected error routing route {route.id}, using straight line: "
            f"{type(exc).__name__}: {exc}"
        )
        return route

    return route.model_copy(
        update={
            "points": routed.points,
            "distance": routed.distance_km,
            "duration": routed.duration_min,
            "steps": routed.steps,
        }
    )
