# app/services/geocoder.py
from typing import Optional

import httpx

from app.core.config import settings
from app.core.logger import logger
from app.models.routing import Coordinate, GeocodeResult


class NominatimGeocoder:
    """
    Free-text address lookup against a Nominatim search endpoint.

    Used by the map frontend to turn typed addresses into start/end
    coordinates; route generation itself never geocodes.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or settings.NOMINATIM_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.GEOCODER_TIMEOUT_S
        self.transport = transport

    async def geocode(self, query: str) -> Optional[GeocodeResult]:
        """
        Return the best match for `query`, or None when nothing matches.

        httpx.HTTPError is propagated to the caller.
        """
        params = {"q": query, "format": "json", "limit": 1}
        headers = {"User-Agent": settings.GEOCODER_USER_AGENT}

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.get(f"{self.base_url}/search", params=params, headers=headers)
            response.raise_for_status()
            results = response.json()

        if not results:
            logger.info(f"No geocoding match for '{query}'")
            return None

        best = results[0]
        location = Coordinate(lat=float(best["lat"]), lon=float(best["lon"]))
        logger.info(f"Geocoded '{query}' -> ({location.lat:.6f}, {location.lon:.6f})")

        return GeocodeResult(
            query=query,
            location=location,
            display_name=best.get("display_name"),
        )
