# app/api/v1/routes_geocoding.py
import httpx
from fastapi import APIRouter, HTTPException, Query

from app.core.logger import logger
from app.models.routing import GeocodeResult
from app.services.geocoder import NominatimGeocoder

router = APIRouter(
    prefix="/api",
    tags=["geocoding"],
)

geocoder = NominatimGeocoder()


@router.get(
    "/geocode",
    response_model=GeocodeResult,
    summary="Look up coordinates for an address",
)
async def geocode(q: str = Query(..., min_length=1, description="Free-text address")) -> GeocodeResult:
    try:
        result = await geocoder.geocode(q)
    except httpx.HTTPError as exc:
        logger.warning(f"Geocoder unavailable for '{q}': {exc}")
        raise HTTPException(status_code=502, detail="Geocoding service unavailable")

    if result is None:
        raise HTTPException(status_code=404, detail="Address not found")
    return result
