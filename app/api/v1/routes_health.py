# app/api/v1/routes_health.py
from fastapi import APIRouter
from app.core.config import settings

router = APIRouter(
    prefix="/health",
    tags=["health"],
)


@router.get("/", summary="Health check")
@router.get("", include_in_schema=False)
async def health_check():
    """
    Simple health check endpoint to verify that the API is running.
    """
    return {
        "status": "ok",
        "service": "slumprutt-backend",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
    }
