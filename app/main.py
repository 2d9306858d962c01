# app/main.py

from fastapi import FastAPI

from app.api.v1 import routes_geocoding, routes_health, routes_routing
from app.core.config import settings
from app.core.logger import logger


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Generates random loop and point-to-point routes snapped to roads with OSRM.",
    )

    # Routers
    app.include_router(routes_health.router, prefix="", tags=["health"])
    app.include_router(routes_routing.router, prefix="", tags=["routing"])
    app.include_router(routes_geocoding.router, prefix="", tags=["geocoding"])

    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} ready ({settings.ENVIRONMENT})")
    return app


app = create_app()
