# app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables (.env file).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Slumprutt Route API"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Road router (OSRM /route/v1 service)
    OSRM_BASE_URL: str = "https://router.project-osrm.org"
    OSRM_TIMEOUT_S: float = 10.0
    # Upper bound on routing calls in flight for one batch
    OSRM_MAX_CONCURRENCY: int = 4

    # Geocoder (Nominatim search service)
    NOMINATIM_BASE_URL: str = "https://nominatim.openstreetmap.org"
    GEOCODER_TIMEOUT_S: float = 10.0
    GEOCODER_USER_AGENT: str = "slumprutt-backend/0.1.0"

    # Route request defaults and limits
    DEFAULT_NUM_ROUTES: int = 3
    DEFAULT_DISTANCE_KM: float = 5.0
    MAX_NUM_ROUTES: int = 10
    # Caps the number of point-to-point detour waypoints per route
    MAX_DISTANCE_KM: float = 100.0


settings = Settings()
