"""Bangalore Traffic Router Configuration.

Centralized configuration management using Pydantic settings. Handles the
server binding, CORS policy, rate limiting and static client settings, plus
the fixed constants of the traffic simulation model.

Environment variables are loaded from .env file in development and from the
system environment in production. None of them change how traffic or routes
are computed.
"""

from typing import Dict, List, Optional, Tuple

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Time-of-day slowdown multipliers applied to every road segment
TIME_OF_DAY_FACTORS: Dict[str, float] = {
    "morning-rush": 1.8,  # 9AM-11AM
    "evening-rush": 2.0,  # 5PM-8PM
    "normal": 1.0,
    "night": 0.8,  # 11PM-5AM
}

WEATHER_FACTORS: Dict[str, float] = {
    "clear": 1.0,
    "rain": 1.4,  # monsoon
    "fog": 1.6,  # winter mornings
}

# Per-segment random variation, drawn uniformly
RANDOM_FACTOR_RANGE: Tuple[float, float] = (0.8, 1.2)

# Seasonal weather bias, months are 0-indexed (0 = January)
# Format: (months, weather, probability)
SEASONAL_WEATHER: List[Tuple[frozenset, str, float]] = [
    (frozenset({5, 6, 7, 8}), "rain", 0.6),
    (frozenset({11, 0, 1}), "fog", 0.3),
]

# Route geometry
KM_PER_DEGREE = 111.32
ROAD_DETOUR_FACTOR = 1.2
MINUTES_PER_KM = 2

# Route variants in generation order with their distance multipliers
ROUTE_VARIANTS: Dict[str, float] = {
    "orr": 0.9,
    "central": 1.1,
    "peripheral": 1.3,
}


class Settings(BaseSettings):
    """Application settings - single source of truth for configuration."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # App
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = Field(
        default=(
            "http://localhost:3000,http://localhost:5000,"
            "http://127.0.0.1:3000,http://127.0.0.1:5000"
        )
    )
    GITHUB_PAGES_URL: Optional[str] = None

    # Rate Limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_PER_MINUTE: int = 60

    # Map client
    STATIC_DIR: Optional[str] = None

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list, including the GitHub Pages origin if set."""
        origins = [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]
        if self.GITHUB_PAGES_URL:
            origins.append(self.GITHUB_PAGES_URL)
        return origins


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
