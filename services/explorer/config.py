"""
Application configuration via pydantic-settings.
All config read from environment variables with sensible defaults for local dev.
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    # App
    app_name: str = "city-explorer-api"
    app_version: str = "0.1.0"
    environment: str = Field(default="development", pattern=r"^(development|staging|production)$")
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)

    # Database (empty disables the location cache)
    database_url: str = ""
    db_pool_min_size: int = Field(default=1, ge=0)
    db_pool_max_size: int = Field(default=10, ge=1)

    # CORS
    cors_origins: list[str] = Field(default=["*"])

    # Sentry
    sentry_dsn: str = ""
    sentry_traces_sample_rate: float = Field(default=0.1, ge=0.0, le=1.0)

    # Provider keys
    geocoding_api_key: str = ""
    darksky_api_key: str = ""
    yelp_api_key: str = ""
    movie_api_key: str = ""

    # Provider endpoints
    geocode_url: str = "https://maps.googleapis.com/maps/api/geocode/json"
    darksky_url: str = "https://api.darksky.net/forecast"
    yelp_url: str = "https://api.yelp.com/v3/businesses/search"
    movie_search_url: str = "https://api.themoviedb.org/3/search/movie"
    movie_image_base_url: str = "https://image.tmdb.org/t/p/w500/"

    # Outbound HTTP timeout shared by every provider call
    upstream_timeout_s: float = Field(default=10.0, gt=0.0)

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}


settings = Settings()
