"""
Shared test fixtures for the explorer API test suite.

Provides:
- async FastAPI test client (no network, no Postgres)
- FakePool: in-memory stand-in for the asyncpg pool behind LocationStore
- mocked provider clients wired into a real ExplorerService
- payload factories for each upstream provider
- make_http_client: patched httpx.AsyncClient for adapter tests
"""

import os
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

# Ensure test env vars before any app imports
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("DATABASE_URL", "")
os.environ.setdefault("SENTRY_DSN", "")
os.environ.setdefault("GEOCODING_API_KEY", "test-geocode-key")
os.environ.setdefault("DARKSKY_API_KEY", "test-darksky-key")
os.environ.setdefault("YELP_API_KEY", "test-yelp-key")
os.environ.setdefault("MOVIE_API_KEY", "test-movie-key")

from services.explorer.providers import (  # noqa: E402
    GeocodeClient,
    MovieClient,
    ProviderOutcome,
    WeatherClient,
    YelpClient,
)
from services.explorer.records import LocationRecord  # noqa: E402
from services.explorer.service import ExplorerService  # noqa: E402
from services.explorer.store import LocationStore  # noqa: E402


# ---------------------------------------------------------------------------
# In-memory store backend
# ---------------------------------------------------------------------------

class FakePool:
    """
    Minimal asyncpg pool double for the locations table.

    execute() with arguments is treated as an INSERT; without arguments as DDL.
    fetchrow() returns the first row whose search_query matches exactly.
    """

    def __init__(self) -> None:
        self.rows: list[dict[str, Any]] = []
        self.ddl: list[str] = []

    async def execute(self, sql: str, *args: Any) -> str:
        if not args:
            self.ddl.append(sql)
            return "CREATE TABLE"
        search_query, formatted_query, latitude, longitude, short_name = args
        self.rows.append({
            "id": len(self.rows) + 1,
            "search_query": search_query,
            "formatted_query": formatted_query,
            "latitude": latitude,
            "longitude": longitude,
            "short_name": short_name,
        })
        return "INSERT 0 1"

    async def fetchrow(self, sql: str, search_query: str) -> dict[str, Any] | None:
        for row in self.rows:
            if row["search_query"] == search_query:
                return row
        return None


@pytest.fixture
def fake_pool() -> FakePool:
    return FakePool()


@pytest.fixture
def store(fake_pool) -> LocationStore:
    return LocationStore(fake_pool)


# ---------------------------------------------------------------------------
# Records + upstream payload factories
# ---------------------------------------------------------------------------

def make_location(**overrides: Any) -> LocationRecord:
    base = {
        "formatted_query": "Seattle, WA, USA",
        "latitude": 47.6062,
        "longitude": -122.3321,
        "short_name": "Seattle",
    }
    base.update(overrides)
    return LocationRecord(**base)


def make_geocode_payload(
    formatted_address: str = "Seattle, WA, USA",
    lat: float = 47.6062,
    lng: float = -122.3321,
    short_name: str = "Seattle",
    status: str = "OK",
) -> dict[str, Any]:
    """Factory for Google geocode /json response dicts."""
    return {
        "results": [
            {
                "formatted_address": formatted_address,
                "geometry": {"location": {"lat": lat, "lng": lng}},
                "address_components": [
                    {"long_name": short_name, "short_name": short_name},
                    {"long_name": "King County", "short_name": "King County"},
                ],
            }
        ],
        "status": status,
    }


def make_darksky_payload(times: list[int], summary: str = "Partly cloudy.") -> dict[str, Any]:
    """Factory for Dark Sky forecast responses with one daily entry per timestamp."""
    return {
        "latitude": 47.6062,
        "longitude": -122.3321,
        "daily": {
            "summary": "Rain throughout the week.",
            "data": [{"time": t, "summary": summary, "temperatureHigh": 55.1} for t in times],
        },
    }


def make_yelp_payload(count: int = 2) -> dict[str, Any]:
    return {
        "businesses": [
            {
                "name": f"Diner {i}",
                "image_url": f"https://s3-media.fl.yelpcdn.com/bphoto/{i}/o.jpg",
                "price": "$$",
                "rating": 4.5,
                "url": f"https://www.yelp.com/biz/diner-{i}",
                "review_count": 100 + i,
            }
            for i in range(count)
        ],
        "total": count,
    }


def make_tmdb_payload(poster_paths: list[str | None]) -> dict[str, Any]:
    return {
        "page": 1,
        "results": [
            {
                "title": f"Sleepless {i}",
                "overview": "A widower's son calls a radio talk show.",
                "vote_average": 6.6,
                "vote_count": 1200,
                "poster_path": path,
                "popularity": 12.3,
                "release_date": "1993-06-24",
            }
            for i, path in enumerate(poster_paths)
        ],
    }


def make_http_client(payload: Any = None, *, side_effect: Exception | None = None) -> AsyncMock:
    """AsyncMock standing in for `async with httpx.AsyncClient(...) as client`."""
    mock_response = MagicMock()
    mock_response.status_code = 200
    mock_response.json = MagicMock(return_value=payload)
    mock_response.raise_for_status = MagicMock()

    mock_client = AsyncMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    if side_effect is not None:
        mock_client.get = AsyncMock(side_effect=side_effect)
    else:
        mock_client.get = AsyncMock(return_value=mock_response)
    return mock_client


# ---------------------------------------------------------------------------
# Service wiring — real ExplorerService, mocked provider clients
# ---------------------------------------------------------------------------

@pytest.fixture
def geocode_client():
    client = AsyncMock(spec=GeocodeClient)
    client.search = AsyncMock(return_value=ProviderOutcome.success(make_location()))
    return client


@pytest.fixture
def weather_client():
    client = AsyncMock(spec=WeatherClient)
    client.daily_forecast = AsyncMock(return_value=ProviderOutcome.success([]))
    return client


@pytest.fixture
def yelp_client():
    client = AsyncMock(spec=YelpClient)
    client.search_nearby = AsyncMock(return_value=ProviderOutcome.success([]))
    return client


@pytest.fixture
def movie_client():
    client = AsyncMock(spec=MovieClient)
    client.search = AsyncMock(return_value=ProviderOutcome.success([]))
    return client


@pytest.fixture
def explorer(store, geocode_client, weather_client, yelp_client, movie_client) -> ExplorerService:
    return ExplorerService(
        store=store,
        geocode=geocode_client,
        weather=weather_client,
        yelp=yelp_client,
        movies=movie_client,
    )


@pytest.fixture
async def app(explorer):
    """FastAPI app with the explorer service injected (lifespan is not run)."""
    from services.explorer.config import settings
    from services.explorer.main import app as _app

    _app.state.settings = settings
    _app.state.explorer = explorer
    return _app


@pytest.fixture
async def client(app):
    """Async HTTP client bound to the test app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
