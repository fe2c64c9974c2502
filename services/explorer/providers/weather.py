"""
Daily forecast adapter (Dark Sky forecast API).

GET {darksky_url}/{key}/{lat},{lng} returns a "daily" block:
  {"daily": {"data": [{"time": 1540018800, "summary": "Light rain."}, ...]}}

Every daily entry becomes one ForecastEntry, so the output length always
equals the upstream day count.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from services.explorer.providers.base import ProviderClient
from services.explorer.providers.outcome import ProviderOutcome
from services.explorer.records import Coordinates, ForecastEntry


def unix_to_date_string(timestamp: int | float) -> str:
    """Render a unix timestamp as a UTC calendar date, e.g. 'Mon Oct 19 2026'."""
    day = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return day.strftime("%a %b %d %Y")


def parse_forecast(day: dict[str, Any]) -> ForecastEntry:
    return ForecastEntry(
        forecast=day.get("summary"),
        time=unix_to_date_string(day["time"]),
    )


def build_forecast_outcome(payload: dict[str, Any]) -> ProviderOutcome[list[ForecastEntry]]:
    days = payload["daily"]["data"]
    return ProviderOutcome.success([parse_forecast(day) for day in days])


class WeatherClient(ProviderClient):
    name = "weather"

    async def daily_forecast(
        self, coords: Coordinates
    ) -> ProviderOutcome[list[ForecastEntry]]:
        url = f"{self._url.rstrip('/')}/{self._api_key}/{coords.latitude},{coords.longitude}"
        return await self._call(url, build_forecast_outcome)
