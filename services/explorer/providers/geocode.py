"""
Geocode adapter — free-text address -> LocationRecord.

Google Geocoding /json returns:
  {
    "results": [
      {
        "formatted_address": "Seattle, WA, USA",
        "geometry": {"location": {"lat": 47.6062, "lng": -122.3321}},
        "address_components": [{"short_name": "Seattle", ...}, ...]
      }
    ],
    "status": "OK"
  }

Only the first result is used. ZERO_RESULTS maps to an empty outcome; any
other non-OK status (REQUEST_DENIED, OVER_QUERY_LIMIT, ...) is a provider error.
"""

from __future__ import annotations

import logging
from typing import Any

from services.explorer.providers.base import ProviderClient
from services.explorer.providers.outcome import ProviderOutcome
from services.explorer.records import LocationRecord

logger = logging.getLogger(__name__)

_EMPTY_STATUSES = {"ZERO_RESULTS"}


def parse_location(result: dict[str, Any]) -> LocationRecord:
    """Map one Google geocode result to a LocationRecord."""
    location = result["geometry"]["location"]
    return LocationRecord(
        formatted_query=result["formatted_address"],
        latitude=location["lat"],
        longitude=location["lng"],
        short_name=result["address_components"][0]["short_name"],
    )


def build_location_outcome(payload: dict[str, Any]) -> ProviderOutcome[LocationRecord]:
    status = payload.get("status", "OK")
    results = payload.get("results") or []

    if status in _EMPTY_STATUSES or (status == "OK" and not results):
        return ProviderOutcome.empty()
    if status != "OK":
        logger.warning(
            "geocode returned status=%s: %s", status, payload.get("error_message", "")
        )
        return ProviderOutcome.error(f"geocode returned status {status}")

    return ProviderOutcome.success(parse_location(results[0]))


class GeocodeClient(ProviderClient):
    name = "geocode"

    async def search(self, address: str) -> ProviderOutcome[LocationRecord]:
        return await self._call(
            self._url,
            build_location_outcome,
            params={"address": address, "key": self._api_key},
        )
