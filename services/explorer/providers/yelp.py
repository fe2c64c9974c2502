"""
Business-listing adapter (Yelp Fusion /v3/businesses/search).

Auth is a bearer token header rather than a query parameter.
"""

from __future__ import annotations

from typing import Any

from services.explorer.providers.base import ProviderClient
from services.explorer.providers.outcome import ProviderOutcome
from services.explorer.records import BusinessListing, Coordinates


def parse_business(business: dict[str, Any]) -> BusinessListing:
    return BusinessListing(
        name=business.get("name"),
        image_url=business.get("image_url"),
        price=business.get("price"),
        rating=business.get("rating"),
        url=business.get("url"),
    )


def build_business_outcome(payload: dict[str, Any]) -> ProviderOutcome[list[BusinessListing]]:
    return ProviderOutcome.success([parse_business(b) for b in payload["businesses"]])


class YelpClient(ProviderClient):
    name = "yelp"

    async def search_nearby(
        self, coords: Coordinates
    ) -> ProviderOutcome[list[BusinessListing]]:
        return await self._call(
            self._url,
            build_business_outcome,
            params={"latitude": coords.latitude, "longitude": coords.longitude},
            headers={"Authorization": f"Bearer {self._api_key}"},
        )
