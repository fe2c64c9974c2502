"""
ExplorerService — the aggregation handler behind the four endpoints.

  /location   cache-aside: LocationStore first, geocode provider on miss,
              then write the fresh record back under the raw search string
  /weather    coordinates -> daily forecast provider
  /yelp       coordinates -> business-listing provider
  /movies     short_name  -> movie-metadata provider

The three downstream lookups take an explicit resolved input (Coordinates or
MovieQuery). When a caller passes a plain search string instead, it is
re-resolved through resolve_location first, so the cache still applies.

Every method returns a ProviderOutcome; nothing here raises for upstream or
store failures.
"""

from __future__ import annotations

import logging

from services.explorer.config import Settings
from services.explorer.providers import (
    GeocodeClient,
    MovieClient,
    ProviderOutcome,
    WeatherClient,
    YelpClient,
)
from services.explorer.records import (
    BusinessListing,
    Coordinates,
    ForecastEntry,
    LocationRecord,
    MovieQuery,
    MovieSummary,
)
from services.explorer.store import LocationStore

logger = logging.getLogger(__name__)


class ExplorerService:
    """
    Usage:
        service = ExplorerService.from_settings(settings, LocationStore(pool))
        outcome = await service.resolve_location("Seattle")
        if outcome.ok:
            forecast = await service.forecast(outcome.value.coordinates)
    """

    def __init__(
        self,
        store: LocationStore,
        geocode: GeocodeClient,
        weather: WeatherClient,
        yelp: YelpClient,
        movies: MovieClient,
    ) -> None:
        self.store = store
        self._geocode = geocode
        self._weather = weather
        self._yelp = yelp
        self._movies = movies

    @classmethod
    def from_settings(cls, settings: Settings, store: LocationStore) -> "ExplorerService":
        timeout = settings.upstream_timeout_s
        return cls(
            store=store,
            geocode=GeocodeClient(settings.geocoding_api_key, settings.geocode_url, timeout),
            weather=WeatherClient(settings.darksky_api_key, settings.darksky_url, timeout),
            yelp=YelpClient(settings.yelp_api_key, settings.yelp_url, timeout),
            movies=MovieClient(
                settings.movie_api_key,
                settings.movie_search_url,
                timeout,
                image_base_url=settings.movie_image_base_url,
            ),
        )

    async def resolve_location(self, search_query: str) -> ProviderOutcome[LocationRecord]:
        """
        Resolve a search string to a LocationRecord.

        Cache strategy:
          - Check the store first (key: raw search string)
          - On hit: return the stored record, no provider call
          - On miss: call the geocode provider, store a successful result, return it

        Empty and error outcomes are never stored.
        """
        cached = await self.store.get(search_query)
        if cached is not None:
            return ProviderOutcome.success(cached)

        outcome = await self._geocode.search(search_query)
        if outcome.ok:
            await self.store.put(search_query, outcome.value)
        else:
            logger.info("geocode %s for %r", outcome.status.value, search_query)
        return outcome

    async def _coordinates_for(self, data: Coordinates | str) -> ProviderOutcome[Coordinates]:
        if isinstance(data, Coordinates):
            return ProviderOutcome.success(data)
        resolved = await self.resolve_location(data)
        if not resolved.ok:
            return ProviderOutcome(status=resolved.status, reason=resolved.reason)
        return ProviderOutcome.success(resolved.value.coordinates)

    async def forecast(self, data: Coordinates | str) -> ProviderOutcome[list[ForecastEntry]]:
        coords = await self._coordinates_for(data)
        if not coords.ok:
            return ProviderOutcome(status=coords.status, reason=coords.reason)
        return await self._weather.daily_forecast(coords.value)

    async def businesses(self, data: Coordinates | str) -> ProviderOutcome[list[BusinessListing]]:
        coords = await self._coordinates_for(data)
        if not coords.ok:
            return ProviderOutcome(status=coords.status, reason=coords.reason)
        return await self._yelp.search_nearby(coords.value)

    async def movies(self, data: MovieQuery | str) -> ProviderOutcome[list[MovieSummary]]:
        if isinstance(data, MovieQuery):
            return await self._movies.search(data.short_name)

        resolved = await self.resolve_location(data)
        if not resolved.ok:
            return ProviderOutcome(status=resolved.status, reason=resolved.reason)
        return await self._movies.search(resolved.value.short_name)
