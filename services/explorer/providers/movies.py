"""
Movie-metadata adapter (TMDB /3/search/movie).

The search term is the location's short_name, not its coordinates.
image_url is the CDN base joined with poster_path verbatim; a missing or
null poster_path contributes an empty string.
"""

from __future__ import annotations

from functools import partial
from typing import Any

from services.explorer.providers.base import ProviderClient
from services.explorer.providers.outcome import ProviderOutcome
from services.explorer.records import MovieSummary

DEFAULT_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500/"


def parse_movie(movie: dict[str, Any], image_base_url: str = DEFAULT_IMAGE_BASE_URL) -> MovieSummary:
    return MovieSummary(
        title=movie.get("title"),
        overview=movie.get("overview"),
        average_votes=movie.get("vote_average"),
        total_votes=movie.get("vote_count"),
        image_url=image_base_url + (movie.get("poster_path") or ""),
        popularity=movie.get("popularity"),
        released_on=movie.get("release_date"),
    )


def build_movie_outcome(
    payload: dict[str, Any], image_base_url: str = DEFAULT_IMAGE_BASE_URL
) -> ProviderOutcome[list[MovieSummary]]:
    return ProviderOutcome.success(
        [parse_movie(m, image_base_url) for m in payload["results"]]
    )


class MovieClient(ProviderClient):
    name = "movies"

    def __init__(
        self,
        api_key: str,
        url: str,
        timeout_s: float = 10.0,
        image_base_url: str = DEFAULT_IMAGE_BASE_URL,
    ) -> None:
        super().__init__(api_key, url, timeout_s)
        self._image_base_url = image_base_url

    async def search(self, short_name: str) -> ProviderOutcome[list[MovieSummary]]:
        return await self._call(
            self._url,
            partial(build_movie_outcome, image_base_url=self._image_base_url),
            params={"api_key": self._api_key, "query": short_name},
        )
