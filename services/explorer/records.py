"""
Normalized records returned by the explorer endpoints.

Each record is a frozen projection of exactly one upstream item. Only
LocationRecord is ever persisted (see store.location_store); the others are
built per request and discarded once the response is written.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    """Coordinate pair accepted by /weather and /yelp.

    Extra keys are ignored so a full LocationRecord can be passed as-is.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class MovieQuery(BaseModel):
    """Input accepted by /movies: anything carrying a short_name."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    short_name: str = Field(..., min_length=1)


class LocationRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    formatted_query: str
    latitude: float
    longitude: float
    short_name: str

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(latitude=self.latitude, longitude=self.longitude)


class ForecastEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    forecast: str | None
    time: str


class BusinessListing(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None
    image_url: str | None
    price: str | None
    rating: float | None
    url: str | None


class MovieSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str | None
    overview: str | None
    average_votes: float | None
    total_votes: int | None
    image_url: str
    popularity: float | None
    released_on: str | None
