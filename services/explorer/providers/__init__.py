"""
Provider adapters package.

One client per upstream: geocode, daily weather, business listings and
movie metadata. Every call resolves to a ProviderOutcome instead of raising.
"""

from services.explorer.providers.outcome import OutcomeStatus, ProviderOutcome
from services.explorer.providers.geocode import GeocodeClient
from services.explorer.providers.weather import WeatherClient
from services.explorer.providers.yelp import YelpClient
from services.explorer.providers.movies import MovieClient

__all__ = [
    "OutcomeStatus",
    "ProviderOutcome",
    "GeocodeClient",
    "WeatherClient",
    "YelpClient",
    "MovieClient",
]
