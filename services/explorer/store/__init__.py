"""
Persistence package.

Holds the Postgres-backed LocationStore used as a cache-aside layer in
front of the geocode provider, plus pool lifecycle helpers.
"""

from services.explorer.store.location_store import LocationStore
from services.explorer.store.pool import create_pool

__all__ = ["LocationStore", "create_pool"]
