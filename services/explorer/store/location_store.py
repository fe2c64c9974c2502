"""
Location store — Postgres-backed cache of resolved geocode lookups.

Table:  locations (search_query, formatted_query, latitude, longitude, short_name)
Key:    the raw search string, exactly as the client sent it

Keys are not trimmed or case-folded: "Seattle" and "seattle " are separate
rows. There is no TTL and no uniqueness constraint; two concurrent misses
for the same key may both insert, and reads take the oldest row.

The pool may be None (no DATABASE_URL, or the connection failed at startup).
All operations then degrade to cache misses so requests fall through to the
geocode provider.
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg

from services.explorer.records import LocationRecord

logger = logging.getLogger(__name__)

_SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS locations (
    id SERIAL PRIMARY KEY,
    search_query VARCHAR(255) NOT NULL,
    formatted_query VARCHAR(255),
    latitude DOUBLE PRECISION,
    longitude DOUBLE PRECISION,
    short_name VARCHAR(255)
);
CREATE INDEX IF NOT EXISTS idx_locations_search_query ON locations (search_query);
"""

_SELECT_SQL = """
SELECT formatted_query, latitude, longitude, short_name
FROM locations
WHERE search_query = $1
ORDER BY id
LIMIT 1
"""

_INSERT_SQL = """
INSERT INTO locations (search_query, formatted_query, latitude, longitude, short_name)
VALUES ($1, $2, $3, $4, $5)
"""

# Errors that mean "the store is unavailable", not "the code is wrong"
_STORE_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


def _row_to_record(row: Any) -> LocationRecord:
    return LocationRecord(
        formatted_query=row["formatted_query"],
        latitude=row["latitude"],
        longitude=row["longitude"],
        short_name=row["short_name"] or "",
    )


class LocationStore:
    """
    Cache-aside store for LocationRecords.

    Usage:
        store = LocationStore(pool)
        record = await store.get("Seattle")
        if record is None:
            record = ...  # geocode provider
            await store.put("Seattle", record)
    """

    def __init__(self, pool) -> None:
        """
        Args:
            pool: An asyncpg pool (or anything exposing fetchrow/execute).
                  May be None, in which case every operation becomes a miss / no-op.
        """
        self._pool = pool

    @property
    def enabled(self) -> bool:
        return self._pool is not None

    async def ensure_schema(self) -> None:
        """Create the locations table if it does not exist yet."""
        if self._pool is None:
            return
        await self._pool.execute(_SCHEMA_SQL)
        logger.info("location store schema ready")

    async def get(self, search_query: str) -> LocationRecord | None:
        """Return the stored record for search_query, or None on miss / unavailable."""
        if self._pool is None:
            return None

        try:
            row = await self._pool.fetchrow(_SELECT_SQL, search_query)
        except _STORE_ERRORS:
            logger.warning("Location store GET failed for %r", search_query, exc_info=True)
            return None

        if row is None:
            logger.debug("Location cache miss: %r", search_query)
            return None
        logger.debug("Location cache hit: %r", search_query)
        return _row_to_record(row)

    async def put(self, search_query: str, record: LocationRecord) -> bool:
        """Insert record under search_query. Returns False if it was not written."""
        if self._pool is None:
            return False

        try:
            await self._pool.execute(
                _INSERT_SQL,
                search_query,
                record.formatted_query,
                record.latitude,
                record.longitude,
                record.short_name,
            )
        except _STORE_ERRORS:
            logger.warning("Location store PUT failed for %r", search_query, exc_info=True)
            return False

        logger.debug("Location cached: %r", search_query)
        return True
