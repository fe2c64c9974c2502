"""
asyncpg pool factory.

Opened once in the FastAPI lifespan and closed on shutdown; the pool is
handed to LocationStore explicitly rather than read from a module global.
"""

import logging

import asyncpg

from services.explorer.config import Settings

logger = logging.getLogger(__name__)


async def create_pool(settings: Settings) -> asyncpg.Pool | None:
    """
    Connect to settings.database_url.

    Returns None when no URL is configured or the connection fails, in
    which case the service runs without a location cache.
    """
    if not settings.database_url:
        logger.info("DATABASE_URL not set; location cache disabled")
        return None

    try:
        pool = await asyncpg.create_pool(
            settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
            command_timeout=30,
        )
    except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, TimeoutError) as e:
        logger.warning("DB pool failed to connect: %s", e)
        return None

    logger.info("location store connected")
    return pool
