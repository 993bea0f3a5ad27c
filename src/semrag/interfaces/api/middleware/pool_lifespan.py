"""ASGI lifespan hooks for the database pool."""

from typing import Any

from loguru import logger
from psycopg_pool import AsyncConnectionPool


class PoolLifespanMiddleware:
    """Opens the pool when the server starts and closes it on shutdown.

    Startup does not wait for the minimum number of connections, so the API
    comes up even when the database is late; readiness reports it instead.
    """

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        await self._pool.open(wait=False)
        logger.info(
            f"Database pool opened (min={self._pool.min_size}, max={self._pool.max_size})"
        )

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        await self._pool.close()
        logger.info("Database pool closed")
