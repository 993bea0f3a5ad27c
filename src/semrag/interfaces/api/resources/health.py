"""Health check endpoints."""

import falcon
import falcon.asgi
import psycopg
from loguru import logger
from psycopg_pool import AsyncConnectionPool

from semrag.infrastructure.persistence.postgres.connection import ping


class HealthResource:
    """Liveness always answers; readiness also pings the database when a pool is set."""

    def __init__(self, pool: AsyncConnectionPool | None = None) -> None:
        self._pool = pool

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - 503 while the vector database is unreachable."""
        if self._pool is not None:
            try:
                await ping(self._pool)
            except psycopg.Error as e:
                logger.warning(f"Readiness check failed: {e}")
                resp.media = {"status": "unavailable", "details": str(e)}
                resp.status = falcon.HTTP_503
                return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
