"""PostgreSQL async connection pool."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool


def create_pool(
    conninfo: str, min_size: int = 1, max_size: int = 5, timeout: float = 10.0
) -> AsyncConnectionPool:
    """Create a closed pool; open it with ``await pool.open()`` or ``async with pool``."""
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        timeout=timeout,
        open=False,
    )


@asynccontextmanager
async def get_connection(pool: AsyncConnectionPool) -> AsyncIterator:
    """Get connection from pool; committed on clean exit, rolled back on error."""
    async with pool.connection() as conn:
        yield conn


async def ping(pool: AsyncConnectionPool) -> None:
    """Run a trivial query. Raises psycopg.Error if the database is unreachable."""
    async with get_connection(pool) as conn:
        await conn.execute("SELECT 1")
