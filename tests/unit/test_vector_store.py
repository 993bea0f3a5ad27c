"""Unit tests for the pgvector store (query building and a fake pool)."""

from contextlib import asynccontextmanager

import pytest

from semrag.domain.value_objects import ChunkType, DocumentType
from semrag.infrastructure.persistence.postgres.vector_store import (
    PgVectorStore,
    _build_search_query,
    _row_to_chunk,
)

from tests.conftest import FakeEmbeddingProvider, make_chunk


class _FakeResult:
    def __init__(self, rows: list[tuple]) -> None:
        self._rows = rows

    async def fetchall(self) -> list[tuple]:
        return self._rows


class _FakeCursor:
    def __init__(self, conn: "_FakeConnection") -> None:
        self._conn = conn

    async def __aenter__(self) -> "_FakeCursor":
        return self

    async def __aexit__(self, *exc) -> None:
        return None

    async def executemany(self, sql: str, params_seq: list) -> None:
        self._conn.many.append((sql, list(params_seq)))


class _FakeConnection:
    def __init__(self, rows: list[tuple]) -> None:
        self.rows = rows
        self.executed: list[tuple[str, object]] = []
        self.many: list[tuple[str, list]] = []

    async def execute(self, sql: str, params=None) -> _FakeResult:
        self.executed.append((sql, params))
        return _FakeResult(self.rows)

    def cursor(self) -> _FakeCursor:
        return _FakeCursor(self)


class _FakePool:
    def __init__(self, rows: list[tuple] | None = None) -> None:
        self.conn = _FakeConnection(rows or [])

    @asynccontextmanager
    async def connection(self):
        yield self.conn


def test_build_search_query_without_source() -> None:
    sql, params = _build_search_query([0.1, 0.2], 4)
    assert "WHERE" not in sql
    assert "ORDER BY embedding <=> %s::vector" in sql
    assert sql.endswith("LIMIT %s")
    assert params == [[0.1, 0.2], 4]


def test_build_search_query_with_source() -> None:
    sql, params = _build_search_query([0.1], 2, source="a.pdf")
    assert "FROM chunk WHERE source = %s ORDER BY" in sql
    assert params == ["a.pdf", [0.1], 2]


def test_row_to_chunk() -> None:
    chunk = _row_to_chunk(("text", "a.pdf", "pdf", "character", "recursive-split", 3))
    assert chunk.text == "text"
    assert chunk.type == DocumentType.PDF
    assert chunk.chunk_type == ChunkType.CHARACTER
    assert chunk.chunk_index == 3


@pytest.mark.asyncio
async def test_index_replaces_sources_and_inserts() -> None:
    pool = _FakePool()
    store = PgVectorStore(pool, FakeEmbeddingProvider())
    chunks = [make_chunk("one", "a.txt", 0), make_chunk("two", "a.txt", 1), make_chunk("x", "b.txt", 0)]

    count = await store.index(chunks)

    assert count == 3
    delete_sql, delete_params = pool.conn.executed[0]
    assert delete_sql.startswith("DELETE FROM chunk")
    assert delete_params == (["a.txt", "b.txt"],)
    insert_sql, rows = pool.conn.many[0]
    assert insert_sql.startswith("INSERT INTO chunk")
    assert [(r[1], r[5], r[6], r[7]) for r in rows] == [
        ("a.txt", 0, "one", [1.0, 0.0]),
        ("a.txt", 1, "two", [1.0, 0.0]),
        ("b.txt", 0, "x", [1.0, 0.0]),
    ]


@pytest.mark.asyncio
async def test_index_nothing() -> None:
    pool = _FakePool()
    store = PgVectorStore(pool, FakeEmbeddingProvider())
    assert await store.index([]) == 0
    assert pool.conn.executed == []


@pytest.mark.asyncio
async def test_index_clears_sources_without_chunks() -> None:
    pool = _FakePool()
    provider = FakeEmbeddingProvider()
    store = PgVectorStore(pool, provider)

    count = await store.index([], sources=["a.txt"])

    assert count == 0
    assert pool.conn.executed == [("DELETE FROM chunk WHERE source = ANY(%s)", (["a.txt"],))]
    assert pool.conn.many == []
    assert provider.queries == []


@pytest.mark.asyncio
async def test_index_replaces_listed_and_chunk_sources() -> None:
    pool = _FakePool()
    store = PgVectorStore(pool, FakeEmbeddingProvider())

    await store.index([make_chunk("kept", "b.txt")], sources=["a.txt", "b.txt"])

    _, delete_params = pool.conn.executed[0]
    assert delete_params == (["a.txt", "b.txt"],)
    assert [r[1] for r in pool.conn.many[0][1]] == ["b.txt"]


@pytest.mark.asyncio
async def test_search_maps_rows() -> None:
    pool = _FakePool(rows=[("hit", "a.txt", "txt", "semantic", "ai-similarity", 0)])
    provider = FakeEmbeddingProvider({"query": [0.5, 0.5]})
    store = PgVectorStore(pool, provider)

    chunks = await store.search("query", 4, source="a.txt")

    assert [c.text for c in chunks] == ["hit"]
    _, params = pool.conn.executed[0]
    assert params == ["a.txt", [0.5, 0.5], 4]
