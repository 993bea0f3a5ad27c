"""pgvector-backed vector store."""

from uuid import uuid4

from loguru import logger
from psycopg_pool import AsyncConnectionPool

from semrag.application.ports import EmbeddingProvider
from semrag.domain.entities import Chunk
from semrag.domain.value_objects import ChunkType, DocumentType
from semrag.infrastructure.persistence.postgres.connection import get_connection

_INSERT_CHUNK = (
    "INSERT INTO chunk "
    "(id, source, document_type, chunk_type, chunk_method, chunk_index, content, embedding) "
    "VALUES (%s, %s, %s, %s, %s, %s, %s, %s::vector)"
)


def _build_search_query(
    query_embedding: list[float], k: int, source: str | None = None
) -> tuple[str, list[object]]:
    """Build cosine-distance search SQL and params, optionally filtered by source."""
    params: list[object] = []
    where = ""
    if source:
        where = " WHERE source = %s"
        params.append(source)
    params.extend([query_embedding, k])
    sql = (
        "SELECT content, source, document_type, chunk_type, chunk_method, chunk_index "
        f"FROM chunk{where} "
        "ORDER BY embedding <=> %s::vector "
        "LIMIT %s"
    )
    return sql, params


def _row_to_chunk(row: tuple) -> Chunk:
    return Chunk(
        text=row[0],
        source=row[1],
        type=DocumentType(row[2]),
        chunk_type=ChunkType(row[3]),
        chunk_method=row[4],
        chunk_index=row[5],
    )


class PgVectorStore:
    """Vector store on a PostgreSQL ``chunk`` table with a pgvector column."""

    def __init__(
        self, pool: AsyncConnectionPool, embedding_provider: EmbeddingProvider
    ) -> None:
        self._pool = pool
        self._embedding_provider = embedding_provider

    async def index(
        self, chunks: list[Chunk], sources: list[str] | None = None
    ) -> int:
        """Embed and store chunks, replacing all earlier chunks of the given sources."""
        replaced = sorted(set(sources or ()) | {c.source for c in chunks})
        if not replaced:
            return 0
        embeddings = (
            await self._embedding_provider.embed([c.text for c in chunks]) if chunks else []
        )
        async with get_connection(self._pool) as conn:
            await conn.execute("DELETE FROM chunk WHERE source = ANY(%s)", (replaced,))
            if not chunks:
                logger.info(f"Cleared chunks of {len(replaced)} sources")
                return 0
            async with conn.cursor() as cur:
                await cur.executemany(
                    _INSERT_CHUNK,
                    [
                        (
                            uuid4(),
                            c.source,
                            c.type.value,
                            c.chunk_type.value,
                            c.chunk_method,
                            c.chunk_index,
                            c.text,
                            emb,
                        )
                        for c, emb in zip(chunks, embeddings, strict=True)
                    ],
                )
        logger.info(f"Indexed {len(chunks)} chunks from {len(replaced)} sources")
        return len(chunks)

    async def search(
        self, query: str, k: int, source: str | None = None
    ) -> list[Chunk]:
        """Return the k chunks closest to the query by cosine distance."""
        query_embedding = await self._embedding_provider.embed_query(query)
        sql, params = _build_search_query(query_embedding, k, source)
        async with get_connection(self._pool) as conn:
            cur = await conn.execute(sql, params)
            rows = await cur.fetchall()
        return [_row_to_chunk(r) for r in rows]
