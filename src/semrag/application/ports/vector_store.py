"""Vector store port."""

from typing import Protocol

from semrag.domain.entities import Chunk


class VectorStore(Protocol):
    """Port for chunk indexing and similarity search."""

    async def index(
        self, chunks: list[Chunk], sources: list[str] | None = None
    ) -> int:
        """Replace the stored chunks of each source with chunks.

        ``sources`` defaults to the sources of ``chunks``; a listed source with
        no new chunks is cleared.
        """
        ...

    async def search(
        self, query: str, k: int, source: str | None = None
    ) -> list[Chunk]:
        """Return up to k chunks ordered by decreasing relevance."""
        ...
