"""Semantic chunker port - embedding-driven chunking of a document batch."""

from typing import Protocol

from semrag.application.dto.chunking_config import ChunkingConfig
from semrag.application.dto.chunking_result import SemanticChunkingResult
from semrag.domain.entities import RawDocument


class SemanticChunker(Protocol):
    """Port for chunking documents at topic boundaries."""

    async def chunk_documents(
        self, documents: list[RawDocument], config: ChunkingConfig
    ) -> SemanticChunkingResult: ...
