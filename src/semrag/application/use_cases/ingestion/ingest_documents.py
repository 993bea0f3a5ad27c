"""Ingest documents use case: chunking with fallback, indexing, statistics."""

from collections.abc import Sequence

from loguru import logger

from semrag.application.dto.chunking_config import ChunkingConfig
from semrag.application.dto.chunking_result import ChunkingFailure, ChunkingSuccess
from semrag.application.dto.document_dto import DocumentFailure
from semrag.application.dto.ingestion_dto import (
    ChunkingOutcome,
    IngestionResult,
    IngestionStats,
)
from semrag.application.ports import Chunker, SemanticChunker, VectorStore
from semrag.domain.entities import Chunk, RawDocument
from semrag.domain.exceptions import ValidationError
from semrag.domain.value_objects import ChunkingStrategy


class IngestDocumentsUseCase:
    """Chunk documents (semantic, falling back to character windows) and index them."""

    def __init__(
        self,
        semantic_chunker: SemanticChunker,
        fallback_chunker: Chunker,
        vector_store: VectorStore,
        default_config: ChunkingConfig | None = None,
    ) -> None:
        self._semantic_chunker = semantic_chunker
        self._fallback_chunker = fallback_chunker
        self._vector_store = vector_store
        self._default_config = default_config or ChunkingConfig()

    async def chunk(
        self,
        documents: list[RawDocument],
        config: ChunkingConfig | None = None,
    ) -> ChunkingOutcome:
        """Chunk all documents with one strategy.

        If semantic chunking fails for any document, the whole batch is
        re-chunked by the fallback chunker.
        """
        config = config or self._default_config
        if config.strategy == ChunkingStrategy.SEMANTIC:
            result = await self._semantic_chunker.chunk_documents(documents, config)
            match result:
                case ChunkingSuccess(chunks=chunks, empty_documents=empty_documents):
                    return ChunkingOutcome(
                        chunks=chunks,
                        method=ChunkingStrategy.SEMANTIC,
                        empty_documents=empty_documents,
                    )
                case ChunkingFailure(error=error, source=source):
                    logger.warning(
                        f"Semantic chunking failed on {source}, "
                        f"falling back to character chunking: {error}"
                    )
        else:
            logger.info("Semantic chunking disabled, using character chunking")
        return self._chunk_by_characters(documents, config)

    def _chunk_by_characters(
        self, documents: list[RawDocument], config: ChunkingConfig
    ) -> ChunkingOutcome:
        chunks: list[Chunk] = []
        empty_documents: list[str] = []
        for document in documents:
            document_chunks = self._fallback_chunker.chunk(document, config)
            if not document_chunks:
                empty_documents.append(document.source)
            chunks.extend(document_chunks)
        return ChunkingOutcome(
            chunks=chunks,
            method=ChunkingStrategy.CHARACTER,
            empty_documents=empty_documents,
        )

    async def execute(
        self,
        documents: list[RawDocument],
        config: ChunkingConfig | None = None,
        failed_documents: Sequence[DocumentFailure] = (),
    ) -> IngestionResult:
        """Chunk and index documents. Raises ValidationError on an empty batch."""
        if not documents:
            raise ValidationError("No documents to ingest")

        outcome = await self.chunk(documents, config)
        chunk_count = await self._vector_store.index(
            outcome.chunks, sources=[d.source for d in documents]
        )
        average = (
            round(sum(len(c.text) for c in outcome.chunks) / len(outcome.chunks))
            if outcome.chunks
            else 0
        )
        stats = IngestionStats(
            document_count=len(documents),
            chunk_count=chunk_count,
            chunking_method=outcome.method,
            average_chunk_size=average,
        )
        logger.info(
            f"Ingested {stats.document_count} documents into {stats.chunk_count} "
            f"{stats.chunking_method} chunks (avg {stats.average_chunk_size} chars)"
        )
        return IngestionResult(
            stats=stats,
            chunks=outcome.chunks,
            empty_documents=outcome.empty_documents,
            failed_documents=list(failed_documents),
        )
