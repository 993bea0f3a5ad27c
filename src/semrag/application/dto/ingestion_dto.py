"""Ingestion DTOs."""

from dataclasses import dataclass, field

from semrag.application.dto.document_dto import DocumentFailure
from semrag.domain.entities import Chunk
from semrag.domain.value_objects import ChunkingStrategy


@dataclass(frozen=True)
class ChunkingOutcome:
    """Chunks of one ingestion and the strategy that actually produced them."""

    chunks: list[Chunk]
    method: ChunkingStrategy
    empty_documents: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class IngestionStats:
    """Summary of one ingestion run."""

    document_count: int
    chunk_count: int
    chunking_method: ChunkingStrategy
    average_chunk_size: int


@dataclass(frozen=True)
class IngestionResult:
    """Output of IngestDocumentsUseCase."""

    stats: IngestionStats
    chunks: list[Chunk]
    empty_documents: list[str] = field(default_factory=list)
    failed_documents: list[DocumentFailure] = field(default_factory=list)
