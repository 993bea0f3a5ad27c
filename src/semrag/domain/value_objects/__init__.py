"""Domain value objects."""

from semrag.domain.value_objects.chunking_strategy import (
    CHARACTER_CHUNK_METHOD,
    SEMANTIC_CHUNK_METHOD,
    ChunkingStrategy,
    ChunkType,
)
from semrag.domain.value_objects.document_type import DocumentType

__all__ = [
    "CHARACTER_CHUNK_METHOD",
    "SEMANTIC_CHUNK_METHOD",
    "ChunkingStrategy",
    "ChunkType",
    "DocumentType",
]
