"""Chunking strategy and chunk type values."""

from enum import StrEnum


class ChunkingStrategy(StrEnum):
    """Supported chunking strategies."""

    SEMANTIC = "semantic"
    CHARACTER = "character"


class ChunkType(StrEnum):
    """Kind of chunker that produced a chunk."""

    SEMANTIC = "semantic"
    CHARACTER = "character"


SEMANTIC_CHUNK_METHOD = "ai-similarity"
CHARACTER_CHUNK_METHOD = "recursive-split"
