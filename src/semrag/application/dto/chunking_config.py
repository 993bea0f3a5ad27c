"""Chunking configuration DTO."""

from dataclasses import dataclass

from semrag.domain.value_objects import ChunkingStrategy


@dataclass
class ChunkingConfig:
    """Configuration for text chunking.

    ``chunk_size``/``chunk_overlap`` drive the character splitter;
    ``min_chunk_size``/``max_chunk_size``/``similarity_threshold`` drive the
    semantic chunker. Sizes are in characters.
    """

    strategy: ChunkingStrategy = ChunkingStrategy.SEMANTIC
    chunk_size: int = 1000
    chunk_overlap: int = 200
    min_chunk_size: int = 200
    max_chunk_size: int = 1000
    similarity_threshold: float = 0.75
    min_sentence_length: int = 10
