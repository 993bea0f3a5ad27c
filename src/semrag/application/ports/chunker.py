"""Chunker port - text splitting strategies."""

from typing import Protocol

from semrag.application.dto.chunking_config import ChunkingConfig
from semrag.domain.entities import Chunk, RawDocument


class Chunker(Protocol):
    """Port for splitting one document into chunks."""

    def chunk(self, document: RawDocument, config: ChunkingConfig) -> list[Chunk]: ...
