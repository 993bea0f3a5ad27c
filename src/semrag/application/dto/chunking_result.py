"""Result of a semantic chunking pass: success with chunks, or failure."""

from dataclasses import dataclass, field

from semrag.domain.entities import Chunk
from semrag.domain.exceptions import ProviderError


@dataclass(frozen=True)
class ChunkingSuccess:
    """All documents were chunked."""

    chunks: list[Chunk]
    empty_documents: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ChunkingFailure:
    """The pass was aborted; no chunk of it may be reused."""

    error: ProviderError
    source: str | None = None


SemanticChunkingResult = ChunkingSuccess | ChunkingFailure
