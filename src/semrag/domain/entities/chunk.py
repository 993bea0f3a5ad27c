"""Chunk entity - retrieval unit produced by a chunker."""

from dataclasses import dataclass

from semrag.domain.value_objects import ChunkType, DocumentType


@dataclass(frozen=True)
class Chunk:
    """Contiguous span of document text, indexed and retrieved as one unit."""

    text: str
    source: str
    type: DocumentType
    chunk_type: ChunkType
    chunk_method: str
    chunk_index: int

    @property
    def metadata(self) -> dict[str, str | int]:
        """Metadata in the shape stored next to the vector."""
        return {
            "source": self.source,
            "type": self.type.value,
            "chunkType": self.chunk_type.value,
            "chunkMethod": self.chunk_method,
            "chunkIndex": self.chunk_index,
        }
