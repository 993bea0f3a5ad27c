"""Domain entities."""

from semrag.domain.entities.chunk import Chunk
from semrag.domain.entities.raw_document import RawDocument

__all__ = [
    "Chunk",
    "RawDocument",
]
