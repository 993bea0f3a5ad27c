"""Fixed-window character chunker, used when semantic chunking is off or fails."""

from semrag.application.dto.chunking_config import ChunkingConfig
from semrag.domain.entities import Chunk, RawDocument
from semrag.domain.value_objects import CHARACTER_CHUNK_METHOD, ChunkType


class RecursiveChunker:
    """Chunker using overlapping character windows."""

    def chunk(self, document: RawDocument, config: ChunkingConfig) -> list[Chunk]:
        """Split document text into chunks with overlap."""
        return [
            Chunk(
                text=text,
                source=document.source,
                type=document.type,
                chunk_type=ChunkType.CHARACTER,
                chunk_method=CHARACTER_CHUNK_METHOD,
                chunk_index=index,
            )
            for index, text in enumerate(
                split_text(document.content, config.chunk_size, config.chunk_overlap)
            )
        ]


def split_text(text: str, chunk_size: int, chunk_overlap: int) -> list[str]:
    """Slice text into windows of chunk_size sharing chunk_overlap characters."""
    text = text.strip()
    if not text:
        return []

    step = max(1, chunk_size - chunk_overlap)
    chunks: list[str] = []
    start = 0
    while start < len(text):
        window = text[start : start + chunk_size].strip()
        if window:
            chunks.append(window)
        if start + chunk_size >= len(text):
            break
        start += step
    return chunks
