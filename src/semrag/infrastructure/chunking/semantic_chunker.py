"""Semantic chunker - split documents at topic boundaries using sentence embeddings."""

import asyncio

from loguru import logger

from semrag.application.dto.chunking_config import ChunkingConfig
from semrag.application.dto.chunking_result import (
    ChunkingFailure,
    ChunkingSuccess,
    SemanticChunkingResult,
)
from semrag.application.ports import EmbeddingProvider
from semrag.domain.entities import Chunk, RawDocument
from semrag.domain.exceptions import ProviderError
from semrag.domain.value_objects import SEMANTIC_CHUNK_METHOD, ChunkType
from semrag.infrastructure.chunking.sentence_segmenter import segment_sentences
from semrag.infrastructure.chunking.similarity import cosine_similarity

SENTENCE_SEPARATOR = ". "


def group_sentences(
    sentences: list[str],
    vectors: list[list[float]],
    config: ChunkingConfig,
) -> list[list[str]]:
    """Group consecutive sentences into chunks in a single forward pass.

    A chunk is closed before sentence ``i`` when the similarity between
    sentence ``i`` and sentence ``i - 1`` drops below the threshold and the
    chunk already holds ``min_chunk_size`` characters, or when adding the
    sentence would push the chunk past ``max_chunk_size``. Sentences are never
    split, so a single sentence longer than the maximum becomes its own chunk.
    The last chunk is always emitted, whatever its size.

    Sizes count sentence characters only. Chunks are joined with
    ``SENTENCE_SEPARATOR``, so the text of an n-sentence chunk is
    ``2 * (n - 1)`` characters longer than its size and may exceed
    ``max_chunk_size`` by that much.
    """
    if not sentences:
        return []
    if len(vectors) != len(sentences):
        raise ValueError(
            f"Expected {len(sentences)} vectors, got {len(vectors)}"
        )

    groups: list[list[str]] = []
    current = [sentences[0]]
    size = len(sentences[0])

    for i in range(1, len(sentences)):
        sentence = sentences[i]
        sim = cosine_similarity(vectors[i], vectors[i - 1])
        would_exceed = size + len(sentence) > config.max_chunk_size
        is_topic_change = (
            sim < config.similarity_threshold and size >= config.min_chunk_size
        )

        if is_topic_change or would_exceed:
            reason = (
                f"topic change (sim: {sim:.3f})"
                if is_topic_change
                else f"size limit ({size} chars)"
            )
            logger.debug(
                f"Chunk #{len(groups) + 1} created: {len(current)} sentences, "
                f"{size} chars - {reason}"
            )
            groups.append(current)
            current = []
            size = 0

        current.append(sentence)
        size += len(sentence)

    logger.debug(
        f"Chunk #{len(groups) + 1} created: {len(current)} sentences, "
        f"{size} chars - final chunk"
    )
    groups.append(current)
    return groups


class SemanticChunker:
    """Chunker that breaks at drops in consecutive-sentence similarity."""

    def __init__(self, embedding_provider: EmbeddingProvider) -> None:
        self._embedding_provider = embedding_provider

    async def chunk_documents(
        self, documents: list[RawDocument], config: ChunkingConfig
    ) -> SemanticChunkingResult:
        """Chunk every document, or fail as a whole on the first provider error."""
        logger.info(
            f"Semantic chunking started: min={config.min_chunk_size}, "
            f"max={config.max_chunk_size}, threshold={config.similarity_threshold}"
        )
        chunks: list[Chunk] = []
        empty_documents: list[str] = []
        for document in documents:
            try:
                document_chunks = await self.chunk_document(document, config)
            except ProviderError as e:
                logger.error(f"Semantic chunking aborted at {document.source}: {e}")
                return ChunkingFailure(error=e, source=document.source)
            if not document_chunks:
                empty_documents.append(document.source)
            chunks.extend(document_chunks)

        logger.info(
            f"Semantic chunking complete: {len(chunks)} chunks "
            f"across {len(documents)} documents"
        )
        return ChunkingSuccess(chunks=chunks, empty_documents=empty_documents)

    async def chunk_document(
        self, document: RawDocument, config: ChunkingConfig
    ) -> list[Chunk]:
        """Chunk one document. Raises ProviderError if any embedding fails."""
        sentences = list(
            segment_sentences(document.content, config.min_sentence_length)
        )
        if not sentences:
            logger.warning(f"No sentences left after filtering: {document.source}")
            return []

        logger.info(f"Processing {document.source}: {len(sentences)} sentences")
        vectors = await self._embed_sentences(sentences)
        groups = group_sentences(sentences, vectors, config)

        chunks = [
            Chunk(
                text=SENTENCE_SEPARATOR.join(group),
                source=document.source,
                type=document.type,
                chunk_type=ChunkType.SEMANTIC,
                chunk_method=SEMANTIC_CHUNK_METHOD,
                chunk_index=index,
            )
            for index, group in enumerate(groups)
        ]
        logger.info(f"{document.source}: {len(chunks)} chunks created")
        return chunks

    async def _embed_sentences(self, sentences: list[str]) -> list[list[float]]:
        """Embed all sentences concurrently, preserving order.

        The first failing request cancels the ones still in flight.
        """
        try:
            async with asyncio.TaskGroup() as tg:
                tasks = [
                    tg.create_task(self._embedding_provider.embed_query(s))
                    for s in sentences
                ]
        except ExceptionGroup as eg:
            first = next((e for e in eg.exceptions if isinstance(e, ProviderError)), None)
            if first is None:
                raise
            raise first from None
        vectors = [t.result() for t in tasks]
        dimensions = {len(v) for v in vectors}
        if len(dimensions) != 1 or 0 in dimensions:
            raise ProviderError(
                f"Embedding provider returned vectors of dimensions {sorted(dimensions)}"
            )
        return list(vectors)
