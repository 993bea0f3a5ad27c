"""Pytest fixtures for semrag tests."""

from __future__ import annotations

import asyncio

import pytest

from semrag.application.dto.chunking_config import ChunkingConfig
from semrag.application.dto.document_dto import LoadResult
from semrag.domain.entities import Chunk, RawDocument
from semrag.domain.exceptions import ProviderError
from semrag.domain.value_objects import (
    SEMANTIC_CHUNK_METHOD,
    ChunkingStrategy,
    ChunkType,
    DocumentType,
)

DEFAULT_VECTOR = [1.0, 0.0]


# --- Fake providers ---


class FakeEmbeddingProvider:
    """Embedding provider returning preset vectors per text (DEFAULT_VECTOR otherwise)."""

    def __init__(self, vectors: dict[str, list[float]] | None = None) -> None:
        self._vectors = vectors or {}
        self.queries: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def embed_query(self, text: str) -> list[float]:
        self.queries.append(text)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        await asyncio.sleep(0)
        self.in_flight -= 1
        return list(self._vectors.get(text, DEFAULT_VECTOR))

    async def embed(self, texts: list[str]) -> list[list[float]]:
        return [await self.embed_query(t) for t in texts]


class FailingEmbeddingProvider(FakeEmbeddingProvider):
    """Raises ProviderError on the Nth embed_query call (1-based)."""

    def __init__(self, fail_on_call: int = 1) -> None:
        super().__init__()
        self._fail_on_call = fail_on_call
        self.calls = 0

    async def embed_query(self, text: str) -> list[float]:
        self.calls += 1
        if self.calls == self._fail_on_call:
            raise ProviderError("quota exceeded")
        return await super().embed_query(text)


class FakeLLMProvider:
    """Records prompts and returns a fixed answer, or raises the given error."""

    def __init__(self, answer: str = "fake answer", error: Exception | None = None) -> None:
        self._answer = answer
        self._error = error
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self._error:
            raise self._error
        return self._answer


# --- Fake storage ---


class InMemoryVectorStore:
    """Vector store keeping chunks in a list; search returns them in insertion order."""

    def __init__(self) -> None:
        self.chunks: list[Chunk] = []
        self.index_calls = 0
        self.searches: list[tuple[str, int, str | None]] = []

    async def index(self, chunks: list[Chunk], sources: list[str] | None = None) -> int:
        self.index_calls += 1
        sources = set(sources or ()) | {c.source for c in chunks}
        self.chunks = [c for c in self.chunks if c.source not in sources] + list(chunks)
        return len(chunks)

    async def search(self, query: str, k: int, source: str | None = None) -> list[Chunk]:
        self.searches.append((query, k, source))
        found = [c for c in self.chunks if source is None or c.source == source]
        return found[:k]


class FakeDocumentSource:
    """Document source returning a fixed LoadResult."""

    def __init__(self, result: LoadResult) -> None:
        self._result = result

    def load(self) -> LoadResult:
        return self._result


def make_document(content: str, source: str = "doc.txt") -> RawDocument:
    return RawDocument(content=content, source=source, type=DocumentType.TXT)


def make_chunk(text: str, source: str = "doc.txt", index: int = 0) -> Chunk:
    return Chunk(
        text=text,
        source=source,
        type=DocumentType.TXT,
        chunk_type=ChunkType.SEMANTIC,
        chunk_method=SEMANTIC_CHUNK_METHOD,
        chunk_index=index,
    )


# --- Fixtures ---


@pytest.fixture
def embedding_provider() -> FakeEmbeddingProvider:
    return FakeEmbeddingProvider()


@pytest.fixture
def vector_store() -> InMemoryVectorStore:
    return InMemoryVectorStore()


@pytest.fixture
def llm_provider() -> FakeLLMProvider:
    return FakeLLMProvider()


@pytest.fixture
def chunking_config() -> ChunkingConfig:
    """Character chunking config for RecursiveChunker tests."""
    return ChunkingConfig(
        chunk_size=100,
        chunk_overlap=20,
        strategy=ChunkingStrategy.CHARACTER,
    )


@pytest.fixture
def semantic_config() -> ChunkingConfig:
    """Default semantic chunking bounds."""
    return ChunkingConfig(
        strategy=ChunkingStrategy.SEMANTIC,
        min_chunk_size=200,
        max_chunk_size=1000,
        similarity_threshold=0.75,
    )
