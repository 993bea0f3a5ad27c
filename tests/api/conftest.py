"""Fixtures for API tests."""

from pathlib import Path

import pytest
from falcon.testing import TestClient

from semrag.application.use_cases.answer.answer_question import AnswerQuestionUseCase
from semrag.application.use_cases.ingestion.ingest_directory import (
    IngestDirectoryUseCase,
)
from semrag.application.use_cases.ingestion.ingest_documents import (
    IngestDocumentsUseCase,
)
from semrag.infrastructure.chunking.recursive_chunker import RecursiveChunker
from semrag.infrastructure.chunking.semantic_chunker import SemanticChunker
from semrag.infrastructure.documents.directory import DocumentDirectory
from semrag.interfaces.api.app import create_app
from semrag.interfaces.api.middleware.cors import CORSMiddleware
from semrag.interfaces.api.resources.chat import ChatResource
from semrag.interfaces.api.resources.documents import DocumentsResource
from semrag.interfaces.api.resources.health import HealthResource
from semrag.interfaces.api.resources.ingest import IngestResource

from tests.conftest import FakeEmbeddingProvider, FakeLLMProvider, InMemoryVectorStore


def build_client(
    docs_dir: Path,
    embedding_provider=None,
    llm_provider=None,
    vector_store=None,
) -> TestClient:
    """Falcon ASGI test client wired with fake providers and a real docs directory."""
    embedding_provider = embedding_provider or FakeEmbeddingProvider()
    llm_provider = llm_provider or FakeLLMProvider()
    vector_store = vector_store if vector_store is not None else InMemoryVectorStore()

    document_directory = DocumentDirectory(docs_dir)
    ingest_directory = IngestDirectoryUseCase(
        document_directory,
        IngestDocumentsUseCase(
            semantic_chunker=SemanticChunker(embedding_provider),
            fallback_chunker=RecursiveChunker(),
            vector_store=vector_store,
        ),
    )
    app = create_app(
        documents_resource=DocumentsResource(document_directory, ingest_directory),
        ingest_resource=IngestResource(ingest_directory),
        chat_resource=ChatResource(AnswerQuestionUseCase(vector_store, llm_provider)),
        health_resource=HealthResource(),
        middleware=[CORSMiddleware(["http://localhost:3000"])],
    )
    return TestClient(app)


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    return tmp_path / "docs"


@pytest.fixture
def vector_store() -> InMemoryVectorStore:
    return InMemoryVectorStore()


@pytest.fixture
def llm_provider() -> FakeLLMProvider:
    return FakeLLMProvider(answer="The answer is 42.")


@pytest.fixture
def client(docs_dir: Path, vector_store: InMemoryVectorStore, llm_provider: FakeLLMProvider):
    """Falcon ASGI test client."""
    return build_client(docs_dir, llm_provider=llm_provider, vector_store=vector_store)
