"""Application ports - interfaces for external adapters."""

from semrag.application.ports.chunker import Chunker
from semrag.application.ports.document_source import DocumentSource
from semrag.application.ports.embedding_provider import EmbeddingProvider
from semrag.application.ports.llm_provider import LLMProvider
from semrag.application.ports.semantic_chunker import SemanticChunker
from semrag.application.ports.vector_store import VectorStore

__all__ = [
    "Chunker",
    "DocumentSource",
    "EmbeddingProvider",
    "LLMProvider",
    "SemanticChunker",
    "VectorStore",
]
