"""Embedding provider port - OpenAI compatible API."""

from typing import Protocol


class EmbeddingProvider(Protocol):
    """Port for generating text embeddings.

    Implementations raise ProviderError when the provider call fails.
    """

    async def embed_query(self, text: str) -> list[float]: ...

    async def embed(self, texts: list[str]) -> list[list[float]]: ...
