"""OpenAI-compatible embedding provider."""

from openai import AsyncOpenAI, OpenAIError

from semrag.domain.exceptions import ProviderError


class OpenAIEmbeddingProvider:
    """Embedding provider using OpenAI-compatible API."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        model: str,
    ) -> None:
        self._client = AsyncOpenAI(base_url=base_url, api_key=api_key)
        self._model = model

    async def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings for texts."""
        if not texts:
            return []
        try:
            response = await self._client.embeddings.create(
                model=self._model,
                input=texts,
            )
        except OpenAIError as e:
            raise ProviderError(f"Embedding request failed: {e}") from e
        if len(response.data) != len(texts):
            raise ProviderError(
                f"Embedding response has {len(response.data)} vectors for {len(texts)} texts"
            )
        return [d.embedding for d in response.data]

    async def embed_query(self, text: str) -> list[float]:
        """Generate embedding for a single text."""
        return (await self.embed([text]))[0]
