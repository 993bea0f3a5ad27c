"""OpenAI-compatible chat completion provider."""

from openai import AsyncOpenAI, OpenAIError

from semrag.domain.exceptions import ProviderError


class OpenAIChatProvider:
    """LLM provider using the chat completions endpoint."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        model: str,
        temperature: float = 0.7,
    ) -> None:
        self._client = AsyncOpenAI(base_url=base_url, api_key=api_key)
        self._model = model
        self._temperature = temperature

    async def complete(self, prompt: str) -> str:
        """Send prompt as a single user message and return the reply text."""
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self._temperature,
            )
        except OpenAIError as e:
            raise ProviderError(str(e)) from e
        if not response.choices:
            raise ProviderError("Chat completion returned no choices")
        return response.choices[0].message.content or ""
