"""LLM provider port - single-turn completion."""

from typing import Protocol


class LLMProvider(Protocol):
    """Port for chat completion. Raises ProviderError on failure."""

    async def complete(self, prompt: str) -> str: ...
