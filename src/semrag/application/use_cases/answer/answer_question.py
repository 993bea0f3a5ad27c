"""Answer question use case - retrieve context and ask the LLM."""

from loguru import logger

from semrag.application.ports import LLMProvider, VectorStore
from semrag.application.prompts import AnswerMode, build_prompt
from semrag.domain.exceptions import ValidationError

_PREVIEW_CHARS = 150


class AnswerQuestionUseCase:
    """Retrieval-augmented answer: top-k chunks as context for one completion."""

    def __init__(
        self,
        vector_store: VectorStore,
        llm_provider: LLMProvider,
        top_k: int = 4,
        answer_mode: AnswerMode = AnswerMode.GENERAL_KNOWLEDGE,
    ) -> None:
        self._vector_store = vector_store
        self._llm_provider = llm_provider
        self._top_k = top_k
        self._answer_mode = answer_mode

    async def execute(self, question: str, document: str | None = None) -> str:
        """Answer question, optionally restricted to chunks of one document."""
        if not question or not question.strip():
            raise ValidationError("Question cannot be empty")

        logger.info(f'Searching for: "{question}"')
        if document:
            logger.info(f"Filtering by document: {document}")
        chunks = await self._vector_store.search(
            question, self._top_k, source=document or None
        )

        if not chunks:
            logger.warning("No relevant documents found")
        for i, chunk in enumerate(chunks, start=1):
            preview = chunk.text[:_PREVIEW_CHARS].replace("\n", " ")
            logger.debug(f"Chunk {i} (source: {chunk.source}): {preview}...")

        context = "\n\n".join(chunk.text for chunk in chunks)
        prompt = build_prompt(question, context, self._answer_mode)
        return await self._llm_provider.complete(prompt)
