"""Prompt templates for answer generation."""

from enum import StrEnum


class AnswerMode(StrEnum):
    """What the model should do when the context lacks the answer."""

    GENERAL_KNOWLEDGE = "general_knowledge"
    CONTEXT_ONLY = "context_only"


_GENERAL_KNOWLEDGE_TEMPLATE = """You are a helpful assistant. Answer the question based on the following context. If the answer is not in the context, or if the question requires general knowledge (like comparisons), use your own knowledge to answer.

Context:
{context}

Question: {question}
"""

_CONTEXT_ONLY_TEMPLATE = """You are a helpful assistant. Answer the question using only the following context. If the answer is not in the context, say that you don't know.

Context:
{context}

Question: {question}
"""

_TEMPLATES: dict[AnswerMode, str] = {
    AnswerMode.GENERAL_KNOWLEDGE: _GENERAL_KNOWLEDGE_TEMPLATE,
    AnswerMode.CONTEXT_ONLY: _CONTEXT_ONLY_TEMPLATE,
}


def build_prompt(question: str, context: str, mode: AnswerMode) -> str:
    """Render the template for mode with question and context."""
    return _TEMPLATES[mode].format(context=context, question=question)
