"""Base protocol for document parsers."""

from typing import Protocol

from semrag.domain.value_objects import DocumentType


class ParseResult:
    """Result of parsing a file: extracted text and its document type."""

    __slots__ = ("text", "document_type", "page_count")

    def __init__(
        self,
        text: str,
        document_type: DocumentType,
        page_count: int | None = None,
    ) -> None:
        self.text = text
        self.document_type = document_type
        self.page_count = page_count


class DocumentParser(Protocol):
    """Parser that extracts text from file bytes."""

    def __call__(self, data: bytes, filename: str | None = None) -> ParseResult:
        """Extract text. Raises ValueError on parse error."""
        ...
