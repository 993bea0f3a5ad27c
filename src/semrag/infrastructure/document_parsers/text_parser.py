"""Parser for plain text."""

from semrag.domain.value_objects import DocumentType
from semrag.infrastructure.document_parsers.base import ParseResult


def decode_text(data: bytes) -> str:
    """Decode as UTF-8, then cp1251, then UTF-8 with replacement characters."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        pass
    try:
        return data.decode("cp1251")
    except UnicodeDecodeError:
        return data.decode("utf-8", errors="replace")


def parse_txt(data: bytes, filename: str | None = None) -> ParseResult:
    """Plain text (.txt)."""
    return ParseResult(text=decode_text(data), document_type=DocumentType.TXT)
