"""Parser registry: detect the document type of an upload and parse it."""

from pathlib import Path

from semrag.domain.value_objects import DocumentType
from semrag.infrastructure.document_parsers.base import DocumentParser, ParseResult
from semrag.infrastructure.document_parsers.pdf_parser import parse_pdf
from semrag.infrastructure.document_parsers.text_parser import parse_txt

_PARSERS: dict[DocumentType, DocumentParser] = {
    DocumentType.TXT: parse_txt,
    DocumentType.PDF: parse_pdf,
}

_MIME_TYPES: dict[str, DocumentType] = {
    "text/plain": DocumentType.TXT,
    "application/pdf": DocumentType.PDF,
}

_EXTENSIONS = {t.value for t in _PARSERS}


def detect_type(
    filename: str | None = None, content_type: str | None = None
) -> DocumentType | None:
    """Document type from the file extension, else from the MIME type."""
    if filename:
        ext = Path(filename).suffix.lstrip(".").lower()
        if ext in _EXTENSIONS:
            return DocumentType(ext)
    if content_type:
        return _MIME_TYPES.get(content_type.split(";")[0].strip().lower())
    return None


def parse_file(
    data: bytes,
    filename: str | None = None,
    content_type: str | None = None,
) -> ParseResult:
    """Parse file bytes. Raises ValueError for unsupported types or parse errors."""
    document_type = detect_type(filename, content_type)
    if document_type is None:
        label = (Path(filename).suffix if filename else "") or content_type or "unknown"
        raise ValueError(f"No parser for file type: {label}")
    return _PARSERS[document_type](data, filename)


def is_supported(filename: str) -> bool:
    return detect_type(filename) is not None


def supported_extensions() -> list[str]:
    return sorted(t.value for t in _PARSERS)
