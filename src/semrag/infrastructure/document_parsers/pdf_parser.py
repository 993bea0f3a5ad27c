"""Parser for PDF."""

import io

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from semrag.domain.value_objects import DocumentType
from semrag.infrastructure.document_parsers.base import ParseResult


def parse_pdf(data: bytes, filename: str | None = None) -> ParseResult:
    """Extract page text from PDF bytes, pages separated by blank lines."""
    try:
        reader = PdfReader(io.BytesIO(data))
        parts = [t for t in (page.extract_text() for page in reader.pages) if t]
    except (PyPdfError, ValueError, OSError) as e:
        raise ValueError(f"Invalid or corrupted PDF: {e}") from e
    return ParseResult(
        text="\n\n".join(parts),
        document_type=DocumentType.PDF,
        page_count=len(reader.pages),
    )
