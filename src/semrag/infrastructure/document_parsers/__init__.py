"""Document parsers: extract text from uploaded files."""

from semrag.infrastructure.document_parsers.base import ParseResult
from semrag.infrastructure.document_parsers.registry import (
    is_supported,
    parse_file,
    supported_extensions,
)

__all__ = ["ParseResult", "is_supported", "parse_file", "supported_extensions"]
