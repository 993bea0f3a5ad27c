"""Supported source document types."""

from enum import StrEnum


class DocumentType(StrEnum):
    """File type of an uploaded document."""

    TXT = "txt"
    PDF = "pdf"
