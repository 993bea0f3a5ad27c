"""Document source port - where raw documents are loaded from."""

from typing import Protocol

from semrag.application.dto.document_dto import LoadResult


class DocumentSource(Protocol):
    """Port for loading all stored documents."""

    def load(self) -> LoadResult: ...
