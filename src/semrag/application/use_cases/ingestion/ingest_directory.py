"""Ingest directory use case - load every stored document, then ingest."""

from semrag.application.dto.ingestion_dto import IngestionResult
from semrag.application.ports import DocumentSource
from semrag.application.use_cases.ingestion.ingest_documents import (
    IngestDocumentsUseCase,
)
from semrag.domain.exceptions import ValidationError


class IngestDirectoryUseCase:
    """Load documents from a source and run ingestion over all of them."""

    def __init__(
        self,
        document_source: DocumentSource,
        ingest_documents: IngestDocumentsUseCase,
    ) -> None:
        self._document_source = document_source
        self._ingest_documents = ingest_documents

    async def execute(self) -> IngestionResult:
        """Raises ValidationError when no document could be loaded."""
        loaded = self._document_source.load()
        if not loaded.documents:
            raise ValidationError("No documents found in docs directory")
        return await self._ingest_documents.execute(
            loaded.documents, failed_documents=loaded.failures
        )
