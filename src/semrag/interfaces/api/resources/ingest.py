"""Ingest API resource."""

import falcon.asgi

from semrag.application.dto.ingestion_dto import IngestionResult
from semrag.application.use_cases.ingestion.ingest_directory import (
    IngestDirectoryUseCase,
)
from semrag.domain.exceptions import ProviderError, ValidationError


def ingestion_stats_to_dict(result: IngestionResult) -> dict:
    stats = result.stats
    return {
        "documents_processed": stats.document_count,
        "chunks_created": stats.chunk_count,
        "chunking_method": stats.chunking_method.value,
        "average_chunk_size": stats.average_chunk_size,
    }


def ingestion_to_dict(result: IngestionResult) -> dict:
    return {
        "success": True,
        "message": (
            f"Successfully indexed {result.stats.chunk_count} chunks "
            f"from {result.stats.document_count} documents"
        ),
        "stats": ingestion_stats_to_dict(result),
        "errors": [
            {"filename": f.source, "error": f.error} for f in result.failed_documents
        ],
        "empty_documents": result.empty_documents,
    }


class IngestResource:
    """POST /v1/ingest - chunk and index every document in the docs directory."""

    def __init__(self, ingest_directory: IngestDirectoryUseCase) -> None:
        self._ingest_directory = ingest_directory

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            result = await self._ingest_directory.execute()
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except ProviderError as e:
            resp.status = falcon.HTTP_500
            resp.media = {"error": "Failed to ingest documents", "details": str(e)}
            return
        resp.media = ingestion_to_dict(result)
        resp.status = falcon.HTTP_200
