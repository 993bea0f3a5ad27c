"""Document API resources - upload and list source documents."""

import re
from urllib.parse import unquote_to_bytes

import falcon
import falcon.asgi

from semrag.application.use_cases.ingestion.ingest_directory import (
    IngestDirectoryUseCase,
)
from semrag.domain.exceptions import ProviderError, ValidationError
from semrag.infrastructure.documents.directory import DocumentDirectory
from semrag.interfaces.api.resources.ingest import ingestion_stats_to_dict

# RFC 5987: filename*=charset''percent-encoded
_FILENAME_STAR_RFC5987 = re.compile(r"([\w-]+)''(.+)")

_FILE_FIELDS = ("file", "files", "files[]")


def _decode_filename(raw: str | None) -> str:
    """Decode filename to UTF-8, fixing mojibake when UTF-8 bytes were read as Latin-1."""
    if not raw or not raw.strip():
        return ""
    raw = raw.strip()
    try:
        return raw.encode("latin-1").decode("utf-8")
    except (UnicodeEncodeError, UnicodeDecodeError):
        return raw


def _parse_filename_star(raw_header_value: bytes) -> str | None:
    """Extract filename*= (RFC 5987) from a raw Content-Disposition value."""
    if not raw_header_value:
        return None
    decoded = raw_header_value.decode("utf-8", errors="replace")
    idx = decoded.find("filename*=")
    if idx == -1:
        return None
    match = _FILENAME_STAR_RFC5987.match(decoded[idx + len("filename*=") :].strip())
    if not match:
        return None
    charset, encoded = match.groups()
    try:
        return unquote_to_bytes(encoded.split(";")[0]).decode(charset)
    except (ValueError, LookupError):
        return None


def _get_part_filename(part: object) -> str:
    """Filename of a multipart part: part.filename, else filename* from headers."""
    raw = (getattr(part, "filename", None) or "").strip()
    if raw:
        return _decode_filename(raw)
    headers = getattr(part, "_headers", None)
    if isinstance(headers, dict):
        star = _parse_filename_star(headers.get(b"content-disposition", b""))
        if star:
            return star.strip()
    return ""


class DocumentsResource:
    """GET /v1/documents - list files; POST /v1/documents - upload one file and re-ingest."""

    def __init__(
        self,
        document_directory: DocumentDirectory,
        ingest_directory: IngestDirectoryUseCase,
    ) -> None:
        self._document_directory = document_directory
        self._ingest_directory = ingest_directory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = {"items": self._document_directory.list_sources()}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Save uploaded .pdf/.txt to the docs directory, then ingest all documents."""
        if "multipart/form-data" not in (req.content_type or ""):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "multipart/form-data required"}
            return
        try:
            form = await req.get_media()
        except falcon.MediaMalformedError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Invalid multipart: {e}"}
            return

        upload: tuple[str, bytes] | None = None
        async for part in form:
            if (part.name or "") in _FILE_FIELDS and upload is None:
                data = await part.get_data()
                if data:
                    upload = (_get_part_filename(part), bytes(data))
        if upload is None:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "No file provided"}
            return

        filename, data = upload
        try:
            self._document_directory.save(filename, data)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            result = await self._ingest_directory.execute()
        except (ValidationError, ProviderError) as e:
            resp.status = falcon.HTTP_500
            resp.media = {"error": "File uploaded but ingestion failed", "details": str(e)}
            return

        resp.media = {
            "success": True,
            "message": f'Uploaded "{filename}" and indexed documents',
            "stats": ingestion_stats_to_dict(result),
        }
        resp.status = falcon.HTTP_201
