"""Filesystem directory holding uploaded source documents."""

from pathlib import Path

from loguru import logger

from semrag.application.dto.document_dto import DocumentFailure, LoadResult
from semrag.domain.entities import RawDocument
from semrag.domain.exceptions import ValidationError
from semrag.infrastructure.document_parsers import (
    is_supported,
    parse_file,
    supported_extensions,
)


class DocumentDirectory:
    """Stores uploads and loads every supported file as a RawDocument.

    A document's ``source`` is its file name, which is also what answer
    requests filter on.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def save(self, filename: str, data: bytes) -> Path:
        """Write an uploaded file. Raises ValidationError for unsupported names."""
        name = Path(filename.replace("\\", "/")).name
        if not name or not is_supported(name):
            allowed = ", ".join(f".{e}" for e in supported_extensions())
            raise ValidationError(f"Unsupported file type. Only {allowed} are supported.")
        self._path.mkdir(parents=True, exist_ok=True)
        target = self._path / name
        target.write_bytes(data)
        logger.info(f"File saved: {name}")
        return target

    def list_sources(self) -> list[str]:
        """Names of supported files in the directory, sorted."""
        if not self._path.is_dir():
            return []
        return sorted(
            p.name for p in self._path.iterdir() if p.is_file() and is_supported(p.name)
        )

    def load(self) -> LoadResult:
        """Load all supported files; files that fail are reported, not raised."""
        result = LoadResult()
        for name in self.list_sources():
            try:
                parsed = parse_file((self._path / name).read_bytes(), filename=name)
            except (OSError, ValueError) as e:
                logger.error(f"Failed to load {name}: {e}")
                result.failures.append(DocumentFailure(source=name, error=str(e)))
                continue
            result.documents.append(
                RawDocument(content=parsed.text, source=name, type=parsed.document_type)
            )
        logger.info(
            f"Loaded {len(result.documents)} documents from {self._path} "
            f"({len(result.failures)} failed)"
        )
        return result
