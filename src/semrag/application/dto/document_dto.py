"""Document loading DTOs."""

from dataclasses import dataclass, field

from semrag.domain.entities import RawDocument


@dataclass(frozen=True)
class DocumentFailure:
    """A document that could not be loaded or chunked."""

    source: str
    error: str


@dataclass
class LoadResult:
    """Documents read from storage plus the files that failed."""

    documents: list[RawDocument] = field(default_factory=list)
    failures: list[DocumentFailure] = field(default_factory=list)
