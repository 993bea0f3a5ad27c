"""Raw document entity."""

from dataclasses import dataclass

from semrag.domain.value_objects import DocumentType


@dataclass(frozen=True)
class RawDocument:
    """Loaded document text with its origin."""

    content: str
    source: str
    type: DocumentType

    @property
    def metadata(self) -> dict[str, str]:
        return {"source": self.source, "type": self.type.value}
