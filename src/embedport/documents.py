"""Document-to-text extraction used by ``EmbeddingModel.embed_document``."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

from embedport.errors import InvalidArgumentError


@runtime_checkable
class DocumentExtractor(Protocol):
    def extract_text(self, document: Any) -> str:
        """Reduce a richer content object to the text that gets embedded."""


class FieldDocumentExtractor:
    """Join named fields of a mapping or object into one text."""

    def __init__(self, fields: Sequence[str] = ("title", "content"), separator: str = "\n\n") -> None:
        if not fields:
            raise InvalidArgumentError("at least one document field is required.")
        self._fields = tuple(fields)
        self._separator = separator

    def extract_text(self, document: Any) -> str:
        if document is None:
            raise InvalidArgumentError("document is required.")
        parts: list[str] = []
        for name in self._fields:
            if isinstance(document, Mapping):
                value = document.get(name)
            else:
                value = getattr(document, name, None)
            if value is None:
                continue
            text = str(value).strip()
            if text:
                parts.append(text)
        if not parts:
            raise InvalidArgumentError(f"document has no text in fields {', '.join(self._fields)}.")
        return self._separator.join(parts)
