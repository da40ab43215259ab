"""Error taxonomy shared by the embedding contract and its providers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class EmbeddingError(Exception):
    """Base class for every error raised by embedport."""


class InvalidArgumentError(EmbeddingError, ValueError):
    """A request, text, options value or metadata bag is absent or ill-typed."""


@dataclass
class ProviderError(EmbeddingError, RuntimeError):
    message: str
    provider: str | None = None
    detail: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        if self.provider:
            return f"ProviderError(provider={self.provider}): {self.message}"
        return f"ProviderError: {self.message}"


class UnsupportedOperationError(EmbeddingError, NotImplementedError):
    """A provider declines to support a derived operation."""
