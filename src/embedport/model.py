"""Embedding model contract and the operations derived from its primitive."""

from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from typing import Any, NoReturn, Sequence

from embedport.documents import DocumentExtractor
from embedport.errors import InvalidArgumentError, ProviderError
from embedport.types import EMPTY_OPTIONS, EmbeddingRequest, EmbeddingResponse

logger = logging.getLogger(__name__)

PROBE_TEXT = "Test String"


class EmbeddingModel(ABC):
    """Base class for embedding providers.

    A provider implements ``invoke`` only. ``call`` wraps it with request
    validation and response invariant checks; every other operation is
    expressed through ``call``. Providers may override the derived
    operations for efficiency as long as the semantics are preserved.
    """

    @property
    def provider_name(self) -> str:
        return type(self).__name__

    @abstractmethod
    async def invoke(self, request: EmbeddingRequest) -> EmbeddingResponse:
        """Embed every input of ``request`` against the backing service."""

    async def call(self, request: EmbeddingRequest) -> EmbeddingResponse:
        validate_request(request)
        logger.debug("Dispatching %d input(s) to %s", len(request.inputs), self.provider_name)
        response = await self.invoke(request)
        validate_response(request, response, provider=self.provider_name)
        logger.debug(
            "%s returned %d result(s) with %s dimensions",
            self.provider_name,
            len(response.results),
            response.dimensions,
        )
        return response

    async def embed(self, text: str) -> list[float]:
        if text is None or not isinstance(text, str):
            raise InvalidArgumentError("text must be a string.")
        vectors = await self.embed_batch([text])
        return vectors[0]

    async def embed_batch(self, texts: Sequence[str]) -> list[list[float]]:
        response = await self.embed_for_response(texts)
        return [list(result.embedding) for result in response.results]

    async def embed_for_response(self, texts: Sequence[str]) -> EmbeddingResponse:
        if texts is None:
            raise InvalidArgumentError("texts are required.")
        request = EmbeddingRequest(inputs=texts, options=EMPTY_OPTIONS)
        if not request.inputs:
            return EmbeddingResponse(results=())
        return await self.call(request)

    async def dimensions(self) -> int:
        vector = await self.embed(PROBE_TEXT)
        return len(vector)

    async def embed_document(self, document: Any, extractor: DocumentExtractor) -> list[float]:
        if document is None:
            raise InvalidArgumentError("document is required.")
        if extractor is None:
            raise InvalidArgumentError("a document extractor is required.")
        return await self.embed(extractor.extract_text(document))

    async def aclose(self) -> None:
        return None

    async def __aenter__(self) -> "EmbeddingModel":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


def validate_request(request: EmbeddingRequest) -> None:
    if request is None:
        raise InvalidArgumentError("request is required.")
    if not isinstance(request, EmbeddingRequest):
        raise InvalidArgumentError(f"request must be an EmbeddingRequest, got {type(request).__name__}.")


def validate_response(
    request: EmbeddingRequest,
    response: EmbeddingResponse,
    *,
    provider: str | None = None,
) -> None:
    """Raise ``ProviderError`` unless ``response`` fully answers ``request``."""
    if not isinstance(response, EmbeddingResponse):
        _reject(provider, f"expected an EmbeddingResponse, got {type(response).__name__}.", {})
    expected = len(request.inputs)
    actual = len(response.results)
    if actual != expected:
        _reject(
            provider,
            f"returned {actual} result(s) for {expected} input(s).",
            {"expected": expected, "actual": actual},
        )
    dims: int | None = None
    for position, result in enumerate(response.results):
        if result.index != position:
            _reject(
                provider,
                f"result at position {position} carries index {result.index}.",
                {"position": position, "index": result.index},
            )
        if not result.embedding:
            _reject(provider, f"result {position} has an empty embedding.", {"position": position})
        if dims is None:
            dims = len(result.embedding)
        elif len(result.embedding) != dims:
            _reject(
                provider,
                f"result {position} has {len(result.embedding)} dimensions, expected {dims}.",
                {"position": position, "expected": dims, "actual": len(result.embedding)},
            )


def _reject(provider: str | None, message: str, detail: dict[str, Any]) -> NoReturn:
    logger.warning("Rejecting response from %s: %s", provider or "provider", message)
    raise ProviderError(message=message, provider=provider, detail=detail)
