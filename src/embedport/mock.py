"""Mock embedding provider for offline use and testing."""

from __future__ import annotations

import asyncio
import hashlib
import math
import random

from embedport.errors import InvalidArgumentError, ProviderError
from embedport.model import EmbeddingModel
from embedport.types import EmbeddingRequest, EmbeddingResponse, build_response


class MockEmbeddingModel(EmbeddingModel):
    def __init__(
        self,
        model: str = "mock-embedding",
        dims: int = 1536,
        *,
        latency_ms: int = 0,
        error_rate: float = 0.0,
    ) -> None:
        if dims < 1:
            raise InvalidArgumentError("dims must be a positive integer.")
        if not 0.0 <= error_rate <= 1.0:
            raise InvalidArgumentError("error_rate must be between 0 and 1.")
        self._model = model
        self._dims = dims
        self._latency_ms = latency_ms
        self._error_rate = error_rate

    @property
    def provider_name(self) -> str:
        return "mock"

    async def invoke(self, request: EmbeddingRequest) -> EmbeddingResponse:
        model = request.options.model or self._model
        dims = request.options.dimensions or self._dims
        if self._error_rate > 0 and _should_error(model, request.inputs, self._error_rate):
            raise ProviderError(
                message="MockEmbeddingModel simulated transient error.",
                provider=self.provider_name,
                detail={"model": model},
            )
        if self._latency_ms > 0:
            await asyncio.sleep(self._latency_ms / 1000.0)

        vectors = [_mock_vector(model, text, dims) for text in request.inputs]
        tokens = [_mock_tokens(text) for text in request.inputs]
        total_tokens = sum(tokens)
        return build_response(
            vectors,
            metadata={
                "model": model,
                "usage": {"prompt_tokens": total_tokens, "total_tokens": total_tokens},
                "mock": True,
            },
            result_metadata=[{"tokens": count} for count in tokens],
        )


def _mock_vector(model: str, text: str, dims: int) -> list[float]:
    seed = int(hashlib.sha256((model + "|" + text).encode("utf-8")).hexdigest(), 16) % (2**32)
    rng = random.Random(seed)
    vec = [rng.gauss(0, 1) for _ in range(dims)]
    norm = math.sqrt(sum(value * value for value in vec)) or 1.0
    return [value / norm for value in vec]


def _mock_tokens(text: str) -> int:
    return max(1, len(text) // 4)


def _stable_seed(model: str, inputs: tuple[str, ...]) -> bytes:
    hasher = hashlib.sha256()
    hasher.update(model.encode("utf-8"))
    for text in inputs:
        encoded = text.encode("utf-8")
        hasher.update(f"|{len(encoded)}:".encode("ascii"))
        hasher.update(encoded)
    return hasher.digest()


def _should_error(model: str, inputs: tuple[str, ...], error_rate: float) -> bool:
    if error_rate >= 1.0:
        return True
    threshold = int(error_rate * 255)
    return _stable_seed(model, inputs)[0] < threshold
