from __future__ import annotations

from typing import Any, Sequence

from embedport.model import EmbeddingModel
from embedport.types import EmbeddingRequest, EmbeddingResponse, VectorResult


class FakeEmbeddingModel(EmbeddingModel):
    """Counts invocations and answers with scripted vectors."""

    def __init__(
        self,
        vectors: Sequence[Sequence[float]] | None = None,
        *,
        dims: int = 2,
        metadata: dict[str, Any] | None = None,
        result_count: int | None = None,
        indices: Sequence[int] | None = None,
    ) -> None:
        self.vectors = [list(vector) for vector in vectors] if vectors is not None else None
        self.dims = dims
        self.metadata = metadata or {}
        self.result_count = result_count
        self.indices = indices
        self.calls = 0
        self.requests: list[EmbeddingRequest] = []

    async def invoke(self, request: EmbeddingRequest) -> EmbeddingResponse:
        self.calls += 1
        self.requests.append(request)
        count = len(request.inputs) if self.result_count is None else self.result_count
        results = []
        for position in range(count):
            if self.vectors is not None:
                vector = self.vectors[position % len(self.vectors)]
            else:
                vector = [float(len(request.inputs[position % len(request.inputs)]))] + [0.0] * (self.dims - 1)
            index = self.indices[position] if self.indices is not None else position
            results.append(VectorResult(embedding=tuple(vector), index=index, metadata={"position": position}))
        return EmbeddingResponse(results=tuple(results), metadata=self.metadata)
