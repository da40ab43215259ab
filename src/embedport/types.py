"""Embedding request/response types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from embedport.errors import InvalidArgumentError
from embedport.metadata import Metadata, freeze_metadata, metadata_key, thaw_metadata


@dataclass(frozen=True)
class EmbeddingOptions:
    model: str | None = None
    dimensions: int | None = None
    extra: Metadata = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.model is not None and not isinstance(self.model, str):
            raise InvalidArgumentError("options.model must be a string.")
        if self.dimensions is not None:
            if isinstance(self.dimensions, bool) or not isinstance(self.dimensions, int) or self.dimensions < 1:
                raise InvalidArgumentError("options.dimensions must be a positive integer.")
        object.__setattr__(self, "extra", freeze_metadata(self.extra, path="options.extra"))

    def __hash__(self) -> int:
        return hash((self.model, self.dimensions, metadata_key(self.extra)))

    @classmethod
    def empty(cls) -> "EmbeddingOptions":
        return EMPTY_OPTIONS

    @property
    def is_empty(self) -> bool:
        return self.model is None and self.dimensions is None and not self.extra

    def to_dict(self) -> dict[str, Any]:
        return {
            "model": self.model,
            "dimensions": self.dimensions,
            "extra": thaw_metadata(self.extra),
        }


EMPTY_OPTIONS = EmbeddingOptions()


@dataclass(frozen=True)
class EmbeddingRequest:
    inputs: tuple[str, ...]
    options: EmbeddingOptions = EMPTY_OPTIONS

    def __post_init__(self) -> None:
        inputs = self.inputs
        if inputs is None:
            raise InvalidArgumentError("request inputs are required.")
        if isinstance(inputs, (str, bytes)) or not isinstance(inputs, Sequence):
            raise InvalidArgumentError("request inputs must be a sequence of strings.")
        for position, text in enumerate(inputs):
            if not isinstance(text, str):
                raise InvalidArgumentError(f"request input {position} must be a string, got {type(text).__name__}.")
        if self.options is None:
            raise InvalidArgumentError("request options are required; use EMPTY_OPTIONS for provider defaults.")
        if not isinstance(self.options, EmbeddingOptions):
            raise InvalidArgumentError("request options must be an EmbeddingOptions instance.")
        object.__setattr__(self, "inputs", tuple(inputs))

    def __len__(self) -> int:
        return len(self.inputs)


@dataclass(frozen=True)
class VectorResult:
    embedding: tuple[float, ...]
    index: int
    metadata: Metadata = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.embedding is None:
            raise InvalidArgumentError("result embedding is required.")
        if isinstance(self.index, bool) or not isinstance(self.index, int) or self.index < 0:
            raise InvalidArgumentError("result index must be a non-negative integer.")
        try:
            embedding = tuple(float(value) for value in self.embedding)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"result embedding must contain only numbers: {exc}") from exc
        object.__setattr__(self, "embedding", embedding)
        object.__setattr__(self, "metadata", freeze_metadata(self.metadata))

    @property
    def dims(self) -> int:
        return len(self.embedding)

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "embedding": list(self.embedding),
            "metadata": thaw_metadata(self.metadata),
        }


@dataclass(frozen=True)
class EmbeddingResponse:
    results: tuple[VectorResult, ...]
    metadata: Metadata = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.results is None:
            raise InvalidArgumentError("response results are required.")
        results = tuple(self.results)
        for result in results:
            if not isinstance(result, VectorResult):
                raise InvalidArgumentError("response results must be VectorResult instances.")
        object.__setattr__(self, "results", results)
        object.__setattr__(self, "metadata", freeze_metadata(self.metadata))

    def __len__(self) -> int:
        return len(self.results)

    @property
    def embeddings(self) -> list[list[float]]:
        return [list(result.embedding) for result in self.results]

    @property
    def dimensions(self) -> int | None:
        if not self.results:
            return None
        return self.results[0].dims

    def to_dict(self) -> dict[str, Any]:
        return {
            "results": [result.to_dict() for result in self.results],
            "metadata": thaw_metadata(self.metadata),
        }


def build_response(
    vectors: Sequence[Sequence[float]],
    *,
    metadata: Mapping[str, Any] | None = None,
    result_metadata: Sequence[Mapping[str, Any] | None] | None = None,
) -> EmbeddingResponse:
    """Assemble a response from vectors listed in input order."""
    per_item = list(result_metadata) if result_metadata is not None else [None] * len(vectors)
    if len(per_item) != len(vectors):
        raise InvalidArgumentError("result_metadata must have one entry per vector.")
    results = tuple(
        VectorResult(embedding=tuple(vector), index=index, metadata=freeze_metadata(item))
        for index, (vector, item) in enumerate(zip(vectors, per_item))
    )
    return EmbeddingResponse(results=results, metadata=freeze_metadata(metadata))
