"""Provider registry and factory."""

from __future__ import annotations

from typing import Any, Callable

from embedport.batching import BatchingEmbeddingModel
from embedport.errors import InvalidArgumentError
from embedport.model import EmbeddingModel
from embedport.settings import EmbedportSettings

ProviderFactory = Callable[..., EmbeddingModel]

_PROVIDERS: dict[str, ProviderFactory] = {}


def register_provider(name: str, factory: ProviderFactory) -> None:
    key = name.strip().lower()
    if not key:
        raise InvalidArgumentError("provider name is required.")
    _PROVIDERS[key] = factory


def available_providers() -> list[str]:
    return sorted(_PROVIDERS)


def create_embedding_model(mode: str, *, max_batch_size: int | None = None, **kwargs: Any) -> EmbeddingModel:
    factory = _PROVIDERS.get(mode.strip().lower())
    if factory is None:
        raise InvalidArgumentError(
            f"Unsupported embedding mode: {mode} (available: {', '.join(available_providers())})"
        )
    model = factory(**kwargs)
    if max_batch_size is not None:
        return BatchingEmbeddingModel(model, max_batch_size)
    return model


def create_from_settings(settings: EmbedportSettings) -> EmbeddingModel:
    return create_embedding_model(
        settings.mode,
        max_batch_size=settings.max_batch_size,
        **settings.provider_kwargs(),
    )


def _create_mock(**kwargs: Any) -> EmbeddingModel:
    from embedport.mock import MockEmbeddingModel

    return MockEmbeddingModel(**kwargs)


register_provider("mock", _create_mock)
