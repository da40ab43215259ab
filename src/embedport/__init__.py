"""Portable embedding-generation contract."""

from embedport.batching import BatchingEmbeddingModel
from embedport.client import available_providers, create_embedding_model, create_from_settings, register_provider
from embedport.documents import DocumentExtractor, FieldDocumentExtractor
from embedport.errors import EmbeddingError, InvalidArgumentError, ProviderError, UnsupportedOperationError
from embedport.metadata import Metadata, MetadataValue, freeze_metadata
from embedport.mock import MockEmbeddingModel
from embedport.model import PROBE_TEXT, EmbeddingModel, validate_request, validate_response
from embedport.settings import EmbedportSettings
from embedport.types import (
    EMPTY_OPTIONS,
    EmbeddingOptions,
    EmbeddingRequest,
    EmbeddingResponse,
    VectorResult,
    build_response,
)

__all__ = [
    "BatchingEmbeddingModel",
    "DocumentExtractor",
    "EMPTY_OPTIONS",
    "EmbeddingError",
    "EmbeddingModel",
    "EmbeddingOptions",
    "EmbeddingRequest",
    "EmbeddingResponse",
    "EmbedportSettings",
    "FieldDocumentExtractor",
    "InvalidArgumentError",
    "Metadata",
    "MetadataValue",
    "MockEmbeddingModel",
    "PROBE_TEXT",
    "ProviderError",
    "UnsupportedOperationError",
    "VectorResult",
    "available_providers",
    "build_response",
    "create_embedding_model",
    "create_from_settings",
    "freeze_metadata",
    "register_provider",
    "validate_request",
    "validate_response",
]
