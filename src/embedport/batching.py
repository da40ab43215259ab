"""Caller-side wrapper that splits oversized requests into provider-sized batches."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from embedport.errors import InvalidArgumentError
from embedport.model import EmbeddingModel
from embedport.types import EmbeddingRequest, EmbeddingResponse, VectorResult

logger = logging.getLogger(__name__)


class BatchingEmbeddingModel(EmbeddingModel):
    """Embed requests of any size through a model with a per-call input limit.

    Chunks share the original request options. Results are re-indexed to
    their position in the original request, ``usage`` numbers are summed
    across chunks and ``batches`` records how many calls were made. A
    failing chunk fails the whole call.
    """

    def __init__(self, inner: EmbeddingModel, max_batch_size: int, *, max_concurrency: int = 1) -> None:
        if inner is None:
            raise InvalidArgumentError("inner model is required.")
        if max_batch_size < 1:
            raise InvalidArgumentError("max_batch_size must be at least 1.")
        if max_concurrency < 1:
            raise InvalidArgumentError("max_concurrency must be at least 1.")
        self._inner = inner
        self._max_batch_size = max_batch_size
        self._max_concurrency = max_concurrency

    @property
    def provider_name(self) -> str:
        return self._inner.provider_name

    @property
    def max_batch_size(self) -> int:
        return self._max_batch_size

    async def invoke(self, request: EmbeddingRequest) -> EmbeddingResponse:
        chunks = [
            request.inputs[start : start + self._max_batch_size]
            for start in range(0, len(request.inputs), self._max_batch_size)
        ]
        if len(chunks) <= 1:
            return await self._inner.call(request)
        logger.debug("Splitting %d input(s) into %d batch(es)", len(request.inputs), len(chunks))

        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def run_chunk(inputs: tuple[str, ...]) -> EmbeddingResponse:
            async with semaphore:
                return await self._inner.call(EmbeddingRequest(inputs=inputs, options=request.options))

        tasks = [asyncio.create_task(run_chunk(chunk)) for chunk in chunks]
        try:
            await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        finally:
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)

        failures = [task.exception() for task in tasks if not task.cancelled() and task.exception() is not None]
        if failures:
            raise failures[0]
        responses = [task.result() for task in tasks]

        results: list[VectorResult] = []
        for response in responses:
            offset = len(results)
            for result in response.results:
                results.append(
                    VectorResult(
                        embedding=result.embedding,
                        index=offset + result.index,
                        metadata=result.metadata,
                    )
                )
        return EmbeddingResponse(results=tuple(results), metadata=_merge_metadata(responses))

    async def aclose(self) -> None:
        await self._inner.aclose()


def _merge_metadata(responses: list[EmbeddingResponse]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(responses[0].metadata)
    usage: dict[str, Any] = {}
    for response in responses:
        chunk_usage = response.metadata.get("usage")
        if not hasattr(chunk_usage, "items"):
            continue
        for key, value in chunk_usage.items():
            current = usage.get(key, 0)
            if _is_number(value) and _is_number(current):
                usage[key] = current + value
            else:
                usage.setdefault(key, value)
    if usage:
        merged["usage"] = usage
    merged["batches"] = len(responses)
    return merged


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
