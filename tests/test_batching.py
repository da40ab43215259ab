from __future__ import annotations

import asyncio

import pytest

from embedport.batching import BatchingEmbeddingModel
from embedport.errors import InvalidArgumentError, ProviderError
from embedport.mock import MockEmbeddingModel
from embedport.types import EmbeddingOptions, EmbeddingRequest, EmbeddingResponse
from tests.utils import FakeEmbeddingModel


@pytest.mark.asyncio
async def test_batches_are_split_and_reindexed() -> None:
    inner = FakeEmbeddingModel(dims=2, metadata={"model": "fake", "usage": {"total_tokens": 2}})
    model = BatchingEmbeddingModel(inner, max_batch_size=2)
    texts = ["a", "bb", "ccc", "dddd", "eeeee"]
    response = await model.embed_for_response(texts)
    assert inner.calls == 3
    assert [request.inputs for request in inner.requests] == [("a", "bb"), ("ccc", "dddd"), ("eeeee",)]
    assert [result.index for result in response.results] == [0, 1, 2, 3, 4]
    assert response.embeddings == [[float(len(text)), 0.0] for text in texts]
    assert response.metadata["batches"] == 3
    assert response.metadata["usage"]["total_tokens"] == 6
    assert response.metadata["model"] == "fake"


@pytest.mark.asyncio
async def test_small_requests_pass_through() -> None:
    inner = FakeEmbeddingModel(dims=2, metadata={"model": "fake"})
    model = BatchingEmbeddingModel(inner, max_batch_size=4)
    response = await model.embed_for_response(["a", "b"])
    assert inner.calls == 1
    assert "batches" not in response.metadata


@pytest.mark.asyncio
async def test_chunks_keep_request_options() -> None:
    inner = FakeEmbeddingModel(dims=2)
    model = BatchingEmbeddingModel(inner, max_batch_size=1, max_concurrency=2)
    options = EmbeddingOptions(dimensions=2)
    await model.call(EmbeddingRequest(inputs=["a", "b", "c"], options=options))
    assert all(request.options is options for request in inner.requests)


@pytest.mark.asyncio
async def test_failing_chunk_fails_whole_call() -> None:
    inner = FakeEmbeddingModel(vectors=[[1.0, 0.0]], result_count=1)
    model = BatchingEmbeddingModel(inner, max_batch_size=2)
    with pytest.raises(ProviderError):
        await model.embed_batch(["a", "b", "c"])


@pytest.mark.asyncio
async def test_batched_mock_matches_unbatched() -> None:
    texts = [f"text {index}" for index in range(7)]
    direct = await MockEmbeddingModel(dims=8).embed_batch(texts)
    batched = await BatchingEmbeddingModel(MockEmbeddingModel(dims=8), max_batch_size=3).embed_batch(texts)
    assert batched == direct


def test_batching_rejects_bad_limits() -> None:
    with pytest.raises(InvalidArgumentError):
        BatchingEmbeddingModel(FakeEmbeddingModel(), max_batch_size=0)
    with pytest.raises(InvalidArgumentError):
        BatchingEmbeddingModel(FakeEmbeddingModel(), max_batch_size=2, max_concurrency=0)


class FailOnTextModel(FakeEmbeddingModel):
    def __init__(self, failing_text: str) -> None:
        super().__init__(dims=2)
        self.failing_text = failing_text

    async def invoke(self, request: EmbeddingRequest) -> EmbeddingResponse:
        if self.failing_text in request.inputs:
            self.calls += 1
            raise ProviderError(message="rejected input", provider="fake")
        await asyncio.sleep(0)
        return await super().invoke(request)


@pytest.mark.asyncio
async def test_failed_chunk_cancels_remaining_chunks() -> None:
    inner = FailOnTextModel("t0")
    model = BatchingEmbeddingModel(inner, max_batch_size=1)
    with pytest.raises(ProviderError, match="rejected input"):
        await model.embed_batch([f"t{index}" for index in range(10)])
    calls_at_failure = inner.calls
    await asyncio.sleep(0.1)
    assert inner.calls == calls_at_failure
    assert calls_at_failure < 10


@pytest.mark.asyncio
async def test_failure_in_later_chunk_is_raised() -> None:
    inner = FailOnTextModel("t3")
    model = BatchingEmbeddingModel(inner, max_batch_size=2, max_concurrency=2)
    with pytest.raises(ProviderError, match="rejected input"):
        await model.embed_batch([f"t{index}" for index in range(8)])
    await asyncio.sleep(0.05)
    assert inner.calls < 4
