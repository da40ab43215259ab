from __future__ import annotations

import logging
from typing import Iterator

import pytest

from embedport.logs import LOGGER_NAME
from tests.utils import FakeEmbeddingModel


@pytest.fixture
def fake_model() -> FakeEmbeddingModel:
    return FakeEmbeddingModel(vectors=[[1.0, 0.0], [0.0, 1.0]], metadata={"model": "fake", "usage": {"total_tokens": 3}})


@pytest.fixture
def embedport_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate
