from __future__ import annotations

from dataclasses import dataclass
import logging

import pytest

from embedport.documents import DocumentExtractor, FieldDocumentExtractor
from embedport.errors import InvalidArgumentError
from embedport.logs import LOGGER_NAME, configure_logging


@dataclass
class Note:
    title: str
    content: str | None = None


def test_field_extractor_reads_mappings_and_objects() -> None:
    extractor = FieldDocumentExtractor()
    assert isinstance(extractor, DocumentExtractor)
    assert extractor.extract_text({"title": " Intro ", "content": "Body"}) == "Intro\n\nBody"
    assert extractor.extract_text(Note(title="Only title")) == "Only title"


def test_field_extractor_rejects_empty_documents() -> None:
    extractor = FieldDocumentExtractor(fields=("content",))
    with pytest.raises(InvalidArgumentError):
        extractor.extract_text({"content": "   "})
    with pytest.raises(InvalidArgumentError):
        extractor.extract_text(None)
    with pytest.raises(InvalidArgumentError):
        FieldDocumentExtractor(fields=())


def test_configure_logging_sets_level(embedport_logger: logging.Logger) -> None:
    logger = configure_logging("debug")
    assert logger is embedport_logger
    assert logger.name == LOGGER_NAME
    assert logger.propagate is False
    assert logger.level == logging.DEBUG
    configure_logging("WARNING")
    assert len(logger.handlers) == 1
    with pytest.raises(InvalidArgumentError):
        configure_logging("loud")
