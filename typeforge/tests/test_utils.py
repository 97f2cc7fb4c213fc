"""
Test Suite: Utilities

Tests for the logging helpers.
"""

import logging

import pytest

from typeforge.utils.logging import (
    LOG_FILENAME,
    TypeForgeFormatter,
    get_logger,
    log_error,
    log_operation,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    setup_logging(file_output=False)


def test_get_logger_prefixes_component_names():
    assert get_logger("extraction").name == "typeforge.extraction"
    assert get_logger("typeforge.cli").name == "typeforge.cli"
    assert get_logger("typeforge").name == "typeforge"


def test_formatter_shortens_logger_name():
    record = logging.LogRecord("typeforge.export", logging.INFO, __file__, 1, "done", None, None)

    assert TypeForgeFormatter().format(record) == "INFO     [export] done"


def test_setup_logging_writes_file(tmp_path):
    root = setup_logging(level="INFO", log_dir=tmp_path, console_output=False)
    logger = get_logger("tests")

    log_operation(logger, "Extraction complete", {"entities": 2, "relationships": 1})
    logger.debug("not written")

    for handler in root.handlers:
        handler.flush()
    text = (tmp_path / LOG_FILENAME).read_text(encoding="utf-8")
    assert "INFO     [tests] Extraction complete: entities=2, relationships=1" in text
    assert "not written" not in text
    assert text.startswith("[")


def test_setup_logging_replaces_handlers(tmp_path):
    setup_logging(log_dir=tmp_path)
    root = setup_logging(console_output=True, file_output=False)

    assert len(root.handlers) == 1
    assert root.propagate is False


def test_log_error_includes_context_and_traceback(tmp_path):
    root = setup_logging(level="ERROR", log_dir=tmp_path, console_output=False)
    logger = get_logger("tests")

    try:
        raise ValueError("bad input")
    except ValueError as e:
        log_error(logger, "load", e, {"path": "x.yaml"})

    for handler in root.handlers:
        handler.flush()
    text = (tmp_path / LOG_FILENAME).read_text(encoding="utf-8")
    assert "FAILED load: ValueError: bad input | path=x.yaml" in text
    assert "Traceback" in text
