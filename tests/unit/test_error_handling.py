"""Tests for error handling and logging utilities."""

import io
import logging

import pytest

from rpc_errors.utils.error_handling import handle_filesystem_errors
from rpc_errors.utils.rich_logging import PACKAGE_LOGGER, ConsoleLogFormatter, setup_logging


def test_handle_filesystem_errors_logs_and_reraises(caplog):
    @handle_filesystem_errors("read catalog")
    def read():
        raise FileNotFoundError("errors.yaml")

    with caplog.at_level(logging.ERROR):
        with pytest.raises(FileNotFoundError):
            read()

    assert "File not found during read catalog: errors.yaml" in caplog.text


def test_handle_filesystem_errors_permission_denied(caplog):
    @handle_filesystem_errors("read catalog")
    def read():
        raise PermissionError("denied")

    with caplog.at_level(logging.ERROR):
        with pytest.raises(PermissionError):
            read()

    assert "Permission denied during read catalog" in caplog.text


def test_handle_filesystem_errors_ignores_other_exceptions(caplog):
    @handle_filesystem_errors("read catalog")
    def read():
        raise ValueError("bad content")

    with caplog.at_level(logging.ERROR):
        with pytest.raises(ValueError):
            read()

    assert caplog.text == ""


def test_handle_filesystem_errors_returns_result():
    @handle_filesystem_errors("read catalog")
    def read():
        return "ok"

    assert read() == "ok"
    assert read.__name__ == "read"


def test_formatter_without_colors():
    record = logging.LogRecord("rpc_errors.errors.catalog", logging.WARNING, __file__, 1, "hello", None, None)

    line = ConsoleLogFormatter(use_colors=False).format(record)

    assert line.endswith("WARNING  [rpc_errors.errors.catalog] hello")
    assert "\033[" not in line


def test_setup_logging_writes_to_stream():
    stream = io.StringIO()

    logger = setup_logging("DEBUG", stream=stream)
    logging.getLogger("rpc_errors.errors.catalog").debug("catalog loaded")

    assert logger.name == PACKAGE_LOGGER
    assert "catalog loaded" in stream.getvalue()
    assert "\033[" not in stream.getvalue()


def test_setup_logging_replaces_handlers():
    setup_logging("INFO", stream=io.StringIO())
    setup_logging("INFO", stream=io.StringIO())

    assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 1
