"""Shared fixtures for unit tests."""

import logging
from pathlib import Path

import pytest

from rpc_errors.utils.rich_logging import PACKAGE_LOGGER

SAMPLE_CATALOG = """\
error_list:
  - type: user_not_found
    translated_message:
      - text: User not found
        language: en
      - text: Utilisateur introuvable
        language: fr
  - type: rate_limited
    translated_message:
      - text: Too many requests
        language: en
"""


@pytest.fixture
def write_catalog(tmp_path):
    """Write catalog text to a file under tmp_path and return its path."""
    def _write(content: str, name: str = "errors.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_catalog(write_catalog) -> Path:
    return write_catalog(SAMPLE_CATALOG)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers and levels installed by setup_logging (the CLI calls it)."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = logger.handlers[:]
    level = logger.level
    yield
    for handler in logger.handlers[:]:
        if handler not in handlers:
            handler.close()
            logger.removeHandler(handler)
    logger.setLevel(level)
