"""Fixtures for lexci_logging unit tests."""

import logging
from collections.abc import Generator

import pytest


@pytest.fixture
def clean_logger(request) -> Generator[logging.Logger, None, None]:
    """Provide a uniquely named logger and strip it afterwards."""
    logger = logging.getLogger(f"lexci_test.{request.node.name}")
    yield logger
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
