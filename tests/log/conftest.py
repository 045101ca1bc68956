"""Fixtures for logging tests."""

import pytest

from factorio_luadoc._logging import logger


@pytest.fixture(autouse=True)
def _restore_logger():
    handlers = logger.handlers[:]
    level = logger.level
    yield
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
