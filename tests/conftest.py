"""
Global pytest fixtures for factorio_luadoc tests.

Settings live on a module-level singleton, so every test starts from the
defaults and leaves them restored.
"""

import pytest

from factorio_luadoc.config import config


@pytest.fixture(autouse=True)
def _reset_config():
    config.reset()
    yield
    config.reset()
