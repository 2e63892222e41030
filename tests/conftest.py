import os
import uuid

import pytest

from loggable.config.base import LoggingConfig
from loggable.logging.manager import LoggerRegistry, reset_registry


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    # Keep LOGGABLE_* variables from the developer's shell out of the tests
    for name in list(os.environ):
        if name.startswith("LOGGABLE_"):
            monkeypatch.delenv(name, raising=False)
    yield
    reset_registry()


@pytest.fixture
def config():
    """Settings with a backend namespace private to the test."""
    return LoggingConfig(ROOT_NAME=f"loggable.tests.{uuid.uuid4().hex}")


@pytest.fixture
def registry(config):
    """A registry whose sinks are detached after the test."""
    reg = LoggerRegistry(config)
    yield reg
    reg.reset()
