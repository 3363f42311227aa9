"""Shared test fixtures for nanolog test suite."""

import io
import logging

import pytest

from nanolog import formatters as _formatters_mod
from nanolog import manager as _manager_mod
from nanolog import registry as _registry_mod


# ---------------------------------------------------------------------------
# Streams
# ---------------------------------------------------------------------------
class FlushCountingStream(io.StringIO):
    """StringIO that counts flush() calls."""

    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


@pytest.fixture
def buf():
    """A StringIO buffer for capturing output."""
    return io.StringIO()


@pytest.fixture
def stream():
    """A StringIO that records how often it was flushed."""
    return FlushCountingStream()


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------
@pytest.fixture
def make_record():
    """Factory for LogRecords at a given logging level."""
    def _make(level, msg="message", name="app.service.Worker", args=None,
              exc_info=None, **extra):
        record = logging.LogRecord(
            name=name, level=level, pathname=__file__, lineno=1,
            msg=msg, args=args, exc_info=exc_info,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record
    return _make


# ---------------------------------------------------------------------------
# Module-level singletons
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _restore_singletons():
    """Restore the module-level registries and LogManager after each test.

    The config registry holds keys registered at import time by
    nanolog.manager; tests that call init_config_registry() would
    otherwise leave it empty for later tests.
    """
    saved = (
        _registry_mod._config_registry,
        _formatters_mod._formatter_registry,
        _manager_mod._manager,
    )
    yield
    _registry_mod._config_registry = saved[0]
    _formatters_mod._formatter_registry = saved[1]
    _manager_mod._manager = saved[2]


@pytest.fixture
def isolated_logger(request):
    """A uniquely named logger that is cleaned up after the test."""
    logger = logging.getLogger(f"nanolog.tests.{request.node.name}")
    logger.propagate = False
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
