"""
Test conftest — keep structlog configuration from leaking between tests.

setup_logging() turns on cache_logger_on_first_use, which would stop
structlog.testing.capture_logs() from seeing events in later tests, and
installs root handlers that hold log files open.
"""
import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if isinstance(handler, (logging.FileHandler, logging.NullHandler)):
            root.removeHandler(handler)
            handler.close()
