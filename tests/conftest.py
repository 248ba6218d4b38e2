# Area: Test Fixtures
"""Shared fixtures."""

import logging

import pytest

from fakes import FakeTransport


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Undo handlers and propagation changes made by setup_logging."""
    pkg_logger = logging.getLogger("holdem_agent")
    handlers = list(pkg_logger.handlers)
    propagate = pkg_logger.propagate
    level = pkg_logger.level
    yield
    for handler in list(pkg_logger.handlers):
        if handler not in handlers:
            pkg_logger.removeHandler(handler)
            handler.close()
    pkg_logger.propagate = propagate
    pkg_logger.setLevel(level)
