import logging

import pytest


@pytest.fixture
def restore_package_logger():
    """Fixture restoring the package logger after configure_logging() calls."""
    logger = logging.getLogger("base_url")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
