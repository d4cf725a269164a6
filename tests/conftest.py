import logging

import pytest


@pytest.fixture
def keys():
    """Empty key accumulator."""
    return []


@pytest.fixture
def package_logger():
    """Package logger, restored after the test."""
    log = logging.getLogger("path_to_regexp")
    handlers = list(log.handlers)
    level = log.level
    propagate = log.propagate
    yield log
    log.handlers = handlers
    log.setLevel(level)
    log.propagate = propagate
