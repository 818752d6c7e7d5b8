"""Shared fixtures."""

import pytest

from ralph_loop.utils.logging import teardown_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging so tests don't leak file handles."""
    yield
    teardown_logging()
