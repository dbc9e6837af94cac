"""Shared pytest configuration for gotagger tests."""

import pytest

from gotagger.logging import configure_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    """Route structlog through stdlib at WARNING for every test."""
    configure_logging(level="WARNING")
