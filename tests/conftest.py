"""Shared pytest fixtures for all test suites."""

from collections.abc import Iterator

import pytest

from backend.app.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Drop cached settings so environment overrides in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
