"""Unit test fixtures shared across bounded contexts."""

import pytest

from access.dependencies.store import get_memory_store
from infrastructure.settings import (
    get_access_settings,
    get_database_settings,
    get_settings,
)


@pytest.fixture(autouse=True)
def reset_cached_singletons():
    """Drop cached settings and the process-wide memory store between tests."""
    caches = (get_settings, get_database_settings, get_access_settings, get_memory_store)
    for cached in caches:
        cached.cache_clear()
    yield
    for cached in caches:
        cached.cache_clear()
