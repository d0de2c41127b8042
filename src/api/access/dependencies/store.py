"""FastAPI dependency injection for the entity store.

The backend is chosen by ``SYSTEMLY_ACCESS_STORE_BACKEND``: a process-wide
in-memory store, or a SQL store over a fresh session per request.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Annotated, AsyncGenerator, AsyncIterator

from fastapi import Depends

from access.infrastructure.memory_store import InMemoryEntityStore
from access.infrastructure.sql_store import SqlEntityStore
from access.ports.repositories import IEntityStore
from infrastructure.database.dependencies import get_sessionmaker
from infrastructure.settings import AccessSettings, StoreBackend, get_access_settings


@lru_cache
def get_memory_store() -> InMemoryEntityStore:
    """Get the process-wide in-memory store (singleton)."""
    return InMemoryEntityStore()


@asynccontextmanager
async def entity_store_scope(settings: AccessSettings) -> AsyncIterator[IEntityStore]:
    """Open an entity store for one unit of work.

    Used by request handling and by startup tasks that run outside a
    request.
    """
    if settings.store_backend == StoreBackend.DATABASE:
        async with get_sessionmaker()() as session:
            yield SqlEntityStore(session)
    else:
        yield get_memory_store()


async def get_entity_store(
    settings: Annotated[AccessSettings, Depends(get_access_settings)],
) -> AsyncGenerator[IEntityStore, None]:
    """Provide the configured entity store (FastAPI dependency)."""
    async with entity_store_scope(settings) as store:
        yield store
