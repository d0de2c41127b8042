"""Fixtures for route tests.

Routes run against the real services over an in-memory store; only the
store dependency is overridden. Callers identify themselves with the
X-User-ID header exactly as in production.
"""

import asyncio

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from access.domain.aggregates import User
from access.infrastructure.memory_store import InMemoryEntityStore


@pytest.fixture
def api_store(admin, jane, mike, robert) -> InMemoryEntityStore:
    store = InMemoryEntityStore()

    async def seed() -> None:
        for user in (admin, jane, mike, robert):
            await store.users.save(user)

    asyncio.run(seed())
    return store


@pytest.fixture
def client(api_store: InMemoryEntityStore) -> TestClient:
    from access.dependencies.store import get_entity_store
    from access.presentation import router

    app = FastAPI()
    app.dependency_overrides[get_entity_store] = lambda: api_store
    app.include_router(router)
    return TestClient(app)


def as_user(user: User) -> dict[str, str]:
    return {"X-User-ID": user.id.value}


@pytest.fixture
def headers():
    return as_user
