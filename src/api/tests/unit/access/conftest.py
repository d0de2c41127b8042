"""Fixtures shared by the access context unit tests.

Services run against a fresh in-memory store seeded with a small cast of
users: one administrator and three members.
"""

import pytest
import pytest_asyncio

from access.domain.aggregates import System, User
from access.domain.value_objects import Role, SystemCategory
from access.infrastructure.memory_store import InMemoryEntityStore


@pytest.fixture
def store() -> InMemoryEntityStore:
    return InMemoryEntityStore()


@pytest.fixture
def admin() -> User:
    return User.create(
        name="Ada Admin", email="ada.admin@example.com", department="IT", role=Role.ADMIN
    )


@pytest.fixture
def jane() -> User:
    return User.create(
        name="Jane Smith", email="jane.smith@example.com", department="HR"
    )


@pytest.fixture
def mike() -> User:
    return User.create(
        name="Mike Johnson", email="mike.johnson@example.com", department="Finance"
    )


@pytest.fixture
def robert() -> User:
    return User.create(
        name="Robert Taylor", email="robert.taylor@example.com", department="Sales"
    )


@pytest_asyncio.fixture
async def seeded_store(store, admin, jane, mike, robert) -> InMemoryEntityStore:
    for user in (admin, jane, mike, robert):
        await store.users.save(user)
    return store


@pytest.fixture
def workday(jane: User) -> System:
    return System.create(
        name="Workday",
        description="Human resources platform",
        category=SystemCategory.HR,
        owner_id=jane.id,
    )
