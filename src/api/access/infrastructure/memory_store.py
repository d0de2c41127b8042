"""In-memory implementation of IEntityStore.

Keeps every aggregate in dictionaries for demo mode and tests. Aggregates
are copied on the way in and out so callers never share state with the
store, which mirrors how the SQL store behaves.

Thread-safety: This implementation is NOT thread-safe. It relies on the
single event loop serving requests.
"""

from __future__ import annotations

import copy
from contextlib import asynccontextmanager
from typing import AsyncIterator, TypeVar

from access.domain.aggregates import (
    AccessRecord,
    OffboardingRequest,
    System,
    SystemField,
    User,
)
from access.domain.value_objects import (
    AccessRecordId,
    OffboardingRequestId,
    OffboardingStatus,
    SystemFieldId,
    SystemId,
    UserId,
)
from access.ports.exceptions import (
    DuplicateAccessRecordError,
    DuplicateSystemFieldNameError,
    DuplicateUserEmailError,
)

T = TypeVar("T")


def _copy(entity: T) -> T:
    return copy.deepcopy(entity)


class InMemoryUserRepository:
    """Dictionary-backed user storage keyed by id."""

    def __init__(self) -> None:
        self._store: dict[UserId, User] = {}

    async def save(self, user: User) -> None:
        existing = await self.get_by_email(user.email)
        if existing is not None and existing.id != user.id:
            raise DuplicateUserEmailError(f"Email '{user.email}' is already registered")
        self._store[user.id] = _copy(user)

    async def get_by_id(self, user_id: UserId) -> User | None:
        user = self._store.get(user_id)
        return _copy(user) if user else None

    async def get_by_email(self, email: str) -> User | None:
        email = email.strip().lower()
        for user in self._store.values():
            if user.email == email:
                return _copy(user)
        return None

    async def list_all(self) -> list[User]:
        return [_copy(user) for user in self._store.values()]


class InMemorySystemRepository:
    """Dictionary-backed system storage keyed by id.

    Deleting a system does not cascade; the service removes dependent
    records and fields itself.
    """

    def __init__(self) -> None:
        self._store: dict[SystemId, System] = {}

    async def save(self, system: System) -> None:
        self._store[system.id] = _copy(system)

    async def get_by_id(self, system_id: SystemId) -> System | None:
        system = self._store.get(system_id)
        return _copy(system) if system else None

    async def list_all(self) -> list[System]:
        return [_copy(system) for system in self._store.values()]

    async def delete(self, system_id: SystemId) -> bool:
        return self._store.pop(system_id, None) is not None


class InMemoryAccessRecordRepository:
    """Dictionary-backed access record storage keyed by id."""

    def __init__(self) -> None:
        self._store: dict[AccessRecordId, AccessRecord] = {}

    async def save(self, record: AccessRecord) -> None:
        existing = await self.get_by_user_and_system(record.user_id, record.system_id)
        if existing is not None and existing.id != record.id:
            raise DuplicateAccessRecordError(
                f"User {record.user_id} already has access to system {record.system_id}"
            )
        self._store[record.id] = _copy(record)

    async def get_by_id(self, record_id: AccessRecordId) -> AccessRecord | None:
        record = self._store.get(record_id)
        return _copy(record) if record else None

    async def get_by_user_and_system(
        self, user_id: UserId, system_id: SystemId
    ) -> AccessRecord | None:
        for record in self._store.values():
            if record.user_id == user_id and record.system_id == system_id:
                return _copy(record)
        return None

    async def list_all(self) -> list[AccessRecord]:
        return [_copy(record) for record in self._store.values()]

    async def list_by_user(self, user_id: UserId) -> list[AccessRecord]:
        return [_copy(r) for r in self._store.values() if r.user_id == user_id]

    async def list_by_system(self, system_id: SystemId) -> list[AccessRecord]:
        return [_copy(r) for r in self._store.values() if r.system_id == system_id]

    async def delete(self, record_id: AccessRecordId) -> bool:
        return self._store.pop(record_id, None) is not None

    async def delete_by_system(self, system_id: SystemId) -> int:
        doomed = [rid for rid, r in self._store.items() if r.system_id == system_id]
        for record_id in doomed:
            del self._store[record_id]
        return len(doomed)


class InMemoryOffboardingRequestRepository:
    """Dictionary-backed offboarding request storage keyed by id."""

    def __init__(self) -> None:
        self._store: dict[OffboardingRequestId, OffboardingRequest] = {}

    async def save(self, request: OffboardingRequest) -> None:
        self._store[request.id] = _copy(request)

    async def get_by_id(
        self, request_id: OffboardingRequestId
    ) -> OffboardingRequest | None:
        request = self._store.get(request_id)
        return _copy(request) if request else None

    async def list_all(
        self, status: OffboardingStatus | None = None
    ) -> list[OffboardingRequest]:
        requests = [
            _copy(r)
            for r in self._store.values()
            if status is None or r.status == status
        ]
        return sorted(requests, key=lambda r: r.created_at, reverse=True)


class InMemorySystemFieldRepository:
    """Dictionary-backed custom field storage keyed by id."""

    def __init__(self) -> None:
        self._store: dict[SystemFieldId, SystemField] = {}

    async def save(self, system_field: SystemField) -> None:
        existing = await self.get_by_name(system_field.system_id, system_field.name)
        if existing is not None and existing.id != system_field.id:
            raise DuplicateSystemFieldNameError(
                f"Field '{system_field.name}' already exists on system "
                f"{system_field.system_id}"
            )
        self._store[system_field.id] = _copy(system_field)

    async def get_by_id(self, field_id: SystemFieldId) -> SystemField | None:
        system_field = self._store.get(field_id)
        return _copy(system_field) if system_field else None

    async def get_by_name(self, system_id: SystemId, name: str) -> SystemField | None:
        for system_field in self._store.values():
            if system_field.system_id == system_id and system_field.name == name:
                return _copy(system_field)
        return None

    async def list_by_system(self, system_id: SystemId) -> list[SystemField]:
        fields = [_copy(f) for f in self._store.values() if f.system_id == system_id]
        return sorted(fields, key=lambda f: f.created_at)

    async def delete(self, field_id: SystemFieldId) -> bool:
        return self._store.pop(field_id, None) is not None

    async def delete_by_system(self, system_id: SystemId) -> int:
        doomed = [fid for fid, f in self._store.items() if f.system_id == system_id]
        for field_id in doomed:
            del self._store[field_id]
        return len(doomed)


class InMemoryEntityStore:
    """IEntityStore held entirely in process memory.

    ``transaction()`` snapshots every repository and restores the snapshot
    when the block raises, so a failed service call leaves no partial writes.
    """

    def __init__(self) -> None:
        self.users = InMemoryUserRepository()
        self.systems = InMemorySystemRepository()
        self.access_records = InMemoryAccessRecordRepository()
        self.offboarding_requests = InMemoryOffboardingRequestRepository()
        self.system_fields = InMemorySystemFieldRepository()

    def _repositories(self) -> list:
        return [
            self.users,
            self.systems,
            self.access_records,
            self.offboarding_requests,
            self.system_fields,
        ]

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        snapshot = [dict(repo._store) for repo in self._repositories()]
        try:
            yield
        except BaseException:
            for repo, saved in zip(self._repositories(), snapshot):
                repo._store = saved
            raise
