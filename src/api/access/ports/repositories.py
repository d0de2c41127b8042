"""Repository protocols (ports) for the access bounded context.

Repository protocols define the interface for persisting and retrieving
aggregates. Two implementations exist: an in-memory store used for demos
and tests, and a SQLAlchemy store backed by PostgreSQL.
"""

from __future__ import annotations

from typing import AsyncContextManager, Protocol, runtime_checkable

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


@runtime_checkable
class IUserRepository(Protocol):
    """Repository for User aggregate persistence."""

    async def save(self, user: User) -> None:
        """Persist a user.

        Raises:
            DuplicateUserEmailError: If another user has the same email
        """
        ...

    async def get_by_id(self, user_id: UserId) -> User | None:
        """Retrieve a user by ID, or None if not found."""
        ...

    async def get_by_email(self, email: str) -> User | None:
        """Retrieve a user by (lowercased) email, or None if not found."""
        ...

    async def list_all(self) -> list[User]:
        """List every user."""
        ...


@runtime_checkable
class ISystemRepository(Protocol):
    """Repository for System aggregate persistence."""

    async def save(self, system: System) -> None:
        """Persist a system, creating or updating it (co-owners included)."""
        ...

    async def get_by_id(self, system_id: SystemId) -> System | None:
        """Retrieve a system by ID, or None if not found."""
        ...

    async def list_all(self) -> list[System]:
        """List every system."""
        ...

    async def delete(self, system_id: SystemId) -> bool:
        """Delete a system.

        Dependent access records and fields are not touched here; the
        service removes them explicitly.

        Returns:
            True if the system existed
        """
        ...


@runtime_checkable
class IAccessRecordRepository(Protocol):
    """Repository for AccessRecord persistence."""

    async def save(self, record: AccessRecord) -> None:
        """Persist an access record.

        Raises:
            DuplicateAccessRecordError: If a different record already exists
                for the same (user, system) pair
        """
        ...

    async def get_by_id(self, record_id: AccessRecordId) -> AccessRecord | None:
        """Retrieve an access record by ID, or None if not found."""
        ...

    async def get_by_user_and_system(
        self, user_id: UserId, system_id: SystemId
    ) -> AccessRecord | None:
        """Retrieve the record for a (user, system) pair, or None."""
        ...

    async def list_all(self) -> list[AccessRecord]:
        """List every access record."""
        ...

    async def list_by_user(self, user_id: UserId) -> list[AccessRecord]:
        """List the records held by a user."""
        ...

    async def list_by_system(self, system_id: SystemId) -> list[AccessRecord]:
        """List the records granting access to a system."""
        ...

    async def delete(self, record_id: AccessRecordId) -> bool:
        """Delete a record. Returns True if it existed."""
        ...

    async def delete_by_system(self, system_id: SystemId) -> int:
        """Delete all records of a system. Returns the number removed."""
        ...


@runtime_checkable
class IOffboardingRequestRepository(Protocol):
    """Repository for OffboardingRequest persistence."""

    async def save(self, request: OffboardingRequest) -> None:
        """Persist an offboarding request, creating or updating it."""
        ...

    async def get_by_id(
        self, request_id: OffboardingRequestId
    ) -> OffboardingRequest | None:
        """Retrieve a request by ID, or None if not found."""
        ...

    async def list_all(
        self, status: OffboardingStatus | None = None
    ) -> list[OffboardingRequest]:
        """List requests, newest first, optionally filtered by status."""
        ...


@runtime_checkable
class ISystemFieldRepository(Protocol):
    """Repository for SystemField persistence."""

    async def save(self, system_field: SystemField) -> None:
        """Persist a field definition.

        Raises:
            DuplicateSystemFieldNameError: If the system already has a
                different field with the same name
        """
        ...

    async def get_by_id(self, field_id: SystemFieldId) -> SystemField | None:
        """Retrieve a field by ID, or None if not found."""
        ...

    async def get_by_name(self, system_id: SystemId, name: str) -> SystemField | None:
        """Retrieve a system's field by exact name, or None."""
        ...

    async def list_by_system(self, system_id: SystemId) -> list[SystemField]:
        """List a system's fields ordered by creation."""
        ...

    async def delete(self, field_id: SystemFieldId) -> bool:
        """Delete a field. Returns True if it existed."""
        ...

    async def delete_by_system(self, system_id: SystemId) -> int:
        """Delete all fields of a system. Returns the number removed."""
        ...


@runtime_checkable
class IEntityStore(Protocol):
    """Unit of work bundling the access repositories.

    Services run every mutation inside ``transaction()`` so the changes of
    one call are committed (or rolled back) together.
    """

    users: IUserRepository
    systems: ISystemRepository
    access_records: IAccessRecordRepository
    offboarding_requests: IOffboardingRequestRepository
    system_fields: ISystemFieldRepository

    def transaction(self) -> AsyncContextManager[None]:
        """Open a transaction spanning every repository of the store."""
        ...
