"""Application-layer value objects for the access bounded context.

Read-only view objects that join aggregates for listing endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum

from access.domain.aggregates import AccessRecord, System, User
from access.domain.value_objects import AccessRecordId, AccessTag, UserId


class SortField(StrEnum):
    """Fields a listing endpoint can be ordered by."""

    NAME = "name"
    ROLE = "role"
    GRANTED_DATE = "granted_date"


@dataclass(frozen=True)
class SystemAccess:
    """A system the user has an access record for, with the grant details."""

    system: System
    access_record_id: AccessRecordId
    role: str | None
    granted_date: date
    tags: list[AccessTag] = field(default_factory=list)


@dataclass(frozen=True)
class SystemMember:
    """A user who has access to a system, with the grant details."""

    user: User
    access_record_id: AccessRecordId
    role: str | None
    granted_date: date
    granted_by: UserId | None = None
    tags: list[AccessTag] = field(default_factory=list)


@dataclass(frozen=True)
class AccessRecordView:
    """An access record joined with the user and system it references."""

    record: AccessRecord
    user: User
    system: System


@dataclass(frozen=True)
class SystemView:
    """A system with its owner and co-owners resolved.

    ``owner`` is None when the owning user no longer exists; co-owners that
    no longer exist are left out.
    """

    system: System
    owner: User | None
    co_owners: list[User] = field(default_factory=list)


@dataclass(frozen=True)
class SystemPermissions:
    """What a user may do with one system."""

    can_view: bool
    can_manage: bool
    can_delete: bool
    can_approve: bool
