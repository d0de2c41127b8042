"""Value objects for the access domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers and domain concepts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Self

from ulid import ULID


@dataclass(frozen=True)
class EntityId:
    """Base for ULID-backed aggregate identifiers.

    Uses ULID for sortability and distribution-friendly generation.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> Self:
        """Generate a new identifier using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create an identifier from its string value.

        Args:
            value: ULID string

        Returns:
            Identifier instance

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid {cls.__name__}: {value}") from e

        return cls(value=value)


@dataclass(frozen=True)
class UserId(EntityId):
    """Identifier for a User aggregate."""


@dataclass(frozen=True)
class SystemId(EntityId):
    """Identifier for a System aggregate."""


@dataclass(frozen=True)
class AccessRecordId(EntityId):
    """Identifier for an AccessRecord aggregate."""


@dataclass(frozen=True)
class OffboardingRequestId(EntityId):
    """Identifier for an OffboardingRequest aggregate."""


@dataclass(frozen=True)
class SystemFieldId(EntityId):
    """Identifier for a SystemField definition."""


class Role(StrEnum):
    """Global role of a user.

    Administrators may see and manage every system; members only manage the
    systems they own or co-own.
    """

    ADMIN = "admin"
    MEMBER = "member"


class SystemCategory(StrEnum):
    """Business area a system belongs to."""

    HR = "HR"
    FINANCE = "Finance"
    IT = "IT"
    OPERATIONS = "Operations"
    SALES = "Sales"
    MARKETING = "Marketing"


class OffboardingStatus(StrEnum):
    """Lifecycle of an offboarding request: pending -> completed."""

    PENDING = "pending"
    COMPLETED = "completed"


class FieldType(StrEnum):
    """Value type of a custom system field."""

    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    SELECT = "select"


@dataclass(frozen=True)
class AccessTag:
    """A key/value annotation on an access record (e.g. cost_center: 4410)."""

    key: str
    value: str

    def __post_init__(self) -> None:
        if not self.key or not self.key.strip():
            raise ValueError("Tag key must not be empty")
