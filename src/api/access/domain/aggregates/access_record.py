"""AccessRecord aggregate for the access context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, date, datetime

from access.domain.value_objects import AccessRecordId, AccessTag, SystemId, UserId


@dataclass
class AccessRecord:
    """A grant of one user's access to one system.

    At most one record exists per (user, system) pair; the repository layer
    enforces that uniqueness.
    """

    id: AccessRecordId
    user_id: UserId
    system_id: SystemId
    granted_date: date
    role: str | None = None
    granted_by: UserId | None = None
    tags: list[AccessTag] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        user_id: UserId,
        system_id: SystemId,
        role: str | None = None,
        granted_by: UserId | None = None,
        tags: list[AccessTag] | None = None,
    ) -> AccessRecord:
        """Grant access starting today (UTC).

        An empty or whitespace-only role is stored as no role.
        """
        return cls(
            id=AccessRecordId.generate(),
            user_id=user_id,
            system_id=system_id,
            granted_date=datetime.now(UTC).date(),
            role=_normalize_role(role),
            granted_by=granted_by,
            tags=list(tags or []),
        )

    def change_role(self, role: str | None) -> None:
        self.role = _normalize_role(role)

    def replace_tags(self, tags: list[AccessTag]) -> None:
        self.tags = list(tags)


def _normalize_role(role: str | None) -> str | None:
    if role is None:
        return None
    role = role.strip()
    return role or None
