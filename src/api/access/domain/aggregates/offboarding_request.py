"""OffboardingRequest aggregate for the access context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, date, datetime

from access.domain.value_objects import (
    OffboardingRequestId,
    OffboardingStatus,
    SystemId,
    UserId,
)


@dataclass
class OffboardingRequest:
    """A request to remove a user's access, either everywhere or from a list
    of systems.

    Business rules:
    - ``all_systems`` and ``system_ids`` are mutually exclusive: with
      ``all_systems`` the list is empty, otherwise it is non-empty
    - The only transition is pending -> completed, and completing twice is
      a no-op
    - ``removal_date`` is informational and never enforced
    """

    id: OffboardingRequestId
    user_id: UserId
    requested_by: UserId
    removal_date: date
    created_at: datetime
    system_ids: list[SystemId] = field(default_factory=list)
    all_systems: bool = False
    status: OffboardingStatus = OffboardingStatus.PENDING
    notes: str | None = None
    completed_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.all_systems and self.system_ids:
            raise ValueError("system_ids must be empty when all_systems is set")
        if not self.all_systems and not self.system_ids:
            raise ValueError(
                "An offboarding request needs at least one system unless "
                "all_systems is set"
            )

    @classmethod
    def create(
        cls,
        user_id: UserId,
        requested_by: UserId,
        removal_date: date,
        system_ids: list[SystemId] | None = None,
        all_systems: bool = False,
        notes: str | None = None,
    ) -> OffboardingRequest:
        """Open a pending request.

        When ``all_systems`` is set any listed systems are discarded; otherwise
        the listed systems are de-duplicated preserving order.

        Raises:
            ValueError: If no systems are given and ``all_systems`` is unset
        """
        unique: list[SystemId] = []
        if not all_systems:
            for system_id in system_ids or []:
                if system_id not in unique:
                    unique.append(system_id)

        return cls(
            id=OffboardingRequestId.generate(),
            user_id=user_id,
            requested_by=requested_by,
            removal_date=removal_date,
            system_ids=unique,
            all_systems=all_systems,
            notes=(notes or "").strip() or None,
            created_at=datetime.now(UTC),
        )

    @property
    def is_pending(self) -> bool:
        return self.status == OffboardingStatus.PENDING

    def covers_system(self, system_id: SystemId) -> bool:
        """Check whether completing this request removes access to a system."""
        return self.all_systems or system_id in self.system_ids

    def complete(self) -> bool:
        """Mark the request completed.

        Returns:
            True if the status changed, False if it was already completed
        """
        if self.status == OffboardingStatus.COMPLETED:
            return False
        self.status = OffboardingStatus.COMPLETED
        self.completed_at = datetime.now(UTC)
        return True
