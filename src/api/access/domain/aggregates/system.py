"""System aggregate for the access context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from access.domain.value_objects import SystemCategory, SystemId, UserId


@dataclass
class System:
    """An internal software system whose access is tracked.

    Business rules:
    - System names must be 1-255 characters
    - Exactly one owner; zero or more co-owners
    - The owner never appears among the co-owners
    - Co-owners hold no duplicates and keep insertion order
    - Only approved systems are visible to users who neither own nor
      administer them
    """

    id: SystemId
    name: str
    description: str
    category: SystemCategory
    owner_id: UserId
    created_at: datetime
    updated_at: datetime
    co_owner_ids: list[UserId] = field(default_factory=list)
    approved: bool = False

    def __post_init__(self) -> None:
        """Validate business rules after initialization."""
        self._validate_name(self.name)
        self._validate_co_owners(self.co_owner_ids)

    @staticmethod
    def _validate_name(name: str) -> None:
        if not name or not name.strip() or len(name) > 255:
            raise ValueError("System name must be between 1 and 255 characters")

    def _validate_co_owners(self, co_owner_ids: list[UserId]) -> None:
        if self.owner_id in co_owner_ids:
            raise ValueError("The system owner cannot also be a co-owner")
        if len(set(co_owner_ids)) != len(co_owner_ids):
            raise ValueError("Co-owners must not contain duplicates")

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        category: SystemCategory,
        owner_id: UserId,
        co_owner_ids: list[UserId] | None = None,
        approved: bool = False,
    ) -> System:
        """Factory method for creating a new system.

        Args:
            name: Display name (1-255 characters)
            description: Free-form description
            category: Business category
            owner_id: The single owning user
            co_owner_ids: Additional users allowed to manage the system
            approved: Whether the system is visible to every user

        Returns:
            A new System aggregate

        Raises:
            ValueError: If the name is invalid or co-owners break the
                ownership invariants
        """
        now = datetime.now(UTC)
        return cls(
            id=SystemId.generate(),
            name=name.strip(),
            description=description,
            category=category,
            owner_id=owner_id,
            co_owner_ids=list(co_owner_ids or []),
            approved=approved,
            created_at=now,
            updated_at=now,
        )

    def is_owner(self, user_id: UserId) -> bool:
        return self.owner_id == user_id

    def is_owner_or_co_owner(self, user_id: UserId) -> bool:
        """Check whether the user owns or co-owns this system."""
        return self.owner_id == user_id or user_id in self.co_owner_ids

    def update_details(
        self,
        name: str | None = None,
        description: str | None = None,
        category: SystemCategory | None = None,
    ) -> None:
        """Update descriptive fields. ``None`` leaves a field unchanged.

        Raises:
            ValueError: If the new name is invalid
        """
        if name is not None:
            self._validate_name(name)
            self.name = name.strip()
        if description is not None:
            self.description = description
        if category is not None:
            self.category = category
        self._touch()

    def transfer_ownership(self, new_owner_id: UserId) -> None:
        """Make another user the owner.

        A co-owner promoted to owner is removed from the co-owner list so the
        owner never appears twice.
        """
        if new_owner_id == self.owner_id:
            return
        self.owner_id = new_owner_id
        self.co_owner_ids = [uid for uid in self.co_owner_ids if uid != new_owner_id]
        self._touch()

    def add_co_owner(self, user_id: UserId) -> None:
        """Append a co-owner.

        Raises:
            ValueError: If the user already owns or co-owns the system
        """
        if self.is_owner_or_co_owner(user_id):
            raise ValueError(f"User {user_id} already owns or co-owns this system")
        self.co_owner_ids.append(user_id)
        self._touch()

    def remove_co_owner(self, user_id: UserId) -> bool:
        """Remove a co-owner.

        Returns:
            True if the user was a co-owner, False otherwise
        """
        if user_id not in self.co_owner_ids:
            return False
        self.co_owner_ids.remove(user_id)
        self._touch()
        return True

    def set_approved(self, approved: bool) -> None:
        self.approved = approved
        self._touch()

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)
