"""User aggregate for the access context."""

from __future__ import annotations

from dataclasses import dataclass

from access.domain.value_objects import Role, UserId


@dataclass(frozen=True)
class User:
    """An employee known to the access service.

    Users are immutable once created. The global administrator marker is the
    explicit ``Role.ADMIN``; department is descriptive only.
    """

    id: UserId
    name: str
    email: str
    department: str = ""
    role: Role = Role.MEMBER

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("User name must not be empty")
        if "@" not in self.email:
            raise ValueError(f"Invalid email address: {self.email!r}")

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        department: str = "",
        role: Role = Role.MEMBER,
    ) -> User:
        """Create a new user with a generated ID.

        Email addresses are stored lowercased so uniqueness checks are
        case-insensitive.

        Raises:
            ValueError: If name is empty or email is malformed
        """
        return cls(
            id=UserId.generate(),
            name=name.strip(),
            email=email.strip().lower(),
            department=department.strip(),
            role=role,
        )

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def __str__(self) -> str:
        """Return string representation."""
        return f"User({self.name})"

    def __eq__(self, other: object) -> bool:
        """Users are equal if they have the same ID (identity-based equality)."""
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)
