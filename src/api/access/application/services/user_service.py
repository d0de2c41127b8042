"""User application service for the access bounded context."""

from __future__ import annotations

from access.application.observability import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)
from access.application.services.lookups import require_user
from access.domain import policies
from access.domain.aggregates import User
from access.domain.listing import matches_search, sort_by
from access.domain.value_objects import Role, UserId
from access.ports.exceptions import DuplicateUserEmailError, UnauthorizedError
from access.ports.repositories import IEntityStore


class UserService:
    """Application service for user management and caller resolution."""

    def __init__(self, store: IEntityStore, probe: UserServiceProbe | None = None):
        """Initialize UserService with dependencies.

        Args:
            store: Entity store for persistence and transactions
            probe: Optional domain probe for observability
        """
        self._store = store
        self._probe = probe or DefaultUserServiceProbe()

    async def resolve_caller(self, user_id: UserId) -> User | None:
        """Resolve an identity supplied upstream to a stored user."""
        user = await self._store.users.get_by_id(user_id)
        if user is None:
            self._probe.unknown_caller(user_id.value)
            return None
        self._probe.user_resolved(user_id.value)
        return user

    async def create_user(
        self,
        actor: User,
        name: str,
        email: str,
        department: str = "",
        role: Role = Role.MEMBER,
    ) -> User:
        """Create a user. Administrators only.

        Raises:
            UnauthorizedError: If the actor is not an administrator
            DuplicateUserEmailError: If the email is already registered
            ValueError: If name or email are invalid
        """
        if not policies.is_global_admin(actor):
            raise UnauthorizedError("Only administrators can create users")

        try:
            user = User.create(name=name, email=email, department=department, role=role)
            async with self._store.transaction():
                if await self._store.users.get_by_email(user.email) is not None:
                    raise DuplicateUserEmailError(
                        f"Email '{user.email}' is already registered"
                    )
                await self._store.users.save(user)
        except (DuplicateUserEmailError, ValueError) as e:
            self._probe.user_creation_failed(email=email, error=str(e))
            raise

        self._probe.user_created(user.id.value, user.email, user.role.value)
        return user

    async def get_user(self, user_id: UserId) -> User:
        """Get a user by id.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        return await require_user(self._store, user_id)

    async def list_users(self, search: str | None = None) -> list[User]:
        """List users ordered by name, filtered across name, email and department."""
        users = [
            user
            for user in await self._store.users.list_all()
            if matches_search(search, user.name, user.email, user.department)
        ]
        return sort_by(users, lambda user: user.name)

    async def bootstrap_admin(self, email: str, name: str) -> tuple[User, bool]:
        """Provision an administrator unless a user with the email exists.

        An existing user is returned unchanged, whatever its role.

        Returns:
            The user and whether it was created
        """
        async with self._store.transaction():
            existing = await self._store.users.get_by_email(email)
            if existing is not None:
                return existing, False
            user = User.create(name=name, email=email, role=Role.ADMIN)
            await self._store.users.save(user)

        self._probe.user_created(user.id.value, user.email, user.role.value)
        return user, True
