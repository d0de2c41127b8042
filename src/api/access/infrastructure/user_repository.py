"""PostgreSQL implementation of IUserRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from access.domain.aggregates import User
from access.domain.value_objects import Role, UserId
from access.infrastructure.models import UserModel
from access.infrastructure.observability import (
    DefaultRepositoryProbe,
    RepositoryProbe,
)
from access.ports.exceptions import DuplicateUserEmailError
from access.ports.repositories import IUserRepository


class UserRepository(IUserRepository):
    """PostgreSQL-backed repository for User aggregates."""

    def __init__(
        self, session: AsyncSession, probe: RepositoryProbe | None = None
    ) -> None:
        """Initialize repository with database session and probe.

        Args:
            session: AsyncSession owned by the entity store
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultRepositoryProbe()

    async def save(self, user: User) -> None:
        """Persist a user aggregate, creating or updating it.

        Raises:
            DuplicateUserEmailError: If another user has the same email
        """
        existing = await self.get_by_email(user.email)
        if existing is not None and existing.id != user.id:
            self._probe.duplicate_detected("user", user.email)
            raise DuplicateUserEmailError(f"Email '{user.email}' is already registered")

        try:
            stmt = select(UserModel).where(UserModel.id == user.id.value)
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

            if model:
                model.name = user.name
                model.email = user.email
                model.department = user.department
                model.role = user.role.value
            else:
                model = UserModel(
                    id=user.id.value,
                    name=user.name,
                    email=user.email,
                    department=user.department,
                    role=user.role.value,
                )
                self._session.add(model)

            await self._session.flush()
        except IntegrityError as e:
            if "ix_users_email" in str(e):
                self._probe.duplicate_detected("user", user.email)
                raise DuplicateUserEmailError(
                    f"Email '{user.email}' is already registered"
                ) from e
            raise

        self._probe.entity_saved("user", user.id.value)

    async def get_by_id(self, user_id: UserId) -> User | None:
        stmt = select(UserModel).where(UserModel.id == user_id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == email.strip().lower())
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def list_all(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.name)
        result = await self._session.execute(stmt)
        return [_to_domain(model) for model in result.scalars().all()]


def _to_domain(model: UserModel) -> User:
    return User(
        id=UserId(value=model.id),
        name=model.name,
        email=model.email,
        department=model.department,
        role=Role(model.role),
    )
