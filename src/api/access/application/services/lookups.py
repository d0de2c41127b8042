"""Entity lookups shared by the access application services."""

from __future__ import annotations

from access.domain.aggregates import System, User
from access.domain.value_objects import SystemId, UserId
from access.ports.exceptions import SystemNotFoundError, UserNotFoundError
from access.ports.repositories import IEntityStore


async def require_system(store: IEntityStore, system_id: SystemId) -> System:
    """Load a system or raise SystemNotFoundError."""
    system = await store.systems.get_by_id(system_id)
    if system is None:
        raise SystemNotFoundError(f"System {system_id} not found")
    return system


async def require_user(store: IEntityStore, user_id: UserId) -> User:
    """Load a user or raise UserNotFoundError."""
    user = await store.users.get_by_id(user_id)
    if user is None:
        raise UserNotFoundError(f"User {user_id} not found")
    return user


async def users_by_id(store: IEntityStore) -> dict[UserId, User]:
    return {user.id: user for user in await store.users.list_all()}


async def systems_by_id(store: IEntityStore) -> dict[SystemId, System]:
    return {system.id: system for system in await store.systems.list_all()}
