"""Authorization service for the access bounded context.

Answers the ownership and role questions by id, reading the entity store.
The decisions themselves live in ``access.domain.policies``.
"""

from __future__ import annotations

from access.application.services.lookups import require_system
from access.application.value_objects import SystemPermissions
from access.domain import policies
from access.domain.value_objects import SystemId, UserId
from access.ports.repositories import IEntityStore


class AuthorizationService:
    """Id-based authorization predicates.

    Missing users or systems never raise here: they simply grant nothing.
    """

    def __init__(self, store: IEntityStore):
        self._store = store

    async def is_global_admin(self, user_id: UserId) -> bool:
        user = await self._store.users.get_by_id(user_id)
        return policies.is_global_admin(user)

    async def is_owner_or_co_owner(self, user_id: UserId, system_id: SystemId) -> bool:
        user = await self._store.users.get_by_id(user_id)
        system = await self._store.systems.get_by_id(system_id)
        return policies.is_owner_or_co_owner(user, system)

    async def can_manage_system(self, user_id: UserId, system_id: SystemId) -> bool:
        user = await self._store.users.get_by_id(user_id)
        system = await self._store.systems.get_by_id(system_id)
        return policies.can_manage_system(user, system)

    async def can_delete_system(self, user_id: UserId) -> bool:
        user = await self._store.users.get_by_id(user_id)
        return policies.can_delete_system(user)

    async def can_create_system(self, user_id: UserId) -> bool:
        user = await self._store.users.get_by_id(user_id)
        return policies.can_create_system(user)

    async def can_approve_system(self, user_id: UserId) -> bool:
        user = await self._store.users.get_by_id(user_id)
        return policies.can_approve_system(user)

    async def can_view_system(self, user_id: UserId, system_id: SystemId) -> bool:
        user = await self._store.users.get_by_id(user_id)
        system = await self._store.systems.get_by_id(system_id)
        return policies.can_view_system(user, system)

    async def permissions_for(
        self, user_id: UserId, system_id: SystemId
    ) -> SystemPermissions:
        """Summarize what a user may do with a system.

        Raises:
            SystemNotFoundError: If the system does not exist
        """
        system = await require_system(self._store, system_id)
        user = await self._store.users.get_by_id(user_id)
        return SystemPermissions(
            can_view=policies.can_view_system(user, system),
            can_manage=policies.can_manage_system(user, system),
            can_delete=policies.can_delete_system(user),
            can_approve=policies.can_approve_system(user),
        )
