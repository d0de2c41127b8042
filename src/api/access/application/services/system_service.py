"""System application service for the access bounded context.

Orchestrates system lifecycle, visibility and co-ownership with the
authorization rules of ``access.domain.policies``.
"""

from __future__ import annotations

from access.application.observability import (
    DefaultSystemServiceProbe,
    SystemServiceProbe,
)
from access.application.services.lookups import (
    require_system,
    require_user,
    users_by_id,
)
from access.application.value_objects import SystemView
from access.domain import policies
from access.domain.aggregates import System, User
from access.domain.listing import matches_category, matches_search, sort_by
from access.domain.value_objects import SystemCategory, SystemId, UserId
from access.ports.exceptions import DuplicateCoOwnerError, UnauthorizedError
from access.ports.repositories import IEntityStore


class SystemService:
    """Application service for system management."""

    def __init__(self, store: IEntityStore, probe: SystemServiceProbe | None = None):
        """Initialize SystemService with dependencies.

        Args:
            store: Entity store for persistence and transactions
            probe: Optional domain probe for observability
        """
        self._store = store
        self._probe = probe or DefaultSystemServiceProbe()

    def _deny(
        self, actor: User, action: str, system_id: SystemId | None = None
    ) -> UnauthorizedError:
        self._probe.permission_denied(
            actor_id=actor.id.value,
            action=action,
            system_id=system_id.value if system_id else None,
        )
        return UnauthorizedError(f"User {actor.id} may not {action}")

    async def _view(self, system: System) -> SystemView:
        owner = await self._store.users.get_by_id(system.owner_id)
        co_owners = []
        for user_id in system.co_owner_ids:
            user = await self._store.users.get_by_id(user_id)
            if user is not None:
                co_owners.append(user)
        return SystemView(system=system, owner=owner, co_owners=co_owners)

    async def create_system(
        self,
        actor: User,
        name: str,
        description: str,
        category: SystemCategory,
        owner_id: UserId,
        co_owner_ids: list[UserId] | None = None,
        approved: bool = False,
    ) -> SystemView:
        """Create a system. Administrators only.

        Business rules:
        - The owner and every co-owner must exist
        - The owner may not be listed as a co-owner, and co-owners are unique

        Raises:
            UnauthorizedError: If the actor is not an administrator
            UserNotFoundError: If the owner or a co-owner does not exist
            ValueError: If the name or co-owner list is invalid
        """
        if not policies.can_create_system(actor):
            raise self._deny(actor, "create systems")

        try:
            async with self._store.transaction():
                await require_user(self._store, owner_id)
                for co_owner_id in co_owner_ids or []:
                    await require_user(self._store, co_owner_id)

                system = System.create(
                    name=name,
                    description=description,
                    category=category,
                    owner_id=owner_id,
                    co_owner_ids=co_owner_ids,
                    approved=approved,
                )
                await self._store.systems.save(system)
        except Exception as e:
            self._probe.system_creation_failed(name=name, error=str(e))
            raise

        self._probe.system_created(
            system_id=system.id.value,
            name=system.name,
            owner_id=owner_id.value,
            actor_id=actor.id.value,
        )
        return await self._view(system)

    async def get_system(self, actor: User, system_id: SystemId) -> SystemView:
        """Get a system the actor may view.

        Raises:
            SystemNotFoundError: If the system does not exist
            UnauthorizedError: If the system is unapproved and the actor
                neither administers nor (co-)owns it
        """
        system = await require_system(self._store, system_id)
        if not policies.can_view_system(actor, system):
            raise self._deny(actor, "view this system", system_id)
        return await self._view(system)

    async def list_systems(
        self,
        actor: User,
        search: str | None = None,
        category: str | None = None,
        approved: bool | None = None,
    ) -> list[SystemView]:
        """List the systems visible to the actor, ordered by name.

        Administrators see every system; other users see approved systems
        plus the ones they own or co-own. ``search`` matches name,
        description and owner name; ``category`` accepts ``"All"``.
        ``approved`` narrows the visible systems to one approval state.
        """
        users = await users_by_id(self._store)
        views: list[SystemView] = []
        for system in await self._store.systems.list_all():
            if not policies.can_view_system(actor, system):
                continue
            if approved is not None and system.approved != approved:
                continue
            owner = users.get(system.owner_id)
            if not matches_category(system.category.value, category):
                continue
            if not matches_search(
                search, system.name, system.description, owner.name if owner else None
            ):
                continue
            views.append(
                SystemView(
                    system=system,
                    owner=owner,
                    co_owners=[users[uid] for uid in system.co_owner_ids if uid in users],
                )
            )

        self._probe.systems_listed(actor_id=actor.id.value, count=len(views))
        return sort_by(views, lambda view: view.system.name)

    async def update_system(
        self,
        actor: User,
        system_id: SystemId,
        name: str | None = None,
        description: str | None = None,
        category: SystemCategory | None = None,
        owner_id: UserId | None = None,
    ) -> SystemView:
        """Update system metadata or transfer ownership.

        Transferring ownership to a co-owner removes them from the co-owners.

        Raises:
            SystemNotFoundError: If the system does not exist
            UnauthorizedError: If the actor may not manage the system
            UserNotFoundError: If the new owner does not exist
            ValueError: If the new name is invalid
        """
        async with self._store.transaction():
            system = await require_system(self._store, system_id)
            if not policies.can_manage_system(actor, system):
                raise self._deny(actor, "edit this system", system_id)

            system.update_details(name=name, description=description, category=category)
            if owner_id is not None:
                await require_user(self._store, owner_id)
                system.transfer_ownership(owner_id)
            await self._store.systems.save(system)

        self._probe.system_updated(system_id=system_id.value, actor_id=actor.id.value)
        return await self._view(system)

    async def set_approval(
        self, actor: User, system_id: SystemId, approved: bool
    ) -> SystemView:
        """Approve or unapprove a system. Administrators only.

        Raises:
            SystemNotFoundError: If the system does not exist
            UnauthorizedError: If the actor is not an administrator
        """
        async with self._store.transaction():
            system = await require_system(self._store, system_id)
            if not policies.can_approve_system(actor):
                raise self._deny(actor, "approve systems", system_id)
            system.set_approved(approved)
            await self._store.systems.save(system)

        self._probe.system_approval_changed(
            system_id=system_id.value, approved=approved, actor_id=actor.id.value
        )
        return await self._view(system)

    async def add_co_owner(
        self, actor: User, system_id: SystemId, user_id: UserId
    ) -> SystemView:
        """Add a co-owner.

        Raises:
            SystemNotFoundError: If the system does not exist
            UnauthorizedError: If the actor may not manage the system
            UserNotFoundError: If the user does not exist
            DuplicateCoOwnerError: If the user already owns or co-owns it
        """
        async with self._store.transaction():
            system = await require_system(self._store, system_id)
            if not policies.can_manage_system(actor, system):
                raise self._deny(actor, "edit this system", system_id)
            await require_user(self._store, user_id)
            if system.is_owner_or_co_owner(user_id):
                raise DuplicateCoOwnerError(
                    f"User {user_id} already owns or co-owns system {system_id}"
                )
            system.add_co_owner(user_id)
            await self._store.systems.save(system)

        self._probe.co_owner_added(
            system_id=system_id.value, user_id=user_id.value, actor_id=actor.id.value
        )
        return await self._view(system)

    async def remove_co_owner(
        self, actor: User, system_id: SystemId, user_id: UserId
    ) -> SystemView:
        """Remove a co-owner. Removing a user who is not a co-owner is a no-op.

        Raises:
            SystemNotFoundError: If the system does not exist
            UnauthorizedError: If the actor may not manage the system
        """
        async with self._store.transaction():
            system = await require_system(self._store, system_id)
            if not policies.can_manage_system(actor, system):
                raise self._deny(actor, "edit this system", system_id)
            removed = system.remove_co_owner(user_id)
            if removed:
                await self._store.systems.save(system)

        if removed:
            self._probe.co_owner_removed(
                system_id=system_id.value, user_id=user_id.value, actor_id=actor.id.value
            )
        return await self._view(system)

    async def delete_system(self, actor: User, system_id: SystemId) -> None:
        """Delete a system with its access records and custom fields.

        Raises:
            SystemNotFoundError: If the system does not exist
            UnauthorizedError: If the actor is not an administrator
        """
        async with self._store.transaction():
            await require_system(self._store, system_id)
            if not policies.can_delete_system(actor):
                raise self._deny(actor, "delete systems", system_id)

            records_removed = await self._store.access_records.delete_by_system(system_id)
            fields_removed = await self._store.system_fields.delete_by_system(system_id)
            await self._store.systems.delete(system_id)

        self._probe.system_deleted(
            system_id=system_id.value,
            actor_id=actor.id.value,
            records_removed=records_removed,
            fields_removed=fields_removed,
        )
