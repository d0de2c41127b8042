"""Access record service for the access bounded context.

Grants, changes and revokes access, and reconciles access records with the
users and systems they reference for listing views. Records pointing at a
user or system that no longer exists are dropped from every view.
"""

from __future__ import annotations

from access.application.observability import (
    AccessServiceProbe,
    DefaultAccessServiceProbe,
)
from access.application.services.lookups import (
    require_system,
    require_user,
    systems_by_id,
    users_by_id,
)
from access.application.value_objects import (
    AccessRecordView,
    SortField,
    SystemAccess,
    SystemMember,
)
from access.domain import policies
from access.domain.aggregates import AccessRecord, System, User
from access.domain.listing import (
    DashboardBuckets,
    dashboard_buckets,
    matches_category,
    matches_search,
    sort_by,
)
from access.domain.tags import parse_tags
from access.domain.value_objects import AccessRecordId, AccessTag, SystemId, UserId
from access.ports.exceptions import (
    AccessRecordNotFoundError,
    DuplicateAccessRecordError,
    UnauthorizedError,
)
from access.ports.repositories import IEntityStore


class AccessService:
    """Application service for access records and their reconciliation."""

    def __init__(self, store: IEntityStore, probe: AccessServiceProbe | None = None):
        """Initialize AccessService with dependencies.

        Args:
            store: Entity store for persistence and transactions
            probe: Optional domain probe for observability
        """
        self._store = store
        self._probe = probe or DefaultAccessServiceProbe()

    async def _managed_system(self, actor: User, system_id: SystemId) -> System:
        system = await require_system(self._store, system_id)
        if not policies.can_manage_system(actor, system):
            raise UnauthorizedError(f"User {actor.id} may not manage access to {system_id}")
        return system

    # Mutations

    async def grant_access(
        self,
        actor: User,
        system_id: SystemId,
        user_id: UserId,
        role: str | None = None,
        tags: list[AccessTag] | str | None = None,
    ) -> AccessRecord:
        """Give a user access to a system, granted today by the actor.

        Raises:
            SystemNotFoundError: If the system does not exist
            UnauthorizedError: If the actor may not manage the system
            UserNotFoundError: If the user does not exist
            DuplicateAccessRecordError: If the user already has access
        """
        try:
            async with self._store.transaction():
                await self._managed_system(actor, system_id)
                await require_user(self._store, user_id)
                if await self._store.access_records.get_by_user_and_system(
                    user_id, system_id
                ):
                    raise DuplicateAccessRecordError(
                        f"User {user_id} already has access to system {system_id}"
                    )
                record = AccessRecord.create(
                    user_id=user_id,
                    system_id=system_id,
                    role=role,
                    granted_by=actor.id,
                    tags=_coerce_tags(tags),
                )
                await self._store.access_records.save(record)
        except DuplicateAccessRecordError as e:
            self._probe.access_grant_failed(user_id.value, system_id.value, str(e))
            raise

        self._probe.access_granted(
            record_id=record.id.value,
            user_id=user_id.value,
            system_id=system_id.value,
            role=record.role,
            actor_id=actor.id.value,
        )
        return record

    async def update_access(
        self,
        actor: User,
        system_id: SystemId,
        user_id: UserId,
        role: str | None = None,
        tags: list[AccessTag] | str | None = None,
    ) -> AccessRecord:
        """Change the role and/or tags of a user's access to a system.

        ``None`` leaves a value unchanged; an empty role clears it. Tags may
        be given as pairs or as a ``key:value`` text block and replace the
        current tags.

        Raises:
            SystemNotFoundError: If the system does not exist
            UnauthorizedError: If the actor may not manage the system
            AccessRecordNotFoundError: If the user has no access to the system
        """
        async with self._store.transaction():
            await self._managed_system(actor, system_id)
            record = await self._store.access_records.get_by_user_and_system(
                user_id, system_id
            )
            if record is None:
                raise AccessRecordNotFoundError(
                    f"User {user_id} has no access to system {system_id}"
                )
            if role is not None:
                record.change_role(role)
            if tags is not None:
                record.replace_tags(_coerce_tags(tags))
            await self._store.access_records.save(record)

        self._probe.access_updated(record.id.value, record.role, len(record.tags))
        return record

    async def revoke_access(self, actor: User, record_id: AccessRecordId) -> None:
        """Delete an access record by id.

        A record whose system no longer exists can only be removed by an
        administrator.

        Raises:
            AccessRecordNotFoundError: If the record does not exist
            UnauthorizedError: If the actor may not manage the system
        """
        async with self._store.transaction():
            record = await self._store.access_records.get_by_id(record_id)
            if record is None:
                raise AccessRecordNotFoundError(f"Access record {record_id} not found")
            system = await self._store.systems.get_by_id(record.system_id)
            if not (
                policies.is_global_admin(actor)
                or policies.can_manage_system(actor, system)
            ):
                raise UnauthorizedError(
                    f"User {actor.id} may not manage access to {record.system_id}"
                )
            await self._store.access_records.delete(record_id)

        self._probe.access_revoked(
            record_id.value, record.user_id.value, record.system_id.value, actor.id.value
        )

    async def revoke_user_access(
        self, actor: User, system_id: SystemId, user_id: UserId
    ) -> None:
        """Remove a user's access to a system.

        Raises:
            SystemNotFoundError: If the system does not exist
            UnauthorizedError: If the actor may not manage the system
            AccessRecordNotFoundError: If the user has no access to the system
        """
        async with self._store.transaction():
            await self._managed_system(actor, system_id)
            record = await self._store.access_records.get_by_user_and_system(
                user_id, system_id
            )
            if record is None:
                raise AccessRecordNotFoundError(
                    f"User {user_id} has no access to system {system_id}"
                )
            await self._store.access_records.delete(record.id)

        self._probe.access_revoked(
            record.id.value, user_id.value, system_id.value, actor.id.value
        )

    # Reconciliation

    async def systems_for_user(self, user_id: UserId) -> list[SystemAccess]:
        """Systems the user has access records for. No particular order."""
        records = await self._store.access_records.list_by_user(user_id)
        entries: list[SystemAccess] = []
        for record in records:
            system = await self._store.systems.get_by_id(record.system_id)
            if system is None:
                continue
            entries.append(
                SystemAccess(
                    system=system,
                    access_record_id=record.id,
                    role=record.role,
                    granted_date=record.granted_date,
                    tags=list(record.tags),
                )
            )
        if len(entries) != len(records):
            self._probe.dangling_references_skipped(
                "systems_for_user", len(records) - len(entries)
            )
        return entries

    async def users_for_system(self, system_id: SystemId) -> list[SystemMember]:
        """Users holding access records for the system. No particular order."""
        records = await self._store.access_records.list_by_system(system_id)
        entries: list[SystemMember] = []
        for record in records:
            user = await self._store.users.get_by_id(record.user_id)
            if user is None:
                continue
            entries.append(
                SystemMember(
                    user=user,
                    access_record_id=record.id,
                    role=record.role,
                    granted_date=record.granted_date,
                    granted_by=record.granted_by,
                    tags=list(record.tags),
                )
            )
        if len(entries) != len(records):
            self._probe.dangling_references_skipped(
                "users_for_system", len(records) - len(entries)
            )
        return entries

    async def list_user_systems(
        self,
        actor: User,
        user_id: UserId,
        search: str | None = None,
        category: str | None = None,
        sort: SortField = SortField.NAME,
        descending: bool = False,
    ) -> list[SystemAccess]:
        """The "my access" view: a user's systems, filtered and sorted.

        ``search`` matches system name, description and role. Users may list
        their own access; administrators may list anyone's.

        Raises:
            UnauthorizedError: If the actor is neither the user nor an admin
            UserNotFoundError: If the user does not exist
        """
        if actor.id != user_id and not policies.is_global_admin(actor):
            raise UnauthorizedError(f"User {actor.id} may not list access of {user_id}")
        await require_user(self._store, user_id)

        entries = [
            entry
            for entry in await self.systems_for_user(user_id)
            if matches_category(entry.system.category.value, category)
            and matches_search(
                search, entry.system.name, entry.system.description, entry.role
            )
        ]
        keys = {
            SortField.NAME: lambda e: e.system.name,
            SortField.ROLE: lambda e: e.role,
            SortField.GRANTED_DATE: lambda e: e.granted_date.isoformat(),
        }
        return sort_by(entries, keys[sort], descending)

    async def list_system_members(
        self,
        actor: User,
        system_id: SystemId,
        search: str | None = None,
        sort: SortField = SortField.NAME,
        descending: bool = False,
    ) -> list[SystemMember]:
        """Users with access to a system, filtered and sorted.

        ``search`` matches user name, email and role.

        Raises:
            SystemNotFoundError: If the system does not exist
            UnauthorizedError: If the actor may not view the system
        """
        system = await require_system(self._store, system_id)
        if not policies.can_view_system(actor, system):
            raise UnauthorizedError(f"User {actor.id} may not view system {system_id}")

        entries = [
            entry
            for entry in await self.users_for_system(system_id)
            if matches_search(search, entry.user.name, entry.user.email, entry.role)
        ]
        keys = {
            SortField.NAME: lambda e: e.user.name,
            SortField.ROLE: lambda e: e.role,
            SortField.GRANTED_DATE: lambda e: e.granted_date.isoformat(),
        }
        return sort_by(entries, keys[sort], descending)

    async def dashboard(self, actor: User) -> DashboardBuckets:
        """Owned, assigned and (for administrators) other systems, by name."""
        systems = sort_by(await self._store.systems.list_all(), lambda s: s.name)
        records = await self._store.access_records.list_by_user(actor.id)
        return dashboard_buckets(actor, systems, records)

    async def list_access_records(
        self,
        actor: User,
        search: str | None = None,
        system_id: SystemId | None = None,
    ) -> list[AccessRecordView]:
        """Every access record with its user and system. Administrators only.

        ``search`` matches user name, user email and system name. Ordered by
        user name, then system name.

        Raises:
            UnauthorizedError: If the actor is not an administrator
        """
        if not policies.is_global_admin(actor):
            raise UnauthorizedError("Only administrators can list all access records")

        users = await users_by_id(self._store)
        systems = await systems_by_id(self._store)
        records = (
            await self._store.access_records.list_by_system(system_id)
            if system_id is not None
            else await self._store.access_records.list_all()
        )

        views: list[AccessRecordView] = []
        for record in records:
            user = users.get(record.user_id)
            system = systems.get(record.system_id)
            if user is None or system is None:
                continue
            if matches_search(search, user.name, user.email, system.name):
                views.append(AccessRecordView(record=record, user=user, system=system))

        views = sort_by(views, lambda view: view.system.name)
        return sort_by(views, lambda view: view.user.name)

    async def available_users(self, actor: User, system_id: SystemId) -> list[User]:
        """Users without access to the system yet, ordered by name.

        Raises:
            SystemNotFoundError: If the system does not exist
            UnauthorizedError: If the actor may not manage the system
        """
        await self._managed_system(actor, system_id)
        records = await self._store.access_records.list_by_system(system_id)
        granted = {record.user_id for record in records}
        users = [u for u in await self._store.users.list_all() if u.id not in granted]
        return sort_by(users, lambda user: user.name)


def _coerce_tags(tags: list[AccessTag] | str | None) -> list[AccessTag]:
    if tags is None:
        return []
    if isinstance(tags, str):
        return parse_tags(tags)
    return list(tags)
