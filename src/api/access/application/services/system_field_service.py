"""Custom field service for the access bounded context."""

from __future__ import annotations

from access.application.observability import (
    DefaultSystemServiceProbe,
    SystemServiceProbe,
)
from access.application.services.lookups import require_system
from access.domain import policies
from access.domain.aggregates import System, SystemField, User
from access.domain.value_objects import FieldType, SystemFieldId, SystemId
from access.ports.exceptions import (
    DuplicateSystemFieldNameError,
    SystemFieldNotFoundError,
    UnauthorizedError,
)
from access.ports.repositories import IEntityStore


class SystemFieldService:
    """Application service for the custom fields defined on a system.

    Anyone who may view a system may list its fields; defining, changing
    and removing them requires managing the system.
    """

    def __init__(self, store: IEntityStore, probe: SystemServiceProbe | None = None):
        self._store = store
        self._probe = probe or DefaultSystemServiceProbe()

    async def _managed_system(self, actor: User, system_id: SystemId) -> System:
        system = await require_system(self._store, system_id)
        if not policies.can_manage_system(actor, system):
            self._probe.permission_denied(
                actor_id=actor.id.value, action="manage fields", system_id=system_id.value
            )
            raise UnauthorizedError(f"User {actor.id} may not manage fields of {system_id}")
        return system

    async def _field_of(self, system_id: SystemId, field_id: SystemFieldId) -> SystemField:
        system_field = await self._store.system_fields.get_by_id(field_id)
        if system_field is None or system_field.system_id != system_id:
            raise SystemFieldNotFoundError(
                f"Field {field_id} not found on system {system_id}"
            )
        return system_field

    async def list_fields(self, actor: User, system_id: SystemId) -> list[SystemField]:
        """List a system's fields in creation order.

        Raises:
            SystemNotFoundError: If the system does not exist
            UnauthorizedError: If the actor may not view the system
        """
        system = await require_system(self._store, system_id)
        if not policies.can_view_system(actor, system):
            raise UnauthorizedError(f"User {actor.id} may not view system {system_id}")
        return await self._store.system_fields.list_by_system(system_id)

    async def create_field(
        self,
        actor: User,
        system_id: SystemId,
        name: str,
        field_type: FieldType = FieldType.TEXT,
        options: list[str] | None = None,
        required: bool = False,
    ) -> SystemField:
        """Define a new field on a system.

        Raises:
            SystemNotFoundError: If the system does not exist
            UnauthorizedError: If the actor may not manage the system
            DuplicateSystemFieldNameError: If the name is already used
            ValueError: If the name is empty
        """
        async with self._store.transaction():
            await self._managed_system(actor, system_id)
            system_field = SystemField.create(
                system_id=system_id,
                name=name,
                field_type=field_type,
                options=options,
                required=required,
            )
            if await self._store.system_fields.get_by_name(system_id, system_field.name):
                raise DuplicateSystemFieldNameError(
                    f"Field '{system_field.name}' already exists on this system"
                )
            await self._store.system_fields.save(system_field)

        self._probe.field_created(
            system_id=system_id.value,
            field_id=system_field.id.value,
            name=system_field.name,
        )
        return system_field

    async def update_field(
        self,
        actor: User,
        system_id: SystemId,
        field_id: SystemFieldId,
        name: str | None = None,
        field_type: FieldType | None = None,
        options: list[str] | None = None,
        required: bool | None = None,
    ) -> SystemField:
        """Change a field definition. ``None`` leaves a value unchanged.

        Raises:
            SystemNotFoundError: If the system does not exist
            SystemFieldNotFoundError: If the field is not on the system
            UnauthorizedError: If the actor may not manage the system
            DuplicateSystemFieldNameError: If the new name is already used
        """
        async with self._store.transaction():
            await self._managed_system(actor, system_id)
            system_field = await self._field_of(system_id, field_id)
            system_field.update(
                name=name, field_type=field_type, options=options, required=required
            )
            await self._store.system_fields.save(system_field)

        self._probe.field_updated(system_id=system_id.value, field_id=field_id.value)
        return system_field

    async def delete_field(
        self, actor: User, system_id: SystemId, field_id: SystemFieldId
    ) -> None:
        """Remove a field definition.

        Raises:
            SystemNotFoundError: If the system does not exist
            SystemFieldNotFoundError: If the field is not on the system
            UnauthorizedError: If the actor may not manage the system
        """
        async with self._store.transaction():
            await self._managed_system(actor, system_id)
            await self._field_of(system_id, field_id)
            await self._store.system_fields.delete(field_id)

        self._probe.field_deleted(system_id=system_id.value, field_id=field_id.value)
