"""PostgreSQL implementation of ISystemFieldRepository."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from access.domain.aggregates import SystemField
from access.domain.value_objects import FieldType, SystemFieldId, SystemId
from access.infrastructure.models import SystemFieldModel
from access.infrastructure.observability import (
    DefaultRepositoryProbe,
    RepositoryProbe,
)
from access.ports.exceptions import DuplicateSystemFieldNameError
from access.ports.repositories import ISystemFieldRepository


class SystemFieldRepository(ISystemFieldRepository):
    """PostgreSQL-backed repository for custom system fields."""

    def __init__(
        self, session: AsyncSession, probe: RepositoryProbe | None = None
    ) -> None:
        self._session = session
        self._probe = probe or DefaultRepositoryProbe()

    async def save(self, system_field: SystemField) -> None:
        """Persist a field definition.

        Raises:
            DuplicateSystemFieldNameError: If the name is taken on the system
        """
        existing = await self.get_by_name(system_field.system_id, system_field.name)
        if existing is not None and existing.id != system_field.id:
            self._probe.duplicate_detected("system_field", system_field.name)
            raise DuplicateSystemFieldNameError(
                f"Field '{system_field.name}' already exists on this system"
            )

        try:
            stmt = select(SystemFieldModel).where(
                SystemFieldModel.id == system_field.id.value
            )
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

            if model:
                model.name = system_field.name
                model.field_type = system_field.field_type.value
                model.options = list(system_field.options)
                model.required = system_field.required
            else:
                model = SystemFieldModel(
                    id=system_field.id.value,
                    system_id=system_field.system_id.value,
                    name=system_field.name,
                    field_type=system_field.field_type.value,
                    options=list(system_field.options),
                    required=system_field.required,
                    created_at=system_field.created_at,
                )
                self._session.add(model)

            await self._session.flush()
        except IntegrityError as e:
            if "uq_system_fields_system_name" in str(e):
                self._probe.duplicate_detected("system_field", system_field.name)
                raise DuplicateSystemFieldNameError(
                    f"Field '{system_field.name}' already exists on this system"
                ) from e
            raise

        self._probe.entity_saved("system_field", system_field.id.value)

    async def get_by_id(self, field_id: SystemFieldId) -> SystemField | None:
        stmt = select(SystemFieldModel).where(SystemFieldModel.id == field_id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def get_by_name(self, system_id: SystemId, name: str) -> SystemField | None:
        stmt = select(SystemFieldModel).where(
            SystemFieldModel.system_id == system_id.value,
            SystemFieldModel.name == name,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def list_by_system(self, system_id: SystemId) -> list[SystemField]:
        stmt = (
            select(SystemFieldModel)
            .where(SystemFieldModel.system_id == system_id.value)
            .order_by(SystemFieldModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [_to_domain(model) for model in result.scalars().all()]

    async def delete(self, field_id: SystemFieldId) -> bool:
        stmt = delete(SystemFieldModel).where(SystemFieldModel.id == field_id.value)
        result = await self._session.execute(stmt)
        deleted = result.rowcount > 0
        if deleted:
            self._probe.entity_deleted("system_field", field_id.value)
        return deleted

    async def delete_by_system(self, system_id: SystemId) -> int:
        stmt = delete(SystemFieldModel).where(
            SystemFieldModel.system_id == system_id.value
        )
        result = await self._session.execute(stmt)
        self._probe.entities_deleted("system_field", system_id.value, result.rowcount)
        return result.rowcount


def _to_domain(model: SystemFieldModel) -> SystemField:
    return SystemField(
        id=SystemFieldId(value=model.id),
        system_id=SystemId(value=model.system_id),
        name=model.name,
        field_type=FieldType(model.field_type),
        options=list(model.options or []),
        required=model.required,
        created_at=model.created_at,
    )
