"""PostgreSQL implementation of ISystemRepository.

Co-owners live in the ``system_co_owners`` table. Saving a system
reconciles those rows against the aggregate instead of rewriting them, so
unchanged co-owners keep their rows.
"""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from access.domain.aggregates import System
from access.domain.value_objects import SystemCategory, SystemId, UserId
from access.infrastructure.models import SystemCoOwnerModel, SystemModel
from access.infrastructure.observability import (
    DefaultRepositoryProbe,
    RepositoryProbe,
)
from access.ports.repositories import ISystemRepository


class SystemRepository(ISystemRepository):
    """PostgreSQL-backed repository for System aggregates."""

    def __init__(
        self, session: AsyncSession, probe: RepositoryProbe | None = None
    ) -> None:
        self._session = session
        self._probe = probe or DefaultRepositoryProbe()

    async def save(self, system: System) -> None:
        """Persist a system aggregate with its co-owners."""
        stmt = select(SystemModel).where(SystemModel.id == system.id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model:
            model.name = system.name
            model.description = system.description
            model.category = system.category.value
            model.owner_id = system.owner_id.value
            model.approved = system.approved
            model.updated_at = system.updated_at
            _sync_co_owners(model, system)
        else:
            model = SystemModel(
                id=system.id.value,
                name=system.name,
                description=system.description,
                category=system.category.value,
                owner_id=system.owner_id.value,
                approved=system.approved,
                created_at=system.created_at,
                updated_at=system.updated_at,
                co_owners=[
                    SystemCoOwnerModel(user_id=uid.value, position=position)
                    for position, uid in enumerate(system.co_owner_ids)
                ],
            )
            self._session.add(model)

        await self._session.flush()
        self._probe.entity_saved("system", system.id.value)

    async def get_by_id(self, system_id: SystemId) -> System | None:
        stmt = select(SystemModel).where(SystemModel.id == system_id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def list_all(self) -> list[System]:
        stmt = select(SystemModel).order_by(SystemModel.created_at)
        result = await self._session.execute(stmt)
        return [_to_domain(model) for model in result.scalars().all()]

    async def delete(self, system_id: SystemId) -> bool:
        stmt = delete(SystemModel).where(SystemModel.id == system_id.value)
        result = await self._session.execute(stmt)
        deleted = result.rowcount > 0
        if deleted:
            self._probe.entity_deleted("system", system_id.value)
        return deleted


def _sync_co_owners(model: SystemModel, system: System) -> None:
    """Reconcile co-owner rows with the aggregate's ordered co-owner list."""
    wanted = [uid.value for uid in system.co_owner_ids]
    rows = {row.user_id: row for row in model.co_owners}

    for user_id, row in rows.items():
        if user_id not in wanted:
            model.co_owners.remove(row)

    for position, user_id in enumerate(wanted):
        row = rows.get(user_id)
        if row is None:
            model.co_owners.append(
                SystemCoOwnerModel(user_id=user_id, position=position)
            )
        else:
            row.position = position


def _to_domain(model: SystemModel) -> System:
    co_owners = sorted(model.co_owners, key=lambda row: row.position)
    return System(
        id=SystemId(value=model.id),
        name=model.name,
        description=model.description,
        category=SystemCategory(model.category),
        owner_id=UserId(value=model.owner_id),
        co_owner_ids=[UserId(value=row.user_id) for row in co_owners],
        approved=model.approved,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )
