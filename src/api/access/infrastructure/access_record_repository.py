"""PostgreSQL implementation of IAccessRecordRepository."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from access.domain.aggregates import AccessRecord
from access.domain.value_objects import AccessRecordId, AccessTag, SystemId, UserId
from access.infrastructure.models import AccessRecordModel
from access.infrastructure.observability import (
    DefaultRepositoryProbe,
    RepositoryProbe,
)
from access.ports.exceptions import DuplicateAccessRecordError
from access.ports.repositories import IAccessRecordRepository


class AccessRecordRepository(IAccessRecordRepository):
    """PostgreSQL-backed repository for access records.

    The (user_id, system_id) pair is checked before insert and guarded by
    the ``uq_access_records_user_system`` constraint for concurrent writers.
    """

    def __init__(
        self, session: AsyncSession, probe: RepositoryProbe | None = None
    ) -> None:
        self._session = session
        self._probe = probe or DefaultRepositoryProbe()

    async def save(self, record: AccessRecord) -> None:
        """Persist an access record.

        Raises:
            DuplicateAccessRecordError: If another record exists for the pair
        """
        existing = await self.get_by_user_and_system(record.user_id, record.system_id)
        if existing is not None and existing.id != record.id:
            self._probe.duplicate_detected(
                "access_record", f"{record.user_id}:{record.system_id}"
            )
            raise DuplicateAccessRecordError(
                f"User {record.user_id} already has access to system {record.system_id}"
            )

        tags = [{"key": tag.key, "value": tag.value} for tag in record.tags]
        try:
            stmt = select(AccessRecordModel).where(
                AccessRecordModel.id == record.id.value
            )
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

            if model:
                model.role = record.role
                model.granted_by = record.granted_by.value if record.granted_by else None
                model.tags = tags
            else:
                model = AccessRecordModel(
                    id=record.id.value,
                    user_id=record.user_id.value,
                    system_id=record.system_id.value,
                    role=record.role,
                    granted_date=record.granted_date,
                    granted_by=record.granted_by.value if record.granted_by else None,
                    tags=tags,
                )
                self._session.add(model)

            await self._session.flush()
        except IntegrityError as e:
            if "uq_access_records_user_system" in str(e):
                self._probe.duplicate_detected(
                    "access_record", f"{record.user_id}:{record.system_id}"
                )
                raise DuplicateAccessRecordError(
                    f"User {record.user_id} already has access to system "
                    f"{record.system_id}"
                ) from e
            raise

        self._probe.entity_saved("access_record", record.id.value)

    async def get_by_id(self, record_id: AccessRecordId) -> AccessRecord | None:
        stmt = select(AccessRecordModel).where(AccessRecordModel.id == record_id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def get_by_user_and_system(
        self, user_id: UserId, system_id: SystemId
    ) -> AccessRecord | None:
        stmt = select(AccessRecordModel).where(
            AccessRecordModel.user_id == user_id.value,
            AccessRecordModel.system_id == system_id.value,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def list_all(self) -> list[AccessRecord]:
        stmt = select(AccessRecordModel).order_by(AccessRecordModel.granted_date)
        result = await self._session.execute(stmt)
        return [_to_domain(model) for model in result.scalars().all()]

    async def list_by_user(self, user_id: UserId) -> list[AccessRecord]:
        stmt = select(AccessRecordModel).where(
            AccessRecordModel.user_id == user_id.value
        )
        result = await self._session.execute(stmt)
        return [_to_domain(model) for model in result.scalars().all()]

    async def list_by_system(self, system_id: SystemId) -> list[AccessRecord]:
        stmt = select(AccessRecordModel).where(
            AccessRecordModel.system_id == system_id.value
        )
        result = await self._session.execute(stmt)
        return [_to_domain(model) for model in result.scalars().all()]

    async def delete(self, record_id: AccessRecordId) -> bool:
        stmt = delete(AccessRecordModel).where(AccessRecordModel.id == record_id.value)
        result = await self._session.execute(stmt)
        deleted = result.rowcount > 0
        if deleted:
            self._probe.entity_deleted("access_record", record_id.value)
        return deleted

    async def delete_by_system(self, system_id: SystemId) -> int:
        stmt = delete(AccessRecordModel).where(
            AccessRecordModel.system_id == system_id.value
        )
        result = await self._session.execute(stmt)
        self._probe.entities_deleted("access_record", system_id.value, result.rowcount)
        return result.rowcount


def _to_domain(model: AccessRecordModel) -> AccessRecord:
    return AccessRecord(
        id=AccessRecordId(value=model.id),
        user_id=UserId(value=model.user_id),
        system_id=SystemId(value=model.system_id),
        role=model.role,
        granted_date=model.granted_date,
        granted_by=UserId(value=model.granted_by) if model.granted_by else None,
        tags=[AccessTag(key=tag["key"], value=tag["value"]) for tag in model.tags or []],
    )
