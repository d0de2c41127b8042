"""PostgreSQL implementation of IOffboardingRequestRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from access.domain.aggregates import OffboardingRequest
from access.domain.value_objects import (
    OffboardingRequestId,
    OffboardingStatus,
    SystemId,
    UserId,
)
from access.infrastructure.models import OffboardingRequestModel
from access.infrastructure.observability import (
    DefaultRepositoryProbe,
    RepositoryProbe,
)
from access.ports.repositories import IOffboardingRequestRepository


class OffboardingRequestRepository(IOffboardingRequestRepository):
    """PostgreSQL-backed repository for offboarding requests."""

    def __init__(
        self, session: AsyncSession, probe: RepositoryProbe | None = None
    ) -> None:
        self._session = session
        self._probe = probe or DefaultRepositoryProbe()

    async def save(self, request: OffboardingRequest) -> None:
        stmt = select(OffboardingRequestModel).where(
            OffboardingRequestModel.id == request.id.value
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model:
            # Only the status transition mutates a stored request
            model.status = request.status.value
            model.completed_at = request.completed_at
            model.notes = request.notes
        else:
            model = OffboardingRequestModel(
                id=request.id.value,
                user_id=request.user_id.value,
                requested_by=request.requested_by.value,
                system_ids=[sid.value for sid in request.system_ids],
                all_systems=request.all_systems,
                removal_date=request.removal_date,
                status=request.status.value,
                notes=request.notes,
                created_at=request.created_at,
                completed_at=request.completed_at,
            )
            self._session.add(model)

        await self._session.flush()
        self._probe.entity_saved("offboarding_request", request.id.value)

    async def get_by_id(
        self, request_id: OffboardingRequestId
    ) -> OffboardingRequest | None:
        stmt = select(OffboardingRequestModel).where(
            OffboardingRequestModel.id == request_id.value
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def list_all(
        self, status: OffboardingStatus | None = None
    ) -> list[OffboardingRequest]:
        stmt = select(OffboardingRequestModel).order_by(
            OffboardingRequestModel.created_at.desc()
        )
        if status is not None:
            stmt = stmt.where(OffboardingRequestModel.status == status.value)
        result = await self._session.execute(stmt)
        return [_to_domain(model) for model in result.scalars().all()]


def _to_domain(model: OffboardingRequestModel) -> OffboardingRequest:
    return OffboardingRequest(
        id=OffboardingRequestId(value=model.id),
        user_id=UserId(value=model.user_id),
        requested_by=UserId(value=model.requested_by),
        system_ids=[SystemId(value=sid) for sid in model.system_ids or []],
        all_systems=model.all_systems,
        removal_date=model.removal_date,
        status=OffboardingStatus(model.status),
        notes=model.notes,
        created_at=model.created_at,
        completed_at=model.completed_at,
    )
