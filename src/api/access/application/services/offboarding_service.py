"""Offboarding application service for the access bounded context.

Requests move from pending to completed. Completion is restricted to
administrators and, unless disabled in settings, revokes the matching
access records in the same transaction.
"""

from __future__ import annotations

from datetime import date

from access.application.observability import (
    DefaultOffboardingServiceProbe,
    OffboardingServiceProbe,
)
from access.application.services.lookups import require_system, require_user
from access.domain import policies
from access.domain.aggregates import OffboardingRequest, User
from access.domain.value_objects import (
    OffboardingRequestId,
    OffboardingStatus,
    SystemId,
    UserId,
)
from access.ports.exceptions import (
    EntityNotFoundError,
    OffboardingRequestNotFoundError,
    UnauthorizedError,
)
from access.ports.repositories import IEntityStore


class OffboardingService:
    """Application service for offboarding requests.

    Any user may file a request. Administrators see and complete every
    request; other users see the requests they filed or that concern them.
    """

    def __init__(
        self,
        store: IEntityStore,
        revokes_access: bool = True,
        probe: OffboardingServiceProbe | None = None,
    ):
        """Initialize OffboardingService with dependencies.

        Args:
            store: Entity store for persistence and transactions
            revokes_access: Delete matching access records on completion
            probe: Optional domain probe for observability
        """
        self._store = store
        self._revokes_access = revokes_access
        self._probe = probe or DefaultOffboardingServiceProbe()

    @staticmethod
    def _may_see(actor: User, request: OffboardingRequest) -> bool:
        return (
            policies.is_global_admin(actor)
            or request.requested_by == actor.id
            or request.user_id == actor.id
        )

    async def create_request(
        self,
        actor: User,
        user_id: UserId,
        removal_date: date,
        system_ids: list[SystemId] | None = None,
        all_systems: bool = False,
        notes: str | None = None,
    ) -> OffboardingRequest:
        """File a pending offboarding request.

        Raises:
            UserNotFoundError: If the user does not exist
            SystemNotFoundError: If a listed system does not exist
            ValueError: If no systems are given and ``all_systems`` is unset
        """
        try:
            async with self._store.transaction():
                await require_user(self._store, user_id)
                request = OffboardingRequest.create(
                    user_id=user_id,
                    requested_by=actor.id,
                    removal_date=removal_date,
                    system_ids=system_ids,
                    all_systems=all_systems,
                    notes=notes,
                )
                for system_id in request.system_ids:
                    await require_system(self._store, system_id)
                await self._store.offboarding_requests.save(request)
        except (EntityNotFoundError, ValueError) as e:
            self._probe.request_creation_failed(user_id=user_id.value, error=str(e))
            raise

        self._probe.request_created(
            request_id=request.id.value,
            user_id=user_id.value,
            all_systems=request.all_systems,
            system_count=len(request.system_ids),
            actor_id=actor.id.value,
        )
        return request

    async def complete_request(
        self, actor: User, request_id: OffboardingRequestId
    ) -> OffboardingRequest:
        """Complete a request. Completing a completed request is a no-op.

        Raises:
            UnauthorizedError: If the actor is not an administrator
            OffboardingRequestNotFoundError: If the request does not exist
        """
        if not policies.is_global_admin(actor):
            raise UnauthorizedError("Only administrators can complete offboarding")

        revoked = 0
        async with self._store.transaction():
            request = await self._store.offboarding_requests.get_by_id(request_id)
            if request is None:
                raise OffboardingRequestNotFoundError(
                    f"Offboarding request {request_id} not found"
                )
            changed = request.complete()
            if changed:
                if self._revokes_access:
                    revoked = await self._revoke(request)
                await self._store.offboarding_requests.save(request)

        if changed:
            self._probe.request_completed(
                request_id=request_id.value,
                user_id=request.user_id.value,
                records_revoked=revoked,
            )
        else:
            self._probe.request_already_completed(request_id.value)
        return request

    async def _revoke(self, request: OffboardingRequest) -> int:
        revoked = 0
        for record in await self._store.access_records.list_by_user(request.user_id):
            if request.covers_system(record.system_id):
                if await self._store.access_records.delete(record.id):
                    revoked += 1
        return revoked

    async def get_request(
        self, actor: User, request_id: OffboardingRequestId
    ) -> OffboardingRequest:
        """Get a request the actor may see.

        Raises:
            OffboardingRequestNotFoundError: If the request does not exist
            UnauthorizedError: If the actor may not see it
        """
        request = await self._store.offboarding_requests.get_by_id(request_id)
        if request is None:
            raise OffboardingRequestNotFoundError(
                f"Offboarding request {request_id} not found"
            )
        if not self._may_see(actor, request):
            raise UnauthorizedError(f"User {actor.id} may not view request {request_id}")
        return request

    async def list_requests(
        self, actor: User, status: OffboardingStatus | None = None
    ) -> list[OffboardingRequest]:
        """Requests visible to the actor, newest first."""
        requests = await self._store.offboarding_requests.list_all(status)
        return [request for request in requests if self._may_see(actor, request)]

    async def pending_requests(self, actor: User) -> list[OffboardingRequest]:
        return await self.list_requests(actor, OffboardingStatus.PENDING)
