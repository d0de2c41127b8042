"""Unit tests for OffboardingService against the in-memory store."""

from datetime import date
from unittest.mock import create_autospec

import pytest
import pytest_asyncio

from access.application.observability import OffboardingServiceProbe
from access.application.services import OffboardingService
from access.domain.aggregates import AccessRecord, System
from access.domain.value_objects import (
    OffboardingRequestId,
    OffboardingStatus,
    SystemCategory,
    SystemId,
    UserId,
)
from access.ports.exceptions import (
    OffboardingRequestNotFoundError,
    SystemNotFoundError,
    UnauthorizedError,
    UserNotFoundError,
)

REMOVAL_DATE = date(2026, 11, 30)


@pytest.fixture
def mock_probe():
    return create_autospec(OffboardingServiceProbe, instance=True)


@pytest.fixture
def service(seeded_store, mock_probe) -> OffboardingService:
    return OffboardingService(store=seeded_store, probe=mock_probe)


@pytest_asyncio.fixture
async def systems(seeded_store, admin, robert) -> list[System]:
    """Two systems Robert has access to."""
    created = []
    for name in ("Salesforce", "HubSpot"):
        system = System.create(
            name=name, description="", category=SystemCategory.SALES, owner_id=admin.id
        )
        await seeded_store.systems.save(system)
        await seeded_store.access_records.save(
            AccessRecord.create(user_id=robert.id, system_id=system.id)
        )
        created.append(system)
    return created


class TestCreateRequest:
    @pytest.mark.asyncio
    async def test_any_user_may_file(self, service, mock_probe, jane, robert):
        request = await service.create_request(
            actor=jane, user_id=robert.id, removal_date=REMOVAL_DATE, all_systems=True
        )

        assert request.status == OffboardingStatus.PENDING
        assert request.requested_by == jane.id
        mock_probe.request_created.assert_called_once_with(
            request_id=request.id.value,
            user_id=robert.id.value,
            all_systems=True,
            system_count=0,
            actor_id=jane.id.value,
        )

    @pytest.mark.asyncio
    async def test_requires_systems_or_all_systems(self, service, mock_probe, jane, robert):
        with pytest.raises(ValueError):
            await service.create_request(
                actor=jane, user_id=robert.id, removal_date=REMOVAL_DATE
            )

        mock_probe.request_creation_failed.assert_called_once()

    @pytest.mark.asyncio
    async def test_unknown_user_rejected(self, service, jane):
        with pytest.raises(UserNotFoundError):
            await service.create_request(
                actor=jane,
                user_id=UserId.generate(),
                removal_date=REMOVAL_DATE,
                all_systems=True,
            )

    @pytest.mark.asyncio
    async def test_unknown_system_rejected_and_nothing_saved(
        self, service, seeded_store, jane, robert
    ):
        with pytest.raises(SystemNotFoundError):
            await service.create_request(
                actor=jane,
                user_id=robert.id,
                removal_date=REMOVAL_DATE,
                system_ids=[SystemId.generate()],
            )

        assert await seeded_store.offboarding_requests.list_all() == []


class TestCompleteRequest:
    @pytest.mark.asyncio
    async def test_all_systems_completion_is_idempotent(
        self, service, seeded_store, mock_probe, admin, robert, systems
    ):
        request = await service.create_request(
            actor=admin, user_id=robert.id, removal_date=REMOVAL_DATE, all_systems=True
        )
        assert request.status == OffboardingStatus.PENDING

        completed = await service.complete_request(actor=admin, request_id=request.id)
        completed_at = completed.completed_at
        again = await service.complete_request(actor=admin, request_id=request.id)

        assert completed.status == OffboardingStatus.COMPLETED
        assert again.status == OffboardingStatus.COMPLETED
        assert again.completed_at == completed_at
        assert await seeded_store.access_records.list_by_user(robert.id) == []
        mock_probe.request_completed.assert_called_once_with(
            request_id=request.id.value, user_id=robert.id.value, records_revoked=2
        )
        mock_probe.request_already_completed.assert_called_once_with(request.id.value)

    @pytest.mark.asyncio
    async def test_listed_systems_only_revoked(
        self, service, seeded_store, admin, robert, systems
    ):
        salesforce, hubspot = systems
        request = await service.create_request(
            actor=admin,
            user_id=robert.id,
            removal_date=REMOVAL_DATE,
            system_ids=[salesforce.id],
        )

        await service.complete_request(actor=admin, request_id=request.id)

        remaining = await seeded_store.access_records.list_by_user(robert.id)
        assert [r.system_id for r in remaining] == [hubspot.id]

    @pytest.mark.asyncio
    async def test_revocation_can_be_disabled(
        self, seeded_store, mock_probe, admin, robert, systems
    ):
        service = OffboardingService(
            store=seeded_store, revokes_access=False, probe=mock_probe
        )
        request = await service.create_request(
            actor=admin, user_id=robert.id, removal_date=REMOVAL_DATE, all_systems=True
        )

        await service.complete_request(actor=admin, request_id=request.id)

        assert len(await seeded_store.access_records.list_by_user(robert.id)) == 2

    @pytest.mark.asyncio
    async def test_only_admins_complete(self, service, jane, robert):
        request = await service.create_request(
            actor=jane, user_id=robert.id, removal_date=REMOVAL_DATE, all_systems=True
        )

        with pytest.raises(UnauthorizedError):
            await service.complete_request(actor=jane, request_id=request.id)

    @pytest.mark.asyncio
    async def test_unknown_request(self, service, admin):
        with pytest.raises(OffboardingRequestNotFoundError):
            await service.complete_request(
                actor=admin, request_id=OffboardingRequestId.generate()
            )


class TestVisibility:
    @pytest.mark.asyncio
    async def test_members_see_requests_they_filed_or_concern_them(
        self, service, admin, jane, mike, robert
    ):
        filed_by_jane = await service.create_request(
            actor=jane, user_id=robert.id, removal_date=REMOVAL_DATE, all_systems=True
        )
        about_mike = await service.create_request(
            actor=admin, user_id=mike.id, removal_date=REMOVAL_DATE, all_systems=True
        )

        assert [r.id for r in await service.list_requests(jane)] == [filed_by_jane.id]
        assert [r.id for r in await service.list_requests(mike)] == [about_mike.id]
        assert len(await service.list_requests(admin)) == 2

        with pytest.raises(UnauthorizedError):
            await service.get_request(actor=mike, request_id=filed_by_jane.id)

    @pytest.mark.asyncio
    async def test_pending_requests(self, service, admin, robert, mike):
        done = await service.create_request(
            actor=admin, user_id=robert.id, removal_date=REMOVAL_DATE, all_systems=True
        )
        waiting = await service.create_request(
            actor=admin, user_id=mike.id, removal_date=REMOVAL_DATE, all_systems=True
        )
        await service.complete_request(actor=admin, request_id=done.id)

        pending = await service.pending_requests(admin)

        assert [r.id for r in pending] == [waiting.id]
