"""Unit tests for AuthorizationService."""

import pytest
import pytest_asyncio

from access.application.services import AuthorizationService
from access.domain.value_objects import SystemId, UserId
from access.ports.exceptions import SystemNotFoundError


@pytest.fixture
def service(seeded_store) -> AuthorizationService:
    return AuthorizationService(store=seeded_store)


@pytest_asyncio.fixture
async def saved_workday(seeded_store, workday):
    await seeded_store.systems.save(workday)
    return workday


class TestPredicates:
    @pytest.mark.asyncio
    async def test_id_based_checks(self, service, saved_workday, admin, jane, mike):
        assert await service.is_global_admin(admin.id)
        assert not await service.is_global_admin(jane.id)
        assert await service.is_owner_or_co_owner(jane.id, saved_workday.id)
        assert await service.can_manage_system(admin.id, saved_workday.id)
        assert not await service.can_manage_system(mike.id, saved_workday.id)
        assert not await service.can_view_system(mike.id, saved_workday.id)
        assert await service.can_create_system(admin.id)
        assert not await service.can_delete_system(jane.id)
        assert not await service.can_approve_system(jane.id)

    @pytest.mark.asyncio
    async def test_unknown_ids_grant_nothing(self, service, saved_workday):
        assert not await service.is_global_admin(UserId.generate())
        assert not await service.can_manage_system(UserId.generate(), saved_workday.id)


class TestPermissionsFor:
    @pytest.mark.asyncio
    async def test_owner_permissions(self, service, saved_workday, jane):
        permissions = await service.permissions_for(jane.id, saved_workday.id)

        assert permissions.can_view is True
        assert permissions.can_manage is True
        assert permissions.can_delete is False
        assert permissions.can_approve is False

    @pytest.mark.asyncio
    async def test_missing_system(self, service, jane):
        with pytest.raises(SystemNotFoundError):
            await service.permissions_for(jane.id, SystemId.generate())
