"""Unit tests for SystemService against the in-memory store."""

from unittest.mock import create_autospec

import pytest

from access.application.observability import SystemServiceProbe
from access.application.services import AccessService, SystemService
from access.domain.value_objects import SystemCategory, SystemId, UserId
from access.ports.exceptions import (
    DuplicateCoOwnerError,
    SystemNotFoundError,
    UnauthorizedError,
    UserNotFoundError,
)


@pytest.fixture
def mock_probe():
    return create_autospec(SystemServiceProbe, instance=True)


@pytest.fixture
def service(seeded_store, mock_probe) -> SystemService:
    return SystemService(store=seeded_store, probe=mock_probe)


async def _create(service, admin, owner, name="Workday", **kwargs):
    return await service.create_system(
        actor=admin,
        name=name,
        description=kwargs.pop("description", ""),
        category=kwargs.pop("category", SystemCategory.HR),
        owner_id=owner.id,
        **kwargs,
    )


class TestCreateSystem:
    @pytest.mark.asyncio
    async def test_admin_creates_with_resolved_owner(
        self, service, mock_probe, admin, jane, mike
    ):
        view = await _create(service, admin, jane, co_owner_ids=[mike.id])

        assert view.owner == jane
        assert view.co_owners == [mike]
        assert view.system.approved is False
        mock_probe.system_created.assert_called_once()

    @pytest.mark.asyncio
    async def test_members_cannot_create(self, service, mock_probe, jane):
        with pytest.raises(UnauthorizedError):
            await _create(service, jane, jane)

        mock_probe.permission_denied.assert_called_once_with(
            actor_id=jane.id.value, action="create systems", system_id=None
        )

    @pytest.mark.asyncio
    async def test_owner_must_exist(self, service, seeded_store, admin, jane):
        with pytest.raises(UserNotFoundError):
            await service.create_system(
                actor=admin,
                name="Ghost",
                description="",
                category=SystemCategory.IT,
                owner_id=UserId.generate(),
            )

        assert await seeded_store.systems.list_all() == []

    @pytest.mark.asyncio
    async def test_owner_listed_as_co_owner_rejected(
        self, service, mock_probe, admin, jane
    ):
        with pytest.raises(ValueError):
            await _create(service, admin, jane, co_owner_ids=[jane.id])

        mock_probe.system_creation_failed.assert_called_once()


class TestVisibility:
    @pytest.mark.asyncio
    async def test_unapproved_hidden_from_strangers(self, service, admin, jane, robert):
        view = await _create(service, admin, jane)

        with pytest.raises(UnauthorizedError):
            await service.get_system(actor=robert, system_id=view.system.id)

        assert await service.list_systems(actor=robert) == []
        assert len(await service.list_systems(actor=jane)) == 1

    @pytest.mark.asyncio
    async def test_approved_visible_to_everyone(self, service, admin, jane, robert):
        view = await _create(service, admin, jane)
        await service.set_approval(actor=admin, system_id=view.system.id, approved=True)

        found = await service.get_system(actor=robert, system_id=view.system.id)

        assert found.system.approved is True

    @pytest.mark.asyncio
    async def test_list_filters_and_sorts(self, service, admin, jane, mike):
        await _create(service, admin, jane, name="workday")
        await _create(service, admin, mike, name="Netsuite", category=SystemCategory.FINANCE)
        await _create(service, admin, jane, name="ADP", description="payroll")

        names = [v.system.name for v in await service.list_systems(actor=admin)]
        finance = await service.list_systems(actor=admin, category="Finance")
        by_owner = await service.list_systems(actor=admin, search="mike")
        by_description = await service.list_systems(actor=admin, search="PAYROLL")

        assert names == ["ADP", "Netsuite", "workday"]
        assert [v.system.name for v in finance] == ["Netsuite"]
        assert [v.system.name for v in by_owner] == ["Netsuite"]
        assert [v.system.name for v in by_description] == ["ADP"]

    @pytest.mark.asyncio
    async def test_list_filters_by_approval(self, service, admin, jane, robert):
        await _create(service, admin, jane, name="Workday", approved=True)
        await _create(service, admin, jane, name="Greenhouse")

        approved = await service.list_systems(actor=admin, approved=True)
        pending = await service.list_systems(actor=admin, approved=False)
        pending_for_stranger = await service.list_systems(actor=robert, approved=False)

        assert [v.system.name for v in approved] == ["Workday"]
        assert [v.system.name for v in pending] == ["Greenhouse"]
        assert pending_for_stranger == []

    @pytest.mark.asyncio
    async def test_missing_system(self, service, admin):
        with pytest.raises(SystemNotFoundError):
            await service.get_system(actor=admin, system_id=SystemId.generate())


class TestUpdates:
    @pytest.mark.asyncio
    async def test_owner_updates_metadata(self, service, admin, jane):
        view = await _create(service, admin, jane)

        updated = await service.update_system(
            actor=jane, system_id=view.system.id, description="HR suite"
        )

        assert updated.system.description == "HR suite"
        assert updated.system.name == "Workday"

    @pytest.mark.asyncio
    async def test_stranger_cannot_update(self, service, admin, jane, robert):
        view = await _create(service, admin, jane)

        with pytest.raises(UnauthorizedError):
            await service.update_system(actor=robert, system_id=view.system.id, name="X")

    @pytest.mark.asyncio
    async def test_transfer_to_co_owner(self, service, admin, jane, mike):
        view = await _create(service, admin, jane, co_owner_ids=[mike.id])

        updated = await service.update_system(
            actor=jane, system_id=view.system.id, owner_id=mike.id
        )

        assert updated.owner == mike
        assert updated.co_owners == []

    @pytest.mark.asyncio
    async def test_only_admins_approve(self, service, admin, jane):
        view = await _create(service, admin, jane)

        with pytest.raises(UnauthorizedError):
            await service.set_approval(actor=jane, system_id=view.system.id, approved=True)


class TestCoOwners:
    @pytest.mark.asyncio
    async def test_add_and_remove(self, service, mock_probe, admin, jane, mike):
        view = await _create(service, admin, jane)

        added = await service.add_co_owner(
            actor=jane, system_id=view.system.id, user_id=mike.id
        )
        removed = await service.remove_co_owner(
            actor=jane, system_id=view.system.id, user_id=mike.id
        )

        assert added.co_owners == [mike]
        assert removed.co_owners == []
        mock_probe.co_owner_removed.assert_called_once()

    @pytest.mark.asyncio
    async def test_co_owner_may_manage(self, service, admin, jane, mike, robert):
        view = await _create(service, admin, jane, co_owner_ids=[mike.id])

        updated = await service.add_co_owner(
            actor=mike, system_id=view.system.id, user_id=robert.id
        )

        assert updated.co_owners == [mike, robert]

    @pytest.mark.asyncio
    async def test_adding_owner_or_existing_co_owner_rejected(
        self, service, admin, jane, mike
    ):
        view = await _create(service, admin, jane, co_owner_ids=[mike.id])

        with pytest.raises(DuplicateCoOwnerError):
            await service.add_co_owner(actor=jane, system_id=view.system.id, user_id=jane.id)
        with pytest.raises(DuplicateCoOwnerError):
            await service.add_co_owner(actor=jane, system_id=view.system.id, user_id=mike.id)

    @pytest.mark.asyncio
    async def test_removing_non_co_owner_is_noop(
        self, service, mock_probe, admin, jane, robert
    ):
        view = await _create(service, admin, jane)

        result = await service.remove_co_owner(
            actor=jane, system_id=view.system.id, user_id=robert.id
        )

        assert result.co_owners == []
        mock_probe.co_owner_removed.assert_not_called()


class TestDeleteSystem:
    @pytest.mark.asyncio
    async def test_delete_cascades_to_records_and_fields(
        self, service, seeded_store, mock_probe, admin, jane, mike
    ):
        from access.application.services import SystemFieldService

        view = await _create(service, admin, jane)
        system_id = view.system.id
        await AccessService(seeded_store).grant_access(jane, system_id, mike.id)
        await SystemFieldService(seeded_store).create_field(jane, system_id, "Badge")

        await service.delete_system(actor=admin, system_id=system_id)

        assert await seeded_store.systems.get_by_id(system_id) is None
        assert await seeded_store.access_records.list_by_system(system_id) == []
        assert await seeded_store.system_fields.list_by_system(system_id) == []
        mock_probe.system_deleted.assert_called_once_with(
            system_id=system_id.value,
            actor_id=admin.id.value,
            records_removed=1,
            fields_removed=1,
        )

    @pytest.mark.asyncio
    async def test_owner_cannot_delete(self, service, seeded_store, admin, jane):
        view = await _create(service, admin, jane)

        with pytest.raises(UnauthorizedError):
            await service.delete_system(actor=jane, system_id=view.system.id)

        assert await seeded_store.systems.get_by_id(view.system.id) is not None
