"""Unit tests for SystemFieldService."""

import pytest
import pytest_asyncio

from access.application.services import SystemFieldService
from access.domain.value_objects import FieldType, SystemFieldId
from access.ports.exceptions import (
    DuplicateSystemFieldNameError,
    SystemFieldNotFoundError,
    UnauthorizedError,
)


@pytest.fixture
def service(seeded_store) -> SystemFieldService:
    return SystemFieldService(store=seeded_store)


@pytest_asyncio.fixture
async def saved_workday(seeded_store, workday):
    await seeded_store.systems.save(workday)
    return workday


class TestFields:
    @pytest.mark.asyncio
    async def test_owner_defines_and_lists_fields(self, service, saved_workday, jane):
        await service.create_field(jane, saved_workday.id, "Badge")
        await service.create_field(
            jane,
            saved_workday.id,
            "Region",
            field_type=FieldType.SELECT,
            options=["EMEA", "APAC"],
        )

        fields = await service.list_fields(jane, saved_workday.id)

        assert [f.name for f in fields] == ["Badge", "Region"]
        assert fields[1].options == ["EMEA", "APAC"]

    @pytest.mark.asyncio
    async def test_duplicate_name_rejected(self, service, saved_workday, jane):
        await service.create_field(jane, saved_workday.id, "Badge")

        with pytest.raises(DuplicateSystemFieldNameError):
            await service.create_field(jane, saved_workday.id, " Badge ")

    @pytest.mark.asyncio
    async def test_stranger_cannot_define(self, service, saved_workday, robert):
        with pytest.raises(UnauthorizedError):
            await service.create_field(robert, saved_workday.id, "Badge")

    @pytest.mark.asyncio
    async def test_update_and_delete(self, service, saved_workday, jane):
        field = await service.create_field(jane, saved_workday.id, "Badge")

        updated = await service.update_field(
            jane, saved_workday.id, field.id, required=True
        )
        await service.delete_field(jane, saved_workday.id, field.id)

        assert updated.required is True
        assert await service.list_fields(jane, saved_workday.id) == []

    @pytest.mark.asyncio
    async def test_unknown_field(self, service, saved_workday, jane):
        with pytest.raises(SystemFieldNotFoundError):
            await service.delete_field(jane, saved_workday.id, SystemFieldId.generate())
