"""Unit tests for the SQL SystemRepository with a mocked session."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from access.domain.aggregates import System
from access.domain.value_objects import SystemCategory, UserId
from access.infrastructure.models import SystemCoOwnerModel, SystemModel
from access.infrastructure.system_repository import SystemRepository


def _result(value):
    result = MagicMock()
    result.scalar_one_or_none.return_value = value
    return result


@pytest.fixture
def mock_session():
    session = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def repository(mock_session):
    return SystemRepository(session=mock_session)


def _model_for(system: System, co_owner_ids: list[str]) -> SystemModel:
    now = datetime.now(UTC)
    return SystemModel(
        id=system.id.value,
        name=system.name,
        description=system.description,
        category=system.category.value,
        owner_id=system.owner_id.value,
        approved=False,
        created_at=now,
        updated_at=now,
        co_owners=[
            SystemCoOwnerModel(user_id=uid, position=position)
            for position, uid in enumerate(co_owner_ids)
        ],
    )


class TestSave:
    @pytest.mark.asyncio
    async def test_new_system_adds_ordered_co_owners(self, repository, mock_session):
        first, second = UserId.generate(), UserId.generate()
        system = System.create(
            name="Jira",
            description="Tickets",
            category=SystemCategory.IT,
            owner_id=UserId.generate(),
            co_owner_ids=[first, second],
        )
        mock_session.execute.return_value = _result(None)

        await repository.save(system)

        added = mock_session.add.call_args[0][0]
        assert isinstance(added, SystemModel)
        assert [(row.user_id, row.position) for row in added.co_owners] == [
            (first.value, 0),
            (second.value, 1),
        ]

    @pytest.mark.asyncio
    async def test_existing_system_reconciles_co_owners(self, repository, mock_session):
        kept, dropped, added = UserId.generate(), UserId.generate(), UserId.generate()
        system = System.create(
            name="Jira",
            description="",
            category=SystemCategory.IT,
            owner_id=UserId.generate(),
            co_owner_ids=[added, kept],
        )
        model = _model_for(system, [kept.value, dropped.value])
        kept_row = model.co_owners[0]
        mock_session.execute.return_value = _result(model)

        await repository.save(system)

        mock_session.add.assert_not_called()
        rows = {row.user_id: row for row in model.co_owners}
        assert set(rows) == {kept.value, added.value}
        assert rows[kept.value] is kept_row
        assert rows[added.value].position == 0
        assert rows[kept.value].position == 1


class TestGet:
    @pytest.mark.asyncio
    async def test_maps_co_owners_by_position(self, repository, mock_session):
        first, second = UserId.generate(), UserId.generate()
        system = System.create(
            name="Jira",
            description="",
            category=SystemCategory.IT,
            owner_id=UserId.generate(),
        )
        model = _model_for(system, [])
        model.co_owners = [
            SystemCoOwnerModel(user_id=second.value, position=1),
            SystemCoOwnerModel(user_id=first.value, position=0),
        ]
        mock_session.execute.return_value = _result(model)

        loaded = await repository.get_by_id(system.id)

        assert loaded.co_owner_ids == [first, second]
        assert loaded.category == SystemCategory.IT
