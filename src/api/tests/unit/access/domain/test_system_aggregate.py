"""Unit tests for the System aggregate."""

from datetime import UTC, datetime

import pytest

from access.domain.aggregates import System
from access.domain.value_objects import SystemCategory, SystemId, UserId


@pytest.fixture
def owner_id() -> UserId:
    return UserId.generate()


@pytest.fixture
def system(owner_id: UserId) -> System:
    return System.create(
        name="Workday",
        description="HR platform",
        category=SystemCategory.HR,
        owner_id=owner_id,
    )


class TestSystemCreation:
    def test_create_sets_defaults(self, system: System, owner_id: UserId):
        assert isinstance(system.id, SystemId)
        assert system.name == "Workday"
        assert system.owner_id == owner_id
        assert system.co_owner_ids == []
        assert system.approved is False
        assert system.created_at == system.updated_at

    def test_name_is_stripped(self, owner_id: UserId):
        system = System.create(
            name="  Salesforce ",
            description="",
            category=SystemCategory.SALES,
            owner_id=owner_id,
        )

        assert system.name == "Salesforce"

    @pytest.mark.parametrize("name", ["", "   ", "x" * 256])
    def test_invalid_names_rejected(self, owner_id: UserId, name: str):
        with pytest.raises(ValueError, match="System name"):
            System.create(
                name=name,
                description="",
                category=SystemCategory.IT,
                owner_id=owner_id,
            )

    def test_owner_cannot_be_co_owner(self, owner_id: UserId):
        with pytest.raises(ValueError, match="owner"):
            System.create(
                name="Jira",
                description="",
                category=SystemCategory.IT,
                owner_id=owner_id,
                co_owner_ids=[owner_id],
            )

    def test_duplicate_co_owners_rejected(self, owner_id: UserId):
        co_owner = UserId.generate()
        now = datetime.now(UTC)

        with pytest.raises(ValueError, match="duplicates"):
            System(
                id=SystemId.generate(),
                name="Jira",
                description="",
                category=SystemCategory.IT,
                owner_id=owner_id,
                created_at=now,
                updated_at=now,
                co_owner_ids=[co_owner, co_owner],
            )


class TestOwnership:
    def test_owner_and_co_owner_checks(self, system: System, owner_id: UserId):
        co_owner = UserId.generate()
        system.add_co_owner(co_owner)

        assert system.is_owner(owner_id)
        assert not system.is_owner(co_owner)
        assert system.is_owner_or_co_owner(co_owner)
        assert not system.is_owner_or_co_owner(UserId.generate())

    def test_add_co_owner_keeps_insertion_order(self, system: System):
        first, second = UserId.generate(), UserId.generate()

        system.add_co_owner(first)
        system.add_co_owner(second)

        assert system.co_owner_ids == [first, second]

    def test_add_existing_co_owner_rejected(self, system: System):
        co_owner = UserId.generate()
        system.add_co_owner(co_owner)

        with pytest.raises(ValueError):
            system.add_co_owner(co_owner)

    def test_add_owner_as_co_owner_rejected(self, system: System, owner_id: UserId):
        with pytest.raises(ValueError):
            system.add_co_owner(owner_id)

    def test_remove_co_owner(self, system: System):
        co_owner = UserId.generate()
        system.add_co_owner(co_owner)

        assert system.remove_co_owner(co_owner) is True
        assert system.co_owner_ids == []

    def test_remove_unknown_co_owner_is_noop(self, system: System):
        before = system.updated_at

        assert system.remove_co_owner(UserId.generate()) is False
        assert system.updated_at == before

    def test_transfer_to_co_owner_removes_them_from_co_owners(
        self, system: System, owner_id: UserId
    ):
        co_owner = UserId.generate()
        system.add_co_owner(co_owner)

        system.transfer_ownership(co_owner)

        assert system.owner_id == co_owner
        assert co_owner not in system.co_owner_ids
        assert owner_id not in system.co_owner_ids


class TestUpdates:
    def test_update_details_changes_only_given_fields(self, system: System):
        system.update_details(description="New description")

        assert system.name == "Workday"
        assert system.description == "New description"
        assert system.category == SystemCategory.HR
        assert system.updated_at >= system.created_at

    def test_update_with_invalid_name_leaves_system_unchanged(self, system: System):
        with pytest.raises(ValueError):
            system.update_details(name="")

        assert system.name == "Workday"

    def test_set_approved(self, system: System):
        system.set_approved(True)

        assert system.approved is True
