"""Unit tests for authorization policies."""

import pytest

from access.domain import policies
from access.domain.aggregates import System, User
from access.domain.value_objects import Role, SystemCategory


@pytest.fixture
def admin() -> User:
    return User.create(name="Ada Admin", email="ada@example.com", role=Role.ADMIN)


@pytest.fixture
def owner() -> User:
    return User.create(name="Olivia Owner", email="olivia@example.com")


@pytest.fixture
def co_owner() -> User:
    return User.create(name="Colin Coowner", email="colin@example.com")


@pytest.fixture
def stranger() -> User:
    return User.create(name="Sam Stranger", email="sam@example.com")


@pytest.fixture
def system(owner: User, co_owner: User) -> System:
    return System.create(
        name="Workday",
        description="",
        category=SystemCategory.HR,
        owner_id=owner.id,
        co_owner_ids=[co_owner.id],
    )


class TestManagement:
    def test_admin_manages_everything(self, admin, system):
        assert policies.can_manage_system(admin, system)

    def test_owner_and_co_owner_manage(self, owner, co_owner, system):
        assert policies.can_manage_system(owner, system)
        assert policies.can_manage_system(co_owner, system)

    def test_stranger_cannot_manage(self, stranger, system):
        assert not policies.can_manage_system(stranger, system)

    def test_missing_entities_never_grant(self, admin, system):
        assert not policies.can_manage_system(None, system)
        assert not policies.can_manage_system(admin, None)
        assert not policies.is_owner_or_co_owner(None, system)


class TestAdministratorOnlyActions:
    def test_only_admins_create_delete_and_approve(self, admin, owner):
        for check in (
            policies.can_create_system,
            policies.can_delete_system,
            policies.can_approve_system,
        ):
            assert check(admin)
            assert not check(owner)
            assert not check(None)


class TestVisibility:
    def test_unapproved_visible_to_managers_only(self, admin, owner, stranger, system):
        assert policies.can_view_system(admin, system)
        assert policies.can_view_system(owner, system)
        assert not policies.can_view_system(stranger, system)

    def test_approved_visible_to_everyone(self, stranger, system):
        system.set_approved(True)

        assert policies.can_view_system(stranger, system)
        assert not policies.can_view_system(None, system)
