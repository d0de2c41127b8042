"""Unit tests for UserService."""

from unittest.mock import create_autospec

import pytest

from access.application.observability import UserServiceProbe
from access.application.services import UserService
from access.domain.value_objects import Role, UserId
from access.ports.exceptions import (
    DuplicateUserEmailError,
    UnauthorizedError,
    UserNotFoundError,
)


@pytest.fixture
def mock_probe():
    return create_autospec(UserServiceProbe, instance=True)


@pytest.fixture
def service(seeded_store, mock_probe) -> UserService:
    return UserService(store=seeded_store, probe=mock_probe)


class TestResolveCaller:
    @pytest.mark.asyncio
    async def test_known_user(self, service, mock_probe, jane):
        assert await service.resolve_caller(jane.id) == jane
        mock_probe.user_resolved.assert_called_once_with(jane.id.value)

    @pytest.mark.asyncio
    async def test_unknown_user(self, service, mock_probe):
        user_id = UserId.generate()

        assert await service.resolve_caller(user_id) is None
        mock_probe.unknown_caller.assert_called_once_with(user_id.value)


class TestCreateUser:
    @pytest.mark.asyncio
    async def test_admin_creates_user(self, service, mock_probe, admin):
        user = await service.create_user(
            actor=admin, name="Nina New", email="Nina@Example.com", department="Ops"
        )

        assert user.email == "nina@example.com"
        assert user.role == Role.MEMBER
        mock_probe.user_created.assert_called_once_with(
            user.id.value, "nina@example.com", "member"
        )

    @pytest.mark.asyncio
    async def test_member_cannot_create(self, service, jane):
        with pytest.raises(UnauthorizedError):
            await service.create_user(actor=jane, name="X", email="x@example.com")

    @pytest.mark.asyncio
    async def test_duplicate_email(self, service, mock_probe, admin):
        with pytest.raises(DuplicateUserEmailError):
            await service.create_user(
                actor=admin, name="Other Jane", email="JANE.SMITH@example.com"
            )

        mock_probe.user_creation_failed.assert_called_once()

    @pytest.mark.asyncio
    async def test_invalid_email(self, service, admin):
        with pytest.raises(ValueError):
            await service.create_user(actor=admin, name="Bad", email="no-at-sign")


class TestQueries:
    @pytest.mark.asyncio
    async def test_list_sorted_and_searchable(self, service):
        names = [u.name for u in await service.list_users()]
        finance = await service.list_users(search="finance")

        assert names == ["Ada Admin", "Jane Smith", "Mike Johnson", "Robert Taylor"]
        assert [u.name for u in finance] == ["Mike Johnson"]

    @pytest.mark.asyncio
    async def test_get_missing_user(self, service):
        with pytest.raises(UserNotFoundError):
            await service.get_user(UserId.generate())


class TestBootstrapAdmin:
    @pytest.mark.asyncio
    async def test_creates_admin_once(self, store):
        service = UserService(store=store)

        first, created = await service.bootstrap_admin("root@example.com", "Root")
        second, created_again = await service.bootstrap_admin("root@example.com", "Root")

        assert created is True
        assert first.role == Role.ADMIN
        assert created_again is False
        assert second == first

    @pytest.mark.asyncio
    async def test_existing_member_left_unchanged(self, service, jane):
        user, created = await service.bootstrap_admin(jane.email, "Jane")

        assert created is False
        assert user.role == Role.MEMBER
