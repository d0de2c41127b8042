"""Unit tests for the SQL UserRepository with a mocked session."""

from unittest.mock import AsyncMock, MagicMock, create_autospec

import pytest
from sqlalchemy.exc import IntegrityError

from access.domain.aggregates import User
from access.domain.value_objects import Role, UserId
from access.infrastructure.models import UserModel
from access.infrastructure.observability import RepositoryProbe
from access.infrastructure.user_repository import UserRepository
from access.ports.exceptions import DuplicateUserEmailError
from access.ports.repositories import IUserRepository


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
def mock_probe():
    return create_autospec(RepositoryProbe, instance=True)


@pytest.fixture
def repository(mock_session, mock_probe):
    return UserRepository(session=mock_session, probe=mock_probe)


@pytest.fixture
def jane() -> User:
    return User.create(
        name="Jane Smith", email="jane.smith@example.com", department="Finance"
    )


class TestProtocolCompliance:
    def test_implements_protocol(self, repository):
        assert isinstance(repository, IUserRepository)


class TestSave:
    @pytest.mark.asyncio
    async def test_adds_new_user(self, repository, mock_session, mock_probe, jane):
        # Email lookup, then id lookup: neither finds a row
        mock_session.execute.side_effect = [_result(None), _result(None)]

        await repository.save(jane)

        mock_session.add.assert_called_once()
        added = mock_session.add.call_args[0][0]
        assert isinstance(added, UserModel)
        assert added.email == "jane.smith@example.com"
        assert added.role == "member"
        mock_session.flush.assert_awaited_once()
        mock_probe.entity_saved.assert_called_once_with("user", jane.id.value)

    @pytest.mark.asyncio
    async def test_updates_existing_user(self, repository, mock_session, jane):
        existing = UserModel(
            id=jane.id.value,
            name="Old Name",
            email=jane.email,
            department="",
            role="member",
        )
        mock_session.execute.side_effect = [_result(existing), _result(existing)]

        await repository.save(jane)

        mock_session.add.assert_not_called()
        assert existing.name == "Jane Smith"
        assert existing.department == "Finance"

    @pytest.mark.asyncio
    async def test_rejects_email_of_another_user(
        self, repository, mock_session, mock_probe, jane
    ):
        other = UserModel(
            id=UserId.generate().value,
            name="Other",
            email=jane.email,
            department="",
            role="member",
        )
        mock_session.execute.return_value = _result(other)

        with pytest.raises(DuplicateUserEmailError):
            await repository.save(jane)

        mock_session.add.assert_not_called()
        mock_probe.duplicate_detected.assert_called_once_with("user", jane.email)

    @pytest.mark.asyncio
    async def test_maps_unique_index_violation(self, repository, mock_session, jane):
        mock_session.execute.side_effect = [_result(None), _result(None)]
        mock_session.flush.side_effect = IntegrityError(
            "INSERT", {}, Exception('duplicate key violates "ix_users_email"')
        )

        with pytest.raises(DuplicateUserEmailError):
            await repository.save(jane)

    @pytest.mark.asyncio
    async def test_other_integrity_errors_propagate(self, repository, mock_session, jane):
        mock_session.execute.side_effect = [_result(None), _result(None)]
        mock_session.flush.side_effect = IntegrityError(
            "INSERT", {}, Exception("some other constraint")
        )

        with pytest.raises(IntegrityError):
            await repository.save(jane)


class TestReads:
    @pytest.mark.asyncio
    async def test_get_by_id_returns_none_when_missing(self, repository, mock_session):
        mock_session.execute.return_value = _result(None)

        assert await repository.get_by_id(UserId.generate()) is None

    @pytest.mark.asyncio
    async def test_get_by_id_maps_model(self, repository, mock_session):
        user_id = UserId.generate()
        mock_session.execute.return_value = _result(
            UserModel(
                id=user_id.value,
                name="Ada",
                email="ada@example.com",
                department="IT",
                role="admin",
            )
        )

        user = await repository.get_by_id(user_id)

        assert user.id == user_id
        assert user.role == Role.ADMIN
        assert user.department == "IT"
