"""Unit tests for the SQL entity store's transaction handling."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from access.infrastructure.sql_store import SqlEntityStore
from access.ports.repositories import IEntityStore


@pytest.fixture
def mock_session():
    session = AsyncMock()
    session.in_transaction = MagicMock(return_value=False)
    transaction = MagicMock()
    transaction.__aenter__ = AsyncMock(return_value=None)
    transaction.__aexit__ = AsyncMock(return_value=None)
    session.begin = MagicMock(return_value=transaction)
    return session


class TestSqlEntityStore:
    def test_implements_protocol(self, mock_session):
        assert isinstance(SqlEntityStore(mock_session), IEntityStore)

    @pytest.mark.asyncio
    async def test_transaction_begins_on_session(self, mock_session):
        store = SqlEntityStore(mock_session)

        async with store.transaction():
            pass

        mock_session.begin.assert_called_once()
        mock_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_pending_autobegun_transaction_committed_first(self, mock_session):
        mock_session.in_transaction.return_value = True
        store = SqlEntityStore(mock_session)

        async with store.transaction():
            pass

        mock_session.commit.assert_awaited_once()
        mock_session.begin.assert_called_once()

    @pytest.mark.asyncio
    async def test_error_propagates_through_begin(self, mock_session):
        store = SqlEntityStore(mock_session)

        with pytest.raises(RuntimeError):
            async with store.transaction():
                raise RuntimeError("boom")

        exit_args = mock_session.begin.return_value.__aexit__.await_args[0]
        assert exit_args[0] is RuntimeError
