"""SQLAlchemy implementation of IEntityStore.

All repositories share one AsyncSession, so a service call's writes to
several tables commit or roll back together.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from access.infrastructure.access_record_repository import AccessRecordRepository
from access.infrastructure.observability import (
    DefaultRepositoryProbe,
    RepositoryProbe,
)
from access.infrastructure.offboarding_request_repository import (
    OffboardingRequestRepository,
)
from access.infrastructure.system_field_repository import SystemFieldRepository
from access.infrastructure.system_repository import SystemRepository
from access.infrastructure.user_repository import UserRepository


class SqlEntityStore:
    """IEntityStore over a single database session."""

    def __init__(
        self, session: AsyncSession, probe: RepositoryProbe | None = None
    ) -> None:
        self._session = session
        probe = probe or DefaultRepositoryProbe()
        self.users = UserRepository(session, probe)
        self.systems = SystemRepository(session, probe)
        self.access_records = AccessRecordRepository(session, probe)
        self.offboarding_requests = OffboardingRequestRepository(session, probe)
        self.system_fields = SystemFieldRepository(session, probe)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Run the block in one database transaction.

        Reads issued before a mutation (resolving the caller, for instance)
        autobegin a transaction on the session; it is committed first so the
        mutation gets a transaction of its own.
        """
        if self._session.in_transaction():
            await self._session.commit()
        async with self._session.begin():
            yield
