"""Async SQLAlchemy engine for the SQL entity store.

The pool keeps ``pool_min_connections`` connections resident and overflows
up to ``pool_max_connections`` under load. Connections identify themselves
to PostgreSQL as ``systemly-api`` so they can be told apart in
``pg_stat_activity``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

if TYPE_CHECKING:
    from infrastructure.settings import DatabaseSettings

__all__ = [
    "APPLICATION_NAME",
    "build_async_url",
    "create_access_engine",
]

APPLICATION_NAME = "systemly-api"


def create_access_engine(settings: DatabaseSettings) -> AsyncEngine:
    """Create the engine backing the SQL entity store.

    Args:
        settings: Database connection settings

    Returns:
        Configured async engine
    """
    return create_async_engine(
        build_async_url(settings),
        pool_size=settings.pool_min_connections,
        max_overflow=settings.pool_max_connections - settings.pool_min_connections,
        pool_pre_ping=True,
        echo=settings.echo,
        connect_args={"server_settings": {"application_name": APPLICATION_NAME}},
    )


def build_async_url(settings: DatabaseSettings) -> str:
    """Render the asyncpg URL, password included.

    SQLAlchemy's URL builder percent-encodes the credentials, so reserved
    characters in a password survive parsing the URL back.
    """
    return URL.create(
        drivername="postgresql+asyncpg",
        username=settings.username,
        password=settings.password.get_secret_value(),
        host=settings.host,
        port=settings.port,
        database=settings.database,
    ).render_as_string(hide_password=False)
