"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from access.application.services import UserService
from access.dependencies.store import entity_store_scope
from access.presentation import router as access_router
from infrastructure.database import close_database_connections
from infrastructure.logging import configure_logging
from infrastructure.observability import DefaultStartupProbe, StartupProbe
from infrastructure.settings import (
    AccessSettings,
    StoreBackend,
    get_access_settings,
    get_settings,
)
from infrastructure.version import __version__


async def bootstrap_admins(settings: AccessSettings, probe: StartupProbe) -> None:
    """Provision the configured administrators that do not exist yet."""
    if not settings.bootstrap_admins:
        return

    async with entity_store_scope(settings) as store:
        service = UserService(store=store)
        for email in settings.bootstrap_admins:
            user, created = await service.bootstrap_admin(
                email=email, name=settings.bootstrap_admin_name
            )
            if created:
                probe.admin_bootstrapped(user.id.value, user.email)
            else:
                probe.admin_already_exists(user.id.value, user.email)


@asynccontextmanager
async def systemly_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Logging configuration
    - Bootstrap administrator provisioning
    - Database engine disposal on shutdown (created lazily)
    """
    configure_logging(debug=get_settings().debug)
    access_settings = get_access_settings()
    probe = DefaultStartupProbe()
    probe.store_selected(access_settings.store_backend.value)

    await bootstrap_admins(access_settings, probe)

    yield

    if access_settings.store_backend == StoreBackend.DATABASE:
        await close_database_connections()


app = FastAPI(
    title="Systemly API",
    description="Track which users have access to which business systems",
    version=__version__,
    lifespan=systemly_lifespan,
)

# Include Access bounded context routes
app.include_router(access_router)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok", "version": __version__}
