"""FastAPI dependency injection for the offboarding service."""

from typing import Annotated

from fastapi import Depends

from access.application.observability import (
    DefaultOffboardingServiceProbe,
    OffboardingServiceProbe,
)
from access.application.services import OffboardingService
from access.dependencies.store import get_entity_store
from access.dependencies.user import get_observation_context
from access.ports.repositories import IEntityStore
from infrastructure.observability import ObservationContext
from infrastructure.settings import AccessSettings, get_access_settings


def get_offboarding_service_probe(
    context: Annotated[ObservationContext, Depends(get_observation_context)],
) -> OffboardingServiceProbe:
    """Get an OffboardingServiceProbe bound to the request context."""
    return DefaultOffboardingServiceProbe().with_context(context)


def get_offboarding_service(
    store: Annotated[IEntityStore, Depends(get_entity_store)],
    settings: Annotated[AccessSettings, Depends(get_access_settings)],
    probe: Annotated[OffboardingServiceProbe, Depends(get_offboarding_service_probe)],
) -> OffboardingService:
    """Get OffboardingService instance.

    Completion revokes access unless
    SYSTEMLY_ACCESS_OFFBOARDING_REVOKES_ACCESS is false.
    """
    return OffboardingService(
        store=store,
        revokes_access=settings.offboarding_revokes_access,
        probe=probe,
    )
