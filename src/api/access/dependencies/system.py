"""FastAPI dependency injection for the system and custom field services."""

from typing import Annotated

from fastapi import Depends

from access.application.observability import (
    DefaultSystemServiceProbe,
    SystemServiceProbe,
)
from access.application.services import SystemFieldService, SystemService
from access.dependencies.store import get_entity_store
from access.dependencies.user import get_observation_context
from access.ports.repositories import IEntityStore
from infrastructure.observability import ObservationContext


def get_system_service_probe(
    context: Annotated[ObservationContext, Depends(get_observation_context)],
) -> SystemServiceProbe:
    """Get a SystemServiceProbe bound to the request context."""
    return DefaultSystemServiceProbe().with_context(context)


def get_system_service(
    store: Annotated[IEntityStore, Depends(get_entity_store)],
    probe: Annotated[SystemServiceProbe, Depends(get_system_service_probe)],
) -> SystemService:
    """Get SystemService instance."""
    return SystemService(store=store, probe=probe)


def get_system_field_service(
    store: Annotated[IEntityStore, Depends(get_entity_store)],
    probe: Annotated[SystemServiceProbe, Depends(get_system_service_probe)],
) -> SystemFieldService:
    """Get SystemFieldService instance."""
    return SystemFieldService(store=store, probe=probe)
