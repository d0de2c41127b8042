"""FastAPI dependency injection for access record and authorization services."""

from typing import Annotated

from fastapi import Depends

from access.application.observability import (
    AccessServiceProbe,
    DefaultAccessServiceProbe,
)
from access.application.services import AccessService, AuthorizationService
from access.dependencies.store import get_entity_store
from access.dependencies.user import get_observation_context
from access.ports.repositories import IEntityStore
from infrastructure.observability import ObservationContext


def get_access_service_probe(
    context: Annotated[ObservationContext, Depends(get_observation_context)],
) -> AccessServiceProbe:
    """Get an AccessServiceProbe bound to the request context."""
    return DefaultAccessServiceProbe().with_context(context)


def get_access_service(
    store: Annotated[IEntityStore, Depends(get_entity_store)],
    probe: Annotated[AccessServiceProbe, Depends(get_access_service_probe)],
) -> AccessService:
    """Get AccessService instance."""
    return AccessService(store=store, probe=probe)


def get_authorization_service(
    store: Annotated[IEntityStore, Depends(get_entity_store)],
) -> AuthorizationService:
    """Get AuthorizationService instance."""
    return AuthorizationService(store=store)
