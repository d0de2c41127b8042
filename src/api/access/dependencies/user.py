"""FastAPI dependency injection for caller identity and the user service.

Authentication happens upstream: the identity provider forwards the
caller's user id in the ``X-User-ID`` header. This module only resolves
that id to a stored user.
"""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from access.application.observability import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)
from access.application.services import UserService
from access.dependencies.store import get_entity_store
from access.domain.aggregates import User
from access.domain.value_objects import UserId
from access.ports.repositories import IEntityStore
from infrastructure.observability import ObservationContext


def get_user_service_probe() -> UserServiceProbe:
    """Get UserServiceProbe instance."""
    return DefaultUserServiceProbe()


def get_user_service(
    store: Annotated[IEntityStore, Depends(get_entity_store)],
    probe: Annotated[UserServiceProbe, Depends(get_user_service_probe)],
) -> UserService:
    """Get UserService instance.

    Args:
        store: Entity store for the request
        probe: Domain probe for observability

    Returns:
        UserService instance
    """
    return UserService(store=store, probe=probe)


async def get_current_user(
    user_service: Annotated[UserService, Depends(get_user_service)],
    x_user_id: Annotated[str | None, Header(alias="X-User-ID")] = None,
) -> User:
    """Resolve the caller from the X-User-ID header.

    Raises:
        HTTPException: 401 if the header is missing, malformed or names an
            unknown user
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-User-ID header",
        )

    try:
        user_id = UserId.from_string(x_user_id.strip())
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid user identity",
        )

    user = await user_service.resolve_caller(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unknown user",
        )
    return user


def get_observation_context(
    current_user: Annotated[User, Depends(get_current_user)],
    x_request_id: Annotated[str | None, Header(alias="X-Request-ID")] = None,
) -> ObservationContext:
    """Build the observation context bound to request-scoped probes."""
    return ObservationContext(
        correlation_id=x_request_id, caller_id=current_user.id.value
    )
