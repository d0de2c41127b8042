"""Protocol for user application service observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class UserServiceProbe(Protocol):
    """Domain probe for user management operations."""

    def user_created(self, user_id: str, email: str, role: str) -> None:
        """Record that a user was created."""
        ...

    def user_creation_failed(self, email: str, error: str) -> None:
        """Record a rejected user creation."""
        ...

    def user_resolved(self, user_id: str) -> None:
        """Record that a caller identity resolved to a stored user."""
        ...

    def unknown_caller(self, user_id: str) -> None:
        """Record a caller identity with no stored user."""
        ...

    def with_context(self, context: ObservationContext) -> UserServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultUserServiceProbe:
    """Default implementation of UserServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultUserServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultUserServiceProbe(logger=self._logger, context=context)

    def user_created(self, user_id: str, email: str, role: str) -> None:
        self._logger.info(
            "user_created",
            user_id=user_id,
            email=email,
            role=role,
            **self._get_context_kwargs(),
        )

    def user_creation_failed(self, email: str, error: str) -> None:
        self._logger.warning(
            "user_creation_failed",
            email=email,
            error=error,
            **self._get_context_kwargs(),
        )

    def user_resolved(self, user_id: str) -> None:
        self._logger.debug(
            "user_resolved",
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def unknown_caller(self, user_id: str) -> None:
        self._logger.warning(
            "unknown_caller",
            user_id=user_id,
            **self._get_context_kwargs(),
        )
