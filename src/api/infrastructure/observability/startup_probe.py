"""Domain probe for application startup and lifecycle events."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class StartupProbe(Protocol):
    """Domain probe for application startup operations."""

    def store_selected(self, backend: str) -> None:
        """Record which entity store backend serves requests."""
        ...

    def admin_bootstrapped(self, user_id: str, email: str) -> None:
        """Record that a bootstrap administrator was provisioned."""
        ...

    def admin_already_exists(self, user_id: str, email: str) -> None:
        """Record that a bootstrap administrator was already present."""
        ...

    def with_context(self, context: ObservationContext) -> StartupProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultStartupProbe:
    """Default implementation of StartupProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultStartupProbe:
        """Create a new probe with observation context bound."""
        return DefaultStartupProbe(logger=self._logger, context=context)

    def store_selected(self, backend: str) -> None:
        """Record which entity store backend serves requests."""
        self._logger.info(
            "entity_store_selected",
            backend=backend,
            **self._get_context_kwargs(),
        )

    def admin_bootstrapped(self, user_id: str, email: str) -> None:
        """Record that a bootstrap administrator was provisioned."""
        self._logger.info(
            "bootstrap_admin_provisioned",
            user_id=user_id,
            email=email,
            **self._get_context_kwargs(),
        )

    def admin_already_exists(self, user_id: str, email: str) -> None:
        """Record that a bootstrap administrator was already present."""
        self._logger.debug(
            "bootstrap_admin_already_exists",
            user_id=user_id,
            email=email,
            **self._get_context_kwargs(),
        )
