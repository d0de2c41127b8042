"""Domain probe for access repository operations.

Following Domain-Oriented Observability patterns, this probe captures
persistence events of the SQL entity store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class RepositoryProbe(Protocol):
    """Domain probe for access repository operations."""

    def entity_saved(self, entity: str, entity_id: str) -> None:
        """Record that an entity was inserted or updated."""
        ...

    def entity_deleted(self, entity: str, entity_id: str) -> None:
        """Record that an entity was deleted."""
        ...

    def entities_deleted(self, entity: str, system_id: str, count: int) -> None:
        """Record a bulk delete scoped to a system."""
        ...

    def duplicate_detected(self, entity: str, detail: str) -> None:
        """Record that a uniqueness rule rejected a write."""
        ...

    def with_context(self, context: ObservationContext) -> RepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultRepositoryProbe:
    """Default implementation of RepositoryProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultRepositoryProbe(logger=self._logger, context=context)

    def entity_saved(self, entity: str, entity_id: str) -> None:
        """Record that an entity was inserted or updated."""
        self._logger.debug(
            "entity_saved",
            entity=entity,
            entity_id=entity_id,
            **self._get_context_kwargs(),
        )

    def entity_deleted(self, entity: str, entity_id: str) -> None:
        """Record that an entity was deleted."""
        self._logger.debug(
            "entity_deleted",
            entity=entity,
            entity_id=entity_id,
            **self._get_context_kwargs(),
        )

    def entities_deleted(self, entity: str, system_id: str, count: int) -> None:
        """Record a bulk delete scoped to a system."""
        self._logger.debug(
            "entities_deleted",
            entity=entity,
            system_id=system_id,
            count=count,
            **self._get_context_kwargs(),
        )

    def duplicate_detected(self, entity: str, detail: str) -> None:
        """Record that a uniqueness rule rejected a write."""
        self._logger.warning(
            "duplicate_detected",
            entity=entity,
            detail=detail,
            **self._get_context_kwargs(),
        )
