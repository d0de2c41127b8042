"""Protocol for system application service observability.

Covers system lifecycle, co-ownership and custom field definitions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class SystemServiceProbe(Protocol):
    """Domain probe for system application service operations."""

    def system_created(self, system_id: str, name: str, owner_id: str, actor_id: str) -> None:
        """Record system creation."""
        ...

    def system_creation_failed(self, name: str, error: str) -> None:
        """Record failed system creation."""
        ...

    def system_updated(self, system_id: str, actor_id: str) -> None:
        """Record a metadata change or ownership transfer."""
        ...

    def system_approval_changed(self, system_id: str, approved: bool, actor_id: str) -> None:
        """Record that a system was approved or unapproved."""
        ...

    def system_deleted(
        self, system_id: str, actor_id: str, records_removed: int, fields_removed: int
    ) -> None:
        """Record system deletion with its cascaded rows."""
        ...

    def systems_listed(self, actor_id: str, count: int) -> None:
        """Record a system listing."""
        ...

    def co_owner_added(self, system_id: str, user_id: str, actor_id: str) -> None:
        """Record that a co-owner was added."""
        ...

    def co_owner_removed(self, system_id: str, user_id: str, actor_id: str) -> None:
        """Record that a co-owner was removed."""
        ...

    def field_created(self, system_id: str, field_id: str, name: str) -> None:
        """Record a custom field definition."""
        ...

    def field_updated(self, system_id: str, field_id: str) -> None:
        """Record a custom field change."""
        ...

    def field_deleted(self, system_id: str, field_id: str) -> None:
        """Record a custom field removal."""
        ...

    def permission_denied(self, actor_id: str, action: str, system_id: str | None = None) -> None:
        """Record that an authorization check failed."""
        ...

    def with_context(self, context: ObservationContext) -> SystemServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultSystemServiceProbe:
    """Default implementation of SystemServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultSystemServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultSystemServiceProbe(logger=self._logger, context=context)

    def system_created(self, system_id: str, name: str, owner_id: str, actor_id: str) -> None:
        self._logger.info(
            "system_created",
            system_id=system_id,
            name=name,
            owner_id=owner_id,
            actor_id=actor_id,
            **self._get_context_kwargs(),
        )

    def system_creation_failed(self, name: str, error: str) -> None:
        self._logger.error(
            "system_creation_failed",
            name=name,
            error=error,
            **self._get_context_kwargs(),
        )

    def system_updated(self, system_id: str, actor_id: str) -> None:
        self._logger.info(
            "system_updated",
            system_id=system_id,
            actor_id=actor_id,
            **self._get_context_kwargs(),
        )

    def system_approval_changed(self, system_id: str, approved: bool, actor_id: str) -> None:
        self._logger.info(
            "system_approval_changed",
            system_id=system_id,
            approved=approved,
            actor_id=actor_id,
            **self._get_context_kwargs(),
        )

    def system_deleted(
        self, system_id: str, actor_id: str, records_removed: int, fields_removed: int
    ) -> None:
        self._logger.info(
            "system_deleted",
            system_id=system_id,
            actor_id=actor_id,
            records_removed=records_removed,
            fields_removed=fields_removed,
            **self._get_context_kwargs(),
        )

    def systems_listed(self, actor_id: str, count: int) -> None:
        self._logger.debug(
            "systems_listed",
            actor_id=actor_id,
            count=count,
            **self._get_context_kwargs(),
        )

    def co_owner_added(self, system_id: str, user_id: str, actor_id: str) -> None:
        self._logger.info(
            "co_owner_added",
            system_id=system_id,
            user_id=user_id,
            actor_id=actor_id,
            **self._get_context_kwargs(),
        )

    def co_owner_removed(self, system_id: str, user_id: str, actor_id: str) -> None:
        self._logger.info(
            "co_owner_removed",
            system_id=system_id,
            user_id=user_id,
            actor_id=actor_id,
            **self._get_context_kwargs(),
        )

    def field_created(self, system_id: str, field_id: str, name: str) -> None:
        self._logger.info(
            "system_field_created",
            system_id=system_id,
            field_id=field_id,
            name=name,
            **self._get_context_kwargs(),
        )

    def field_updated(self, system_id: str, field_id: str) -> None:
        self._logger.info(
            "system_field_updated",
            system_id=system_id,
            field_id=field_id,
            **self._get_context_kwargs(),
        )

    def field_deleted(self, system_id: str, field_id: str) -> None:
        self._logger.info(
            "system_field_deleted",
            system_id=system_id,
            field_id=field_id,
            **self._get_context_kwargs(),
        )

    def permission_denied(self, actor_id: str, action: str, system_id: str | None = None) -> None:
        self._logger.warning(
            "permission_denied",
            actor_id=actor_id,
            action=action,
            system_id=system_id,
            **self._get_context_kwargs(),
        )
