"""Protocol for access record application service observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class AccessServiceProbe(Protocol):
    """Domain probe for granting, changing and revoking access."""

    def access_granted(
        self, record_id: str, user_id: str, system_id: str, role: str | None, actor_id: str
    ) -> None:
        """Record a new access grant."""
        ...

    def access_grant_failed(self, user_id: str, system_id: str, error: str) -> None:
        """Record a rejected access grant."""
        ...

    def access_updated(self, record_id: str, role: str | None, tag_count: int) -> None:
        """Record a role or tag change on an access record."""
        ...

    def access_revoked(self, record_id: str, user_id: str, system_id: str, actor_id: str) -> None:
        """Record that an access record was deleted."""
        ...

    def dangling_references_skipped(self, view: str, count: int) -> None:
        """Record access records skipped because their user or system is gone."""
        ...

    def with_context(self, context: ObservationContext) -> AccessServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAccessServiceProbe:
    """Default implementation of AccessServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultAccessServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultAccessServiceProbe(logger=self._logger, context=context)

    def access_granted(
        self, record_id: str, user_id: str, system_id: str, role: str | None, actor_id: str
    ) -> None:
        self._logger.info(
            "access_granted",
            record_id=record_id,
            user_id=user_id,
            system_id=system_id,
            role=role,
            actor_id=actor_id,
            **self._get_context_kwargs(),
        )

    def access_grant_failed(self, user_id: str, system_id: str, error: str) -> None:
        self._logger.warning(
            "access_grant_failed",
            user_id=user_id,
            system_id=system_id,
            error=error,
            **self._get_context_kwargs(),
        )

    def access_updated(self, record_id: str, role: str | None, tag_count: int) -> None:
        self._logger.info(
            "access_updated",
            record_id=record_id,
            role=role,
            tag_count=tag_count,
            **self._get_context_kwargs(),
        )

    def access_revoked(self, record_id: str, user_id: str, system_id: str, actor_id: str) -> None:
        self._logger.info(
            "access_revoked",
            record_id=record_id,
            user_id=user_id,
            system_id=system_id,
            actor_id=actor_id,
            **self._get_context_kwargs(),
        )

    def dangling_references_skipped(self, view: str, count: int) -> None:
        self._logger.debug(
            "dangling_references_skipped",
            view=view,
            count=count,
            **self._get_context_kwargs(),
        )
