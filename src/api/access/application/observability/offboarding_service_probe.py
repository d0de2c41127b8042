"""Protocol for offboarding application service observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class OffboardingServiceProbe(Protocol):
    """Domain probe for the offboarding workflow."""

    def request_created(
        self, request_id: str, user_id: str, all_systems: bool, system_count: int, actor_id: str
    ) -> None:
        """Record a new pending offboarding request."""
        ...

    def request_creation_failed(self, user_id: str, error: str) -> None:
        """Record a rejected offboarding request."""
        ...

    def request_completed(self, request_id: str, user_id: str, records_revoked: int) -> None:
        """Record completion of a pending request."""
        ...

    def request_already_completed(self, request_id: str) -> None:
        """Record a repeated completion, which changes nothing."""
        ...

    def with_context(self, context: ObservationContext) -> OffboardingServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultOffboardingServiceProbe:
    """Default implementation of OffboardingServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultOffboardingServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultOffboardingServiceProbe(logger=self._logger, context=context)

    def request_created(
        self, request_id: str, user_id: str, all_systems: bool, system_count: int, actor_id: str
    ) -> None:
        self._logger.info(
            "offboarding_request_created",
            request_id=request_id,
            user_id=user_id,
            all_systems=all_systems,
            system_count=system_count,
            actor_id=actor_id,
            **self._get_context_kwargs(),
        )

    def request_creation_failed(self, user_id: str, error: str) -> None:
        self._logger.warning(
            "offboarding_request_creation_failed",
            user_id=user_id,
            error=error,
            **self._get_context_kwargs(),
        )

    def request_completed(self, request_id: str, user_id: str, records_revoked: int) -> None:
        self._logger.info(
            "offboarding_request_completed",
            request_id=request_id,
            user_id=user_id,
            records_revoked=records_revoked,
            **self._get_context_kwargs(),
        )

    def request_already_completed(self, request_id: str) -> None:
        self._logger.debug(
            "offboarding_request_already_completed",
            request_id=request_id,
            **self._get_context_kwargs(),
        )
