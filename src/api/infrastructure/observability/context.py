"""Observation context for domain-oriented observability.

Observation contexts collect and manage contextual metadata for instrumentation,
following the Domain Oriented Observability pattern.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable request-scoped metadata merged into every probe event.

    The keys are chosen so they never collide with the arguments of a probe
    event: ``user_id``, ``system_id`` and ``request_id`` describe the entity
    an event is about, while the context describes who asked.

    Attributes:
        correlation_id: Identifier of the HTTP request (``X-Request-ID``).
        caller_id: Id of the user whose request is being served.

    Example:
        context = ObservationContext(correlation_id="req-123", caller_id="01J...")
        probe = DefaultSystemServiceProbe().with_context(context)
    """

    correlation_id: str | None = None
    caller_id: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging, skipping unset values."""
        result: dict[str, Any] = {}
        if self.correlation_id is not None:
            result["correlation_id"] = self.correlation_id
        if self.caller_id is not None:
            result["caller_id"] = self.caller_id
        return result
