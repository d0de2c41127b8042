"""Response models for the caller's own views."""

from __future__ import annotations

from pydantic import BaseModel, Field

from access.domain.listing import DashboardBuckets
from access.presentation.models import SystemSummaryResponse


class DashboardResponse(BaseModel):
    """The caller's systems grouped into disjoint buckets.

    Attributes:
        owned: Systems the caller owns
        assigned: Systems the caller has access to but does not own
        other: Every remaining system (administrators only)
    """

    owned: list[SystemSummaryResponse] = Field(..., description="Owned systems")
    assigned: list[SystemSummaryResponse] = Field(..., description="Assigned systems")
    other: list[SystemSummaryResponse] = Field(..., description="Other systems")

    @classmethod
    def from_domain(cls, buckets: DashboardBuckets) -> DashboardResponse:
        return cls(
            owned=[SystemSummaryResponse.from_domain(s) for s in buckets.owned],
            assigned=[SystemSummaryResponse.from_domain(s) for s in buckets.assigned],
            other=[SystemSummaryResponse.from_domain(s) for s in buckets.other],
        )
