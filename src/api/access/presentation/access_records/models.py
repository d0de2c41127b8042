"""Response models for the administrator access record view."""

from __future__ import annotations

from pydantic import BaseModel, Field

from access.application.value_objects import AccessRecordView
from access.presentation.members.models import AccessRecordResponse
from access.presentation.models import SystemSummaryResponse, UserResponse


class AccessRecordDetailResponse(BaseModel):
    """An access record with its user and system resolved."""

    record: AccessRecordResponse = Field(..., description="Access record")
    user: UserResponse = Field(..., description="User holding the access")
    system: SystemSummaryResponse = Field(..., description="System accessed")

    @classmethod
    def from_view(cls, view: AccessRecordView) -> AccessRecordDetailResponse:
        return cls(
            record=AccessRecordResponse.from_domain(view.record),
            user=UserResponse.from_domain(view.user),
            system=SystemSummaryResponse.from_domain(view.system),
        )


class AccessRecordListResponse(BaseModel):
    """List of access records."""

    records: list[AccessRecordDetailResponse] = Field(..., description="Records")
    count: int = Field(..., description="Number of records returned")
