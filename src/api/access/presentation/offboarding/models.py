"""Request and response models for offboarding endpoints."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field

from access.domain.aggregates import OffboardingRequest


class CreateOffboardingRequest(BaseModel):
    """Request to offboard a user.

    Attributes:
        user_id: User leaving the organisation
        removal_date: Date access should be removed
        system_ids: Systems to remove access from, unless all_systems is set
        all_systems: Remove access from every system
        notes: Free-form notes
    """

    user_id: str = Field(..., description="User ID (ULID format)")
    removal_date: date = Field(..., description="Date access should be removed")
    system_ids: list[str] = Field(
        default_factory=list, description="Systems to remove access from"
    )
    all_systems: bool = Field(False, description="Remove access from every system")
    notes: str | None = Field(None, max_length=2000, description="Notes")


class OffboardingRequestResponse(BaseModel):
    """Response containing an offboarding request."""

    id: str = Field(..., description="Request ID (ULID format)")
    user_id: str = Field(..., description="User being offboarded")
    requested_by: str = Field(..., description="User who filed the request")
    removal_date: date = Field(..., description="Date access should be removed")
    system_ids: list[str] = Field(..., description="Systems covered")
    all_systems: bool = Field(..., description="Whether every system is covered")
    status: str = Field(..., description="pending or completed")
    notes: str | None = Field(..., description="Notes")
    created_at: datetime = Field(..., description="When the request was filed")
    completed_at: datetime | None = Field(..., description="When it was completed")

    @classmethod
    def from_domain(cls, request: OffboardingRequest) -> OffboardingRequestResponse:
        return cls(
            id=request.id.value,
            user_id=request.user_id.value,
            requested_by=request.requested_by.value,
            removal_date=request.removal_date,
            system_ids=[system_id.value for system_id in request.system_ids],
            all_systems=request.all_systems,
            status=request.status.value,
            notes=request.notes,
            created_at=request.created_at,
            completed_at=request.completed_at,
        )
