"""Request and response models for system API endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field

from access.application.value_objects import SystemPermissions
from access.domain.value_objects import SystemCategory


class CreateSystemRequest(BaseModel):
    """Request to create a system.

    Attributes:
        name: System name (1-255 characters)
        description: Free-form description
        category: Business category
        owner_id: Owning user ID (ULID)
        co_owner_ids: Additional managing users (ULIDs)
        approved: Whether every user may see the system
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="System name",
        examples=["Workday", "Salesforce"],
    )
    description: str = Field("", description="System description")
    category: SystemCategory = Field(..., description="Business category")
    owner_id: str = Field(
        ...,
        min_length=26,
        max_length=26,
        description="Owning user ID (ULID)",
        examples=["01HN3XQ7K2XYZ123456789ABCD"],
    )
    co_owner_ids: list[str] = Field(
        default_factory=list, description="Co-owner user IDs (ULIDs)"
    )
    approved: bool = Field(False, description="Visible to every user")


class UpdateSystemRequest(BaseModel):
    """Request to update a system. Omitted fields are left unchanged.

    Setting ``owner_id`` transfers ownership; a co-owner promoted to owner
    is removed from the co-owners.
    """

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None)
    category: SystemCategory | None = Field(None)
    owner_id: str | None = Field(None, min_length=26, max_length=26)


class SetApprovalRequest(BaseModel):
    """Request to approve or unapprove a system."""

    approved: bool = Field(..., description="New approval state")


class AddCoOwnerRequest(BaseModel):
    """Request to add a co-owner to a system."""

    user_id: str = Field(
        ...,
        min_length=26,
        max_length=26,
        description="User ID (ULID)",
    )


class SystemPermissionsResponse(BaseModel):
    """What the caller may do with a system."""

    system_id: str = Field(..., description="System ID")
    can_view: bool
    can_manage: bool
    can_delete: bool
    can_approve: bool

    @classmethod
    def from_domain(
        cls, system_id: str, permissions: SystemPermissions
    ) -> SystemPermissionsResponse:
        return cls(
            system_id=system_id,
            can_view=permissions.can_view,
            can_manage=permissions.can_manage,
            can_delete=permissions.can_delete,
            can_approve=permissions.can_approve,
        )
