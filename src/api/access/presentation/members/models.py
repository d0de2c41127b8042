"""Request and response models for system membership endpoints."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from access.application.value_objects import SystemMember
from access.domain.aggregates import AccessRecord
from access.domain.tags import format_tags
from access.presentation.models import TagModel, UserResponse


class GrantAccessRequest(BaseModel):
    """Request to give a user access to a system.

    Attributes:
        user_id: User to grant access to (ULID)
        role: Optional access role, conventionally Admin, User or Viewer
        tags: Optional key/value tags
    """

    user_id: str = Field(..., min_length=26, max_length=26, description="User ID")
    role: str | None = Field(
        None, max_length=100, description="Access role", examples=["Viewer"]
    )
    tags: list[TagModel] = Field(default_factory=list, description="Tags")


class UpdateAccessRequest(BaseModel):
    """Request to change a user's access. Omitted fields are unchanged.

    An empty ``role`` clears the role. ``tags`` replaces the current tags.
    """

    role: str | None = Field(None, max_length=100, description="Access role")
    tags: list[TagModel] | None = Field(None, description="Replacement tags")


class UpdateTagsTextRequest(BaseModel):
    """Request to replace tags from a ``key:value`` text block.

    One pair per line; only the first colon separates key from value.
    A null or empty block clears the tags.
    """

    tags: str | None = Field(
        None,
        description="key:value lines",
        examples=["cost_center:4410\nticket:IT-1234"],
    )


class AccessRecordResponse(BaseModel):
    """Response containing an access record."""

    id: str = Field(..., description="Access record ID")
    user_id: str = Field(..., description="User ID")
    system_id: str = Field(..., description="System ID")
    role: str | None = Field(..., description="Access role")
    granted_date: date = Field(..., description="Date access was granted")
    granted_by: str | None = Field(..., description="User who granted access")
    tags: list[TagModel] = Field(..., description="Tags")
    tags_text: str = Field(..., description="Tags as a key:value text block")

    @classmethod
    def from_domain(cls, record: AccessRecord) -> AccessRecordResponse:
        """Convert domain AccessRecord to API response."""
        return cls(
            id=record.id.value,
            user_id=record.user_id.value,
            system_id=record.system_id.value,
            role=record.role,
            granted_date=record.granted_date,
            granted_by=record.granted_by.value if record.granted_by else None,
            tags=[TagModel.from_domain(tag) for tag in record.tags],
            tags_text=format_tags(record.tags),
        )


class SystemMemberResponse(BaseModel):
    """A user with access to a system."""

    access_record_id: str = Field(..., description="Access record ID")
    user: UserResponse = Field(..., description="The user")
    role: str | None = Field(..., description="Access role")
    granted_date: date = Field(..., description="Date access was granted")
    granted_by: str | None = Field(..., description="User who granted access")
    tags: list[TagModel] = Field(..., description="Tags")
    tags_text: str = Field(..., description="Tags as a key:value text block")

    @classmethod
    def from_view(cls, member: SystemMember) -> SystemMemberResponse:
        return cls(
            access_record_id=member.access_record_id.value,
            user=UserResponse.from_domain(member.user),
            role=member.role,
            granted_date=member.granted_date,
            granted_by=member.granted_by.value if member.granted_by else None,
            tags=[TagModel.from_domain(tag) for tag in member.tags],
            tags_text=format_tags(member.tags),
        )


class SystemMemberListResponse(BaseModel):
    """Response containing the users with access to a system."""

    members: list[SystemMemberResponse] = Field(..., description="Members")
    count: int = Field(..., description="Number of members returned")
