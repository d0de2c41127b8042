"""Response models shared by the access API endpoints."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field

from access.application.value_objects import SystemAccess, SystemView
from access.domain.aggregates import System, User
from access.domain.tags import format_tags
from access.domain.value_objects import AccessTag


class TagModel(BaseModel):
    """A key/value tag on an access record."""

    key: str = Field(..., min_length=1, description="Tag key", examples=["cost_center"])
    value: str = Field("", description="Tag value", examples=["4410"])

    @classmethod
    def from_domain(cls, tag: AccessTag) -> TagModel:
        return cls(key=tag.key, value=tag.value)

    def to_domain(self) -> AccessTag:
        return AccessTag(key=self.key.strip(), value=self.value.strip())


class UserResponse(BaseModel):
    """Response containing user details."""

    id: str = Field(..., description="User ID (ULID format)")
    name: str = Field(..., description="Full name")
    email: str = Field(..., description="Email address")
    department: str = Field(..., description="Department")
    role: str = Field(..., description="Global role (admin or member)")

    @classmethod
    def from_domain(cls, user: User) -> UserResponse:
        """Convert domain User aggregate to API response."""
        return cls(
            id=user.id.value,
            name=user.name,
            email=user.email,
            department=user.department,
            role=user.role.value,
        )


class SystemSummaryResponse(BaseModel):
    """Compact system details used inside other responses."""

    id: str = Field(..., description="System ID (ULID format)")
    name: str = Field(..., description="System name")
    description: str = Field(..., description="System description")
    category: str = Field(..., description="System category")
    owner_id: str = Field(..., description="Owning user ID")
    approved: bool = Field(..., description="Whether every user may see the system")

    @classmethod
    def from_domain(cls, system: System) -> SystemSummaryResponse:
        """Convert domain System aggregate to API response."""
        return cls(
            id=system.id.value,
            name=system.name,
            description=system.description,
            category=system.category.value,
            owner_id=system.owner_id.value,
            approved=system.approved,
        )


class SystemResponse(SystemSummaryResponse):
    """Full system details with owner and co-owners resolved."""

    owner: UserResponse | None = Field(
        ..., description="Owning user (None if the user no longer exists)"
    )
    co_owners: list[UserResponse] = Field(..., description="Co-owners in order")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @classmethod
    def from_view(cls, view: SystemView) -> SystemResponse:
        """Convert a SystemView to API response."""
        system = view.system
        return cls(
            id=system.id.value,
            name=system.name,
            description=system.description,
            category=system.category.value,
            owner_id=system.owner_id.value,
            approved=system.approved,
            owner=UserResponse.from_domain(view.owner) if view.owner else None,
            co_owners=[UserResponse.from_domain(user) for user in view.co_owners],
            created_at=system.created_at,
            updated_at=system.updated_at,
        )


class SystemListResponse(BaseModel):
    """Response containing a list of systems."""

    systems: list[SystemResponse] = Field(..., description="Systems")
    count: int = Field(..., description="Number of systems returned")


class SystemAccessResponse(BaseModel):
    """A system the user has access to, with the grant details."""

    access_record_id: str = Field(..., description="Access record ID")
    system: SystemSummaryResponse = Field(..., description="The system")
    role: str | None = Field(..., description="Access role, if any")
    granted_date: date = Field(..., description="Date access was granted")
    tags: list[TagModel] = Field(..., description="Tags on the access record")
    tags_text: str = Field(..., description="Tags as a key:value text block")

    @classmethod
    def from_view(cls, entry: SystemAccess) -> SystemAccessResponse:
        """Convert a SystemAccess view to API response."""
        return cls(
            access_record_id=entry.access_record_id.value,
            system=SystemSummaryResponse.from_domain(entry.system),
            role=entry.role,
            granted_date=entry.granted_date,
            tags=[TagModel.from_domain(tag) for tag in entry.tags],
            tags_text=format_tags(entry.tags),
        )


class SystemAccessListResponse(BaseModel):
    """Response containing a user's systems."""

    systems: list[SystemAccessResponse] = Field(..., description="Accessible systems")
    count: int = Field(..., description="Number of entries returned")

