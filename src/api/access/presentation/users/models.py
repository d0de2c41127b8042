"""Request models for user endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field

from access.domain.value_objects import Role


class CreateUserRequest(BaseModel):
    """Request to register a user.

    Attributes:
        name: Full name
        email: Email address, unique across users
        department: Department, descriptive only
        role: Global role (admin or member)
    """

    name: str = Field(
        ..., min_length=1, max_length=255, description="Full name", examples=["Jane Smith"]
    )
    email: str = Field(
        ...,
        min_length=3,
        max_length=320,
        description="Email address",
        examples=["jane.smith@example.com"],
    )
    department: str = Field("", max_length=255, description="Department")
    role: Role = Field(Role.MEMBER, description="Global role")
