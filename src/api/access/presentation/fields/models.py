"""Request and response models for custom field endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from access.domain.aggregates import SystemField
from access.domain.value_objects import FieldType


class CreateFieldRequest(BaseModel):
    """Request to define a custom field on a system.

    Attributes:
        name: Field name, unique within the system
        field_type: text, number, date or select
        options: Allowed values of a select field
        required: Whether a value must be provided
    """

    name: str = Field(
        ..., min_length=1, max_length=255, description="Field name", examples=["Cost center"]
    )
    field_type: FieldType = Field(FieldType.TEXT, description="Value type")
    options: list[str] = Field(default_factory=list, description="Select options")
    required: bool = Field(False, description="Whether a value is required")


class UpdateFieldRequest(BaseModel):
    """Request to change a field definition. Omitted fields are unchanged."""

    name: str | None = Field(None, min_length=1, max_length=255)
    field_type: FieldType | None = Field(None)
    options: list[str] | None = Field(None)
    required: bool | None = Field(None)


class FieldResponse(BaseModel):
    """Response containing a custom field definition."""

    id: str = Field(..., description="Field ID")
    system_id: str = Field(..., description="System ID")
    name: str = Field(..., description="Field name")
    field_type: str = Field(..., description="Value type")
    options: list[str] = Field(..., description="Select options")
    required: bool = Field(..., description="Whether a value is required")
    created_at: datetime = Field(..., description="Creation timestamp")

    @classmethod
    def from_domain(cls, system_field: SystemField) -> FieldResponse:
        """Convert domain SystemField to API response."""
        return cls(
            id=system_field.id.value,
            system_id=system_field.system_id.value,
            name=system_field.name,
            field_type=system_field.field_type.value,
            options=list(system_field.options),
            required=system_field.required,
            created_at=system_field.created_at,
        )
