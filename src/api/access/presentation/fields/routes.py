"""Custom field routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from access.application.services import SystemFieldService
from access.dependencies.system import get_system_field_service
from access.dependencies.user import get_current_user
from access.domain.aggregates import User
from access.domain.value_objects import SystemFieldId, SystemId
from access.presentation.errors import http_error, parse_id
from access.presentation.fields.models import (
    CreateFieldRequest,
    FieldResponse,
    UpdateFieldRequest,
)

router = APIRouter(
    prefix="/systems/{system_id}/fields",
    tags=["system fields"],
)


@router.get(
    "",
    response_model=list[FieldResponse],
    summary="List a system's custom fields",
)
async def list_fields(
    system_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[SystemFieldService, Depends(get_system_field_service)],
) -> list[FieldResponse]:
    """List fields in creation order."""
    system_id_obj = parse_id(SystemId, system_id, "system")
    try:
        fields = await service.list_fields(actor=current_user, system_id=system_id_obj)
        return [FieldResponse.from_domain(f) for f in fields]
    except Exception as e:
        raise http_error(e, "Failed to list fields")


@router.post(
    "",
    response_model=FieldResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Define a custom field",
    responses={
        400: {"description": "Field name already exists on this system"},
        403: {"description": "Caller neither administers nor (co-)owns the system"},
        404: {"description": "System not found"},
    },
)
async def create_field(
    system_id: str,
    request: CreateFieldRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[SystemFieldService, Depends(get_system_field_service)],
) -> FieldResponse:
    """Create a field definition."""
    system_id_obj = parse_id(SystemId, system_id, "system")
    try:
        system_field = await service.create_field(
            actor=current_user,
            system_id=system_id_obj,
            name=request.name,
            field_type=request.field_type,
            options=request.options,
            required=request.required,
        )
        return FieldResponse.from_domain(system_field)
    except Exception as e:
        raise http_error(e, "Failed to create field")


@router.patch(
    "/{field_id}",
    response_model=FieldResponse,
    summary="Update a custom field",
)
async def update_field(
    system_id: str,
    field_id: str,
    request: UpdateFieldRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[SystemFieldService, Depends(get_system_field_service)],
) -> FieldResponse:
    """Update a field definition."""
    system_id_obj = parse_id(SystemId, system_id, "system")
    field_id_obj = parse_id(SystemFieldId, field_id, "field")
    try:
        system_field = await service.update_field(
            actor=current_user,
            system_id=system_id_obj,
            field_id=field_id_obj,
            name=request.name,
            field_type=request.field_type,
            options=request.options,
            required=request.required,
        )
        return FieldResponse.from_domain(system_field)
    except Exception as e:
        raise http_error(e, "Failed to update field")


@router.delete(
    "/{field_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a custom field",
)
async def delete_field(
    system_id: str,
    field_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[SystemFieldService, Depends(get_system_field_service)],
) -> None:
    """Delete a field definition."""
    system_id_obj = parse_id(SystemId, system_id, "system")
    field_id_obj = parse_id(SystemFieldId, field_id, "field")
    try:
        await service.delete_field(
            actor=current_user, system_id=system_id_obj, field_id=field_id_obj
        )
    except Exception as e:
        raise http_error(e, "Failed to delete field")
