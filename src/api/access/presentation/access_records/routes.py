"""Routes over every access record, regardless of system."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from access.application.services import AccessService
from access.dependencies.access import get_access_service
from access.dependencies.user import get_current_user
from access.domain.aggregates import User
from access.domain.value_objects import AccessRecordId, SystemId
from access.presentation.access_records.models import (
    AccessRecordDetailResponse,
    AccessRecordListResponse,
)
from access.presentation.errors import http_error, parse_id

router = APIRouter(
    prefix="/access-records",
    tags=["access-records"],
)


@router.get(
    "",
    response_model=AccessRecordListResponse,
    summary="List all access records",
    responses={403: {"description": "Only administrators can list access records"}},
)
async def list_access_records(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[AccessService, Depends(get_access_service)],
    search: Annotated[
        str | None, Query(description="User name, user email or system name")
    ] = None,
    system_id: Annotated[str | None, Query(description="Only this system")] = None,
) -> AccessRecordListResponse:
    """List access records with their users and systems. Administrators only."""
    system_id_obj = parse_id(SystemId, system_id, "system") if system_id else None
    try:
        views = await service.list_access_records(
            actor=current_user, search=search, system_id=system_id_obj
        )
        return AccessRecordListResponse(
            records=[AccessRecordDetailResponse.from_view(view) for view in views],
            count=len(views),
        )
    except Exception as e:
        raise http_error(e, "Failed to list access records")


@router.delete(
    "/{record_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Revoke an access record",
    responses={
        403: {"description": "Caller may not manage the record's system"},
        404: {"description": "Access record not found"},
    },
)
async def revoke_access_record(
    record_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[AccessService, Depends(get_access_service)],
) -> None:
    """Revoke an access record by ID."""
    record_id_obj = parse_id(AccessRecordId, record_id, "access record")
    try:
        await service.revoke_access(actor=current_user, record_id=record_id_obj)
    except Exception as e:
        raise http_error(e, "Failed to revoke access")
