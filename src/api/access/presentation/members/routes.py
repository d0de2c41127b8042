"""Routes for the users who have access to a system."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from access.application.services import AccessService
from access.application.value_objects import SortField
from access.dependencies.access import get_access_service
from access.dependencies.user import get_current_user
from access.domain.aggregates import User
from access.domain.value_objects import SystemId, UserId
from access.presentation.errors import http_error, parse_id
from access.presentation.members.models import (
    AccessRecordResponse,
    GrantAccessRequest,
    SystemMemberListResponse,
    SystemMemberResponse,
    UpdateAccessRequest,
    UpdateTagsTextRequest,
)
from access.presentation.models import UserResponse

router = APIRouter(
    prefix="/systems/{system_id}/users",
    tags=["system members"],
)


@router.get(
    "",
    response_model=SystemMemberListResponse,
    summary="List users with access to a system",
    description="""
List the users holding access records for the system. `search` matches user
name, email and role. Entries are sorted by `sort` (name, role or
granted_date) with empty values first.
""",
)
async def list_members(
    system_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[AccessService, Depends(get_access_service)],
    search: Annotated[str | None, Query(description="Search text")] = None,
    sort: Annotated[SortField, Query(description="Sort field")] = SortField.NAME,
    descending: Annotated[bool, Query(description="Reverse the order")] = False,
) -> SystemMemberListResponse:
    """List the members of a system."""
    system_id_obj = parse_id(SystemId, system_id, "system")
    try:
        members = await service.list_system_members(
            actor=current_user,
            system_id=system_id_obj,
            search=search,
            sort=sort,
            descending=descending,
        )
        return SystemMemberListResponse(
            members=[SystemMemberResponse.from_view(member) for member in members],
            count=len(members),
        )
    except Exception as e:
        raise http_error(e, "Failed to list system users")


@router.get(
    "/available",
    response_model=list[UserResponse],
    summary="List users who could be granted access",
)
async def list_available_users(
    system_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[AccessService, Depends(get_access_service)],
) -> list[UserResponse]:
    """Users without access to the system yet."""
    system_id_obj = parse_id(SystemId, system_id, "system")
    try:
        users = await service.available_users(actor=current_user, system_id=system_id_obj)
        return [UserResponse.from_domain(user) for user in users]
    except Exception as e:
        raise http_error(e, "Failed to list available users")


@router.post(
    "",
    response_model=AccessRecordResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Grant a user access to a system",
    responses={
        400: {"description": "User already has access to this system"},
        403: {"description": "Caller neither administers nor (co-)owns the system"},
        404: {"description": "System or user not found"},
    },
)
async def grant_access(
    system_id: str,
    request: GrantAccessRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[AccessService, Depends(get_access_service)],
) -> AccessRecordResponse:
    """Grant access, recorded as granted today by the caller."""
    system_id_obj = parse_id(SystemId, system_id, "system")
    user_id = parse_id(UserId, request.user_id, "user")
    try:
        record = await service.grant_access(
            actor=current_user,
            system_id=system_id_obj,
            user_id=user_id,
            role=request.role,
            tags=[tag.to_domain() for tag in request.tags],
        )
        return AccessRecordResponse.from_domain(record)
    except Exception as e:
        raise http_error(e, "Failed to grant access")


@router.patch(
    "/{user_id}",
    response_model=AccessRecordResponse,
    summary="Change a user's access role or tags",
)
async def update_access(
    system_id: str,
    user_id: str,
    request: UpdateAccessRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[AccessService, Depends(get_access_service)],
) -> AccessRecordResponse:
    """Update role and/or tags of an access record."""
    system_id_obj = parse_id(SystemId, system_id, "system")
    user_id_obj = parse_id(UserId, user_id, "user")
    tags = [tag.to_domain() for tag in request.tags] if request.tags is not None else None
    try:
        record = await service.update_access(
            actor=current_user,
            system_id=system_id_obj,
            user_id=user_id_obj,
            role=request.role,
            tags=tags,
        )
        return AccessRecordResponse.from_domain(record)
    except Exception as e:
        raise http_error(e, "Failed to update access")


@router.put(
    "/{user_id}/tags",
    response_model=AccessRecordResponse,
    summary="Replace tags from a key:value text block",
)
async def update_tags_text(
    system_id: str,
    user_id: str,
    request: UpdateTagsTextRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[AccessService, Depends(get_access_service)],
) -> AccessRecordResponse:
    """Replace tags using the text form."""
    system_id_obj = parse_id(SystemId, system_id, "system")
    user_id_obj = parse_id(UserId, user_id, "user")
    try:
        record = await service.update_access(
            actor=current_user,
            system_id=system_id_obj,
            user_id=user_id_obj,
            tags=request.tags or "",
        )
        return AccessRecordResponse.from_domain(record)
    except Exception as e:
        raise http_error(e, "Failed to update tags")


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a user's access to a system",
    responses={
        403: {"description": "Caller neither administers nor (co-)owns the system"},
        404: {"description": "System not found or user has no access"},
    },
)
async def revoke_user_access(
    system_id: str,
    user_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[AccessService, Depends(get_access_service)],
) -> None:
    """Revoke a user's access to a system."""
    system_id_obj = parse_id(SystemId, system_id, "system")
    user_id_obj = parse_id(UserId, user_id, "user")
    try:
        await service.revoke_user_access(
            actor=current_user, system_id=system_id_obj, user_id=user_id_obj
        )
    except Exception as e:
        raise http_error(e, "Failed to revoke access")
