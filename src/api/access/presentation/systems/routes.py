"""System management routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from access.application.services import AuthorizationService, SystemService
from access.dependencies.access import get_authorization_service
from access.dependencies.system import get_system_service
from access.dependencies.user import get_current_user
from access.domain.aggregates import User
from access.domain.value_objects import SystemId, UserId
from access.presentation.errors import http_error, parse_id
from access.presentation.models import SystemListResponse, SystemResponse
from access.presentation.systems.models import (
    AddCoOwnerRequest,
    CreateSystemRequest,
    SetApprovalRequest,
    SystemPermissionsResponse,
    UpdateSystemRequest,
)

router = APIRouter(
    prefix="/systems",
    tags=["systems"],
)


@router.post(
    "",
    response_model=SystemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a system",
    responses={
        201: {"description": "System created successfully"},
        400: {"description": "Invalid name or co-owner list"},
        401: {"description": "Authentication required"},
        403: {"description": "Only administrators can create systems"},
        404: {"description": "Owner or co-owner not found"},
    },
)
async def create_system(
    request: CreateSystemRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[SystemService, Depends(get_system_service)],
) -> SystemResponse:
    """Create a new system. Administrators only."""
    owner_id = parse_id(UserId, request.owner_id, "owner")
    co_owner_ids = [parse_id(UserId, uid, "co-owner") for uid in request.co_owner_ids]

    try:
        view = await service.create_system(
            actor=current_user,
            name=request.name,
            description=request.description,
            category=request.category,
            owner_id=owner_id,
            co_owner_ids=co_owner_ids,
            approved=request.approved,
        )
        return SystemResponse.from_view(view)
    except Exception as e:
        raise http_error(e, "Failed to create system")


@router.get(
    "",
    response_model=SystemListResponse,
    summary="List systems",
    description="""
List the systems visible to the caller, ordered by name.

Administrators see every system; other users see approved systems plus the
ones they own or co-own. `search` matches name, description and owner name;
`category` accepts a category name or `All`; `approved` keeps only approved
(`true`) or pending (`false`) systems.
""",
)
async def list_systems(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[SystemService, Depends(get_system_service)],
    search: Annotated[str | None, Query(description="Search text")] = None,
    category: Annotated[str | None, Query(description="Category or All")] = None,
    approved: Annotated[bool | None, Query(description="Approval state")] = None,
) -> SystemListResponse:
    """List visible systems."""
    try:
        views = await service.list_systems(
            actor=current_user, search=search, category=category, approved=approved
        )
        return SystemListResponse(
            systems=[SystemResponse.from_view(view) for view in views],
            count=len(views),
        )
    except Exception as e:
        raise http_error(e, "Failed to list systems")


@router.get(
    "/{system_id}",
    response_model=SystemResponse,
    summary="Get system by ID",
    responses={
        403: {"description": "System is not approved and caller does not manage it"},
        404: {"description": "System not found"},
    },
)
async def get_system(
    system_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[SystemService, Depends(get_system_service)],
) -> SystemResponse:
    """Get a system by ID."""
    system_id_obj = parse_id(SystemId, system_id, "system")
    try:
        view = await service.get_system(actor=current_user, system_id=system_id_obj)
        return SystemResponse.from_view(view)
    except Exception as e:
        raise http_error(e, "Failed to get system")


@router.patch(
    "/{system_id}",
    response_model=SystemResponse,
    summary="Update a system",
    responses={
        403: {"description": "Caller neither administers nor (co-)owns the system"},
        404: {"description": "System or new owner not found"},
    },
)
async def update_system(
    system_id: str,
    request: UpdateSystemRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[SystemService, Depends(get_system_service)],
) -> SystemResponse:
    """Update system metadata or transfer ownership."""
    system_id_obj = parse_id(SystemId, system_id, "system")
    owner_id = parse_id(UserId, request.owner_id, "owner") if request.owner_id else None

    try:
        view = await service.update_system(
            actor=current_user,
            system_id=system_id_obj,
            name=request.name,
            description=request.description,
            category=request.category,
            owner_id=owner_id,
        )
        return SystemResponse.from_view(view)
    except Exception as e:
        raise http_error(e, "Failed to update system")


@router.put(
    "/{system_id}/approval",
    response_model=SystemResponse,
    summary="Approve or unapprove a system",
    responses={
        403: {"description": "Only administrators can approve systems"},
        404: {"description": "System not found"},
    },
)
async def set_approval(
    system_id: str,
    request: SetApprovalRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[SystemService, Depends(get_system_service)],
) -> SystemResponse:
    """Set the approval flag of a system."""
    system_id_obj = parse_id(SystemId, system_id, "system")
    try:
        view = await service.set_approval(
            actor=current_user, system_id=system_id_obj, approved=request.approved
        )
        return SystemResponse.from_view(view)
    except Exception as e:
        raise http_error(e, "Failed to change approval")


@router.delete(
    "/{system_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a system",
    description="Delete a system together with its access records and custom fields.",
    responses={
        403: {"description": "Only administrators can delete systems"},
        404: {"description": "System not found"},
    },
)
async def delete_system(
    system_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[SystemService, Depends(get_system_service)],
) -> None:
    """Delete a system."""
    system_id_obj = parse_id(SystemId, system_id, "system")
    try:
        await service.delete_system(actor=current_user, system_id=system_id_obj)
    except Exception as e:
        raise http_error(e, "Failed to delete system")


@router.get(
    "/{system_id}/permissions",
    response_model=SystemPermissionsResponse,
    summary="Get the caller's permissions on a system",
)
async def get_permissions(
    system_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    authorization: Annotated[AuthorizationService, Depends(get_authorization_service)],
) -> SystemPermissionsResponse:
    """Report what the caller may do with a system."""
    system_id_obj = parse_id(SystemId, system_id, "system")
    try:
        permissions = await authorization.permissions_for(current_user.id, system_id_obj)
        return SystemPermissionsResponse.from_domain(system_id, permissions)
    except Exception as e:
        raise http_error(e, "Failed to check permissions")


@router.post(
    "/{system_id}/co-owners",
    response_model=SystemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a co-owner",
    responses={
        400: {"description": "User already owns or co-owns the system"},
        403: {"description": "Caller neither administers nor (co-)owns the system"},
        404: {"description": "System or user not found"},
    },
)
async def add_co_owner(
    system_id: str,
    request: AddCoOwnerRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[SystemService, Depends(get_system_service)],
) -> SystemResponse:
    """Add a co-owner to a system."""
    system_id_obj = parse_id(SystemId, system_id, "system")
    user_id = parse_id(UserId, request.user_id, "user")
    try:
        view = await service.add_co_owner(
            actor=current_user, system_id=system_id_obj, user_id=user_id
        )
        return SystemResponse.from_view(view)
    except Exception as e:
        raise http_error(e, "Failed to add co-owner")


@router.delete(
    "/{system_id}/co-owners/{user_id}",
    response_model=SystemResponse,
    summary="Remove a co-owner",
)
async def remove_co_owner(
    system_id: str,
    user_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[SystemService, Depends(get_system_service)],
) -> SystemResponse:
    """Remove a co-owner from a system. Unknown co-owners are ignored."""
    system_id_obj = parse_id(SystemId, system_id, "system")
    user_id_obj = parse_id(UserId, user_id, "user")
    try:
        view = await service.remove_co_owner(
            actor=current_user, system_id=system_id_obj, user_id=user_id_obj
        )
        return SystemResponse.from_view(view)
    except Exception as e:
        raise http_error(e, "Failed to remove co-owner")
