"""User routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from access.application.services import AccessService, UserService
from access.application.value_objects import SortField
from access.dependencies.access import get_access_service
from access.dependencies.user import get_current_user, get_user_service
from access.domain.aggregates import User
from access.domain.value_objects import UserId
from access.presentation.errors import http_error, parse_id
from access.presentation.models import (
    SystemAccessListResponse,
    SystemAccessResponse,
    UserResponse,
)
from access.presentation.users.models import CreateUserRequest

router = APIRouter(
    prefix="/users",
    tags=["users"],
)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
    responses={
        400: {"description": "Invalid input or email already registered"},
        403: {"description": "Only administrators can register users"},
    },
)
async def create_user(
    request: CreateUserRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Register a user. Administrators only."""
    try:
        user = await service.create_user(
            actor=current_user,
            name=request.name,
            email=request.email,
            department=request.department,
            role=request.role,
        )
        return UserResponse.from_domain(user)
    except Exception as e:
        raise http_error(e, "Failed to create user")


@router.get(
    "",
    response_model=list[UserResponse],
    summary="List users",
)
async def list_users(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
    search: Annotated[str | None, Query(description="Name, email or department")] = None,
) -> list[UserResponse]:
    """List users ordered by name."""
    try:
        users = await service.list_users(search=search)
        return [UserResponse.from_domain(user) for user in users]
    except Exception as e:
        raise http_error(e, "Failed to list users")


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user by ID",
)
async def get_user(
    user_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Get a user."""
    user_id_obj = parse_id(UserId, user_id, "user")
    try:
        return UserResponse.from_domain(await service.get_user(user_id_obj))
    except Exception as e:
        raise http_error(e, "Failed to get user")


@router.get(
    "/{user_id}/systems",
    response_model=SystemAccessListResponse,
    summary="List the systems a user has access to",
    description="""
Users may list their own access; administrators may list anyone's. `search`
matches system name, description and role; `category` accepts `All`.
""",
)
async def list_user_systems(
    user_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[AccessService, Depends(get_access_service)],
    search: Annotated[str | None, Query(description="Search text")] = None,
    category: Annotated[str | None, Query(description="Category or All")] = None,
    sort: Annotated[SortField, Query(description="Sort field")] = SortField.NAME,
    descending: Annotated[bool, Query(description="Reverse the order")] = False,
) -> SystemAccessListResponse:
    """List a user's systems."""
    user_id_obj = parse_id(UserId, user_id, "user")
    try:
        entries = await service.list_user_systems(
            actor=current_user,
            user_id=user_id_obj,
            search=search,
            category=category,
            sort=sort,
            descending=descending,
        )
        return SystemAccessListResponse(
            systems=[SystemAccessResponse.from_view(entry) for entry in entries],
            count=len(entries),
        )
    except Exception as e:
        raise http_error(e, "Failed to list user systems")
