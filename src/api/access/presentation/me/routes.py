"""Routes for the caller's own profile, dashboard and access."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from access.application.services import AccessService
from access.application.value_objects import SortField
from access.dependencies.access import get_access_service
from access.dependencies.user import get_current_user
from access.domain.aggregates import User
from access.presentation.errors import http_error
from access.presentation.me.models import DashboardResponse
from access.presentation.models import (
    SystemAccessListResponse,
    SystemAccessResponse,
    UserResponse,
)

router = APIRouter(
    prefix="/me",
    tags=["me"],
)


@router.get("", response_model=UserResponse, summary="Get the calling user")
async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
) -> UserResponse:
    """Return the caller as resolved from X-User-ID."""
    return UserResponse.from_domain(current_user)


@router.get(
    "/dashboard",
    response_model=DashboardResponse,
    summary="Get the caller's dashboard",
)
async def get_dashboard(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[AccessService, Depends(get_access_service)],
) -> DashboardResponse:
    """Owned, assigned and (for administrators) other systems."""
    try:
        return DashboardResponse.from_domain(await service.dashboard(current_user))
    except Exception as e:
        raise http_error(e, "Failed to build dashboard")


@router.get(
    "/systems",
    response_model=SystemAccessListResponse,
    summary="List the caller's systems",
)
async def list_my_systems(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[AccessService, Depends(get_access_service)],
    search: Annotated[str | None, Query(description="Search text")] = None,
    category: Annotated[str | None, Query(description="Category or All")] = None,
    sort: Annotated[SortField, Query(description="Sort field")] = SortField.NAME,
    descending: Annotated[bool, Query(description="Reverse the order")] = False,
) -> SystemAccessListResponse:
    """The "my access" view."""
    try:
        entries = await service.list_user_systems(
            actor=current_user,
            user_id=current_user.id,
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
        raise http_error(e, "Failed to list systems")
