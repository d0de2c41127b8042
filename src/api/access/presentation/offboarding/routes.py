"""Offboarding request routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from access.application.services import OffboardingService
from access.dependencies.offboarding import get_offboarding_service
from access.dependencies.user import get_current_user
from access.domain.aggregates import User
from access.domain.value_objects import (
    OffboardingRequestId,
    OffboardingStatus,
    SystemId,
    UserId,
)
from access.presentation.errors import http_error, parse_id
from access.presentation.offboarding.models import (
    CreateOffboardingRequest,
    OffboardingRequestResponse,
)

router = APIRouter(
    prefix="/offboarding-requests",
    tags=["offboarding"],
)


@router.post(
    "",
    response_model=OffboardingRequestResponse,
    status_code=status.HTTP_201_CREATED,
    summary="File an offboarding request",
    responses={
        400: {"description": "No systems given and all_systems unset"},
        404: {"description": "User or system not found"},
    },
)
async def create_offboarding_request(
    request: CreateOffboardingRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[OffboardingService, Depends(get_offboarding_service)],
) -> OffboardingRequestResponse:
    """File a pending request to remove a user's access."""
    user_id = parse_id(UserId, request.user_id, "user")
    # Listed systems are discarded when all_systems is set
    system_ids = (
        []
        if request.all_systems
        else [parse_id(SystemId, value, "system") for value in request.system_ids]
    )
    try:
        created = await service.create_request(
            actor=current_user,
            user_id=user_id,
            removal_date=request.removal_date,
            system_ids=system_ids,
            all_systems=request.all_systems,
            notes=request.notes,
        )
        return OffboardingRequestResponse.from_domain(created)
    except Exception as e:
        raise http_error(e, "Failed to create offboarding request")


@router.get(
    "",
    response_model=list[OffboardingRequestResponse],
    summary="List offboarding requests",
)
async def list_offboarding_requests(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[OffboardingService, Depends(get_offboarding_service)],
    status_filter: Annotated[
        OffboardingStatus | None, Query(alias="status", description="Status filter")
    ] = None,
) -> list[OffboardingRequestResponse]:
    """Requests the caller may see, newest first."""
    try:
        requests = await service.list_requests(actor=current_user, status=status_filter)
        return [OffboardingRequestResponse.from_domain(r) for r in requests]
    except Exception as e:
        raise http_error(e, "Failed to list offboarding requests")


@router.get(
    "/pending",
    response_model=list[OffboardingRequestResponse],
    summary="List pending offboarding requests",
)
async def list_pending_requests(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[OffboardingService, Depends(get_offboarding_service)],
) -> list[OffboardingRequestResponse]:
    try:
        requests = await service.pending_requests(actor=current_user)
        return [OffboardingRequestResponse.from_domain(r) for r in requests]
    except Exception as e:
        raise http_error(e, "Failed to list pending offboarding requests")


@router.get(
    "/{request_id}",
    response_model=OffboardingRequestResponse,
    summary="Get an offboarding request",
)
async def get_offboarding_request(
    request_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[OffboardingService, Depends(get_offboarding_service)],
) -> OffboardingRequestResponse:
    request_id_obj = parse_id(OffboardingRequestId, request_id, "offboarding request")
    try:
        found = await service.get_request(actor=current_user, request_id=request_id_obj)
        return OffboardingRequestResponse.from_domain(found)
    except Exception as e:
        raise http_error(e, "Failed to get offboarding request")


@router.post(
    "/{request_id}/complete",
    response_model=OffboardingRequestResponse,
    summary="Complete an offboarding request",
    description="""
Marks the request completed and, when configured, revokes the user's access
to the covered systems. Completing an already completed request changes
nothing. Administrators only.
""",
)
async def complete_offboarding_request(
    request_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[OffboardingService, Depends(get_offboarding_service)],
) -> OffboardingRequestResponse:
    request_id_obj = parse_id(OffboardingRequestId, request_id, "offboarding request")
    try:
        completed = await service.complete_request(
            actor=current_user, request_id=request_id_obj
        )
        return OffboardingRequestResponse.from_domain(completed)
    except Exception as e:
        raise http_error(e, "Failed to complete offboarding request")
