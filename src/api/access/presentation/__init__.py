"""Access presentation layer, one package per aggregate.

Every endpoint resolves the caller from the X-User-ID header through its own
Depends(get_current_user); the router itself carries no dependencies.
"""

from __future__ import annotations

from fastapi import APIRouter

from access.presentation import (
    access_records,
    fields,
    me,
    members,
    offboarding,
    systems,
    users,
)

router = APIRouter(
    prefix="/access",
    tags=["access"],
)

router.include_router(me.router)
router.include_router(users.router)
router.include_router(systems.router)
router.include_router(members.router)
router.include_router(fields.router)
router.include_router(access_records.router)
router.include_router(offboarding.router)

__all__ = ["router"]
