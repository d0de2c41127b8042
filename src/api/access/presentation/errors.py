"""Mapping of access domain errors to HTTP responses."""

from __future__ import annotations

from typing import TypeVar

import structlog
from fastapi import HTTPException, status

from access.domain.value_objects import EntityId
from access.ports.exceptions import (
    ConflictError,
    EntityNotFoundError,
    UnauthorizedError,
)

logger = structlog.get_logger()

IdT = TypeVar("IdT", bound=EntityId)


def parse_id(id_type: type[IdT], value: str, label: str) -> IdT:
    """Parse a path or body identifier, answering 400 when malformed."""
    try:
        return id_type.from_string(value)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {label} ID format",
        )


def http_error(exc: Exception, failure: str) -> HTTPException:
    """Translate an exception raised by an access service.

    - EntityNotFoundError -> 404
    - UnauthorizedError -> 403
    - ConflictError and ValueError -> 400
    - HTTPException passes through unchanged
    - anything else -> 500 with ``failure`` as the detail

    Args:
        exc: The exception raised while serving the request
        failure: Generic detail for unexpected errors

    Returns:
        The HTTPException to raise
    """
    if isinstance(exc, HTTPException):
        return exc
    if isinstance(exc, EntityNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, UnauthorizedError):
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Insufficient permissions",
        )
    if isinstance(exc, (ConflictError, ValueError)):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

    logger.error("unexpected_error", failure=failure, error=str(exc), exc_info=exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=failure,
    )
