"""Ports (interfaces) for the access bounded context.

Ports define the contracts for repositories without specifying
implementation details, keeping the domain and application layers
independent of infrastructure.
"""

from access.ports.exceptions import (
    AccessRecordNotFoundError,
    ConflictError,
    DuplicateAccessRecordError,
    DuplicateCoOwnerError,
    DuplicateSystemFieldNameError,
    DuplicateUserEmailError,
    EntityNotFoundError,
    OffboardingRequestNotFoundError,
    SystemFieldNotFoundError,
    SystemNotFoundError,
    UnauthorizedError,
    UserNotFoundError,
)
from access.ports.repositories import (
    IAccessRecordRepository,
    IEntityStore,
    IOffboardingRequestRepository,
    ISystemFieldRepository,
    ISystemRepository,
    IUserRepository,
)

__all__ = [
    "AccessRecordNotFoundError",
    "ConflictError",
    "DuplicateAccessRecordError",
    "DuplicateCoOwnerError",
    "DuplicateSystemFieldNameError",
    "DuplicateUserEmailError",
    "EntityNotFoundError",
    "IAccessRecordRepository",
    "IEntityStore",
    "IOffboardingRequestRepository",
    "ISystemFieldRepository",
    "ISystemRepository",
    "IUserRepository",
    "OffboardingRequestNotFoundError",
    "SystemFieldNotFoundError",
    "SystemNotFoundError",
    "UnauthorizedError",
    "UserNotFoundError",
]
