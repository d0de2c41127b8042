"""Application services for the access bounded context.

Application services orchestrate domain aggregates and the entity store to
fulfill use cases. They are the "front door" to the access context.
"""

from access.application.services.access_service import AccessService
from access.application.services.authorization_service import AuthorizationService
from access.application.services.offboarding_service import OffboardingService
from access.application.services.system_field_service import SystemFieldService
from access.application.services.system_service import SystemService
from access.application.services.user_service import UserService

__all__ = [
    "AccessService",
    "AuthorizationService",
    "OffboardingService",
    "SystemFieldService",
    "SystemService",
    "UserService",
]
