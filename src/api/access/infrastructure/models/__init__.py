"""SQLAlchemy ORM models for the access bounded context.

These models map to database tables and are used by repository implementations.
"""

from access.infrastructure.models.access_record import AccessRecordModel
from access.infrastructure.models.offboarding_request import OffboardingRequestModel
from access.infrastructure.models.system import SystemCoOwnerModel, SystemModel
from access.infrastructure.models.system_field import SystemFieldModel
from access.infrastructure.models.user import UserModel

__all__ = [
    "AccessRecordModel",
    "OffboardingRequestModel",
    "SystemCoOwnerModel",
    "SystemFieldModel",
    "SystemModel",
    "UserModel",
]
