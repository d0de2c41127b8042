"""Domain aggregates for the access context.

Aggregates are the core business objects containing state and business logic.
They enforce invariants and business rules without depending on infrastructure.
"""

from access.domain.aggregates.access_record import AccessRecord
from access.domain.aggregates.offboarding_request import OffboardingRequest
from access.domain.aggregates.system import System
from access.domain.aggregates.system_field import SystemField
from access.domain.aggregates.user import User

__all__ = [
    "AccessRecord",
    "OffboardingRequest",
    "System",
    "SystemField",
    "User",
]
