"""Domain-Oriented Observability for the access application layer.

Probes for application service operations following Domain-Oriented Observability patterns.
"""

from access.application.observability.access_service_probe import (
    AccessServiceProbe,
    DefaultAccessServiceProbe,
)
from access.application.observability.offboarding_service_probe import (
    DefaultOffboardingServiceProbe,
    OffboardingServiceProbe,
)
from access.application.observability.system_service_probe import (
    DefaultSystemServiceProbe,
    SystemServiceProbe,
)
from access.application.observability.user_service_probe import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)

__all__ = [
    "AccessServiceProbe",
    "DefaultAccessServiceProbe",
    "OffboardingServiceProbe",
    "DefaultOffboardingServiceProbe",
    "SystemServiceProbe",
    "DefaultSystemServiceProbe",
    "UserServiceProbe",
    "DefaultUserServiceProbe",
]
