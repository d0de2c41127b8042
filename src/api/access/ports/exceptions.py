"""Domain exceptions for the access bounded context.

These exceptions represent domain-level errors raised by repositories and
application services. The presentation layer maps them to HTTP responses.
"""


class EntityNotFoundError(Exception):
    """Raised when a referenced entity does not exist."""

    pass


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user cannot be found."""

    pass


class SystemNotFoundError(EntityNotFoundError):
    """Raised when a system cannot be found."""

    pass


class AccessRecordNotFoundError(EntityNotFoundError):
    """Raised when an access record cannot be found."""

    pass


class OffboardingRequestNotFoundError(EntityNotFoundError):
    """Raised when an offboarding request cannot be found."""

    pass


class SystemFieldNotFoundError(EntityNotFoundError):
    """Raised when a custom field cannot be found on a system."""

    pass


class UnauthorizedError(Exception):
    """Raised when a user lacks permission to perform an operation.

    This exception indicates that authorization checks have failed.
    The presentation layer returns HTTP 403 without exposing internal
    details.
    """

    pass


class ConflictError(Exception):
    """Raised when an operation would violate a uniqueness rule."""

    pass


class DuplicateAccessRecordError(ConflictError):
    """Raised when a user already has access to a system.

    At most one access record exists per (user, system) pair.
    """

    pass


class DuplicateSystemFieldNameError(ConflictError):
    """Raised when a field name is already used on the same system."""

    pass


class DuplicateUserEmailError(ConflictError):
    """Raised when creating a user with an email that is already registered."""

    pass


class DuplicateCoOwnerError(ConflictError):
    """Raised when adding a co-owner who already owns or co-owns the system."""

    pass
