"""Error taxonomy shared by the service and handler layers.

Validation and not-found errors map to 4xx responses. Anything else
that escapes the service is reported as a 500. CacheError never leaves
the service layer: cache failures degrade to a miss or a no-op.
"""


class UsersApiError(Exception):
    """Base class for errors raised by the users API."""


class UserValidationError(UsersApiError):
    """Required input is missing or malformed. Raised before any store access."""


class UserNotFoundError(UsersApiError):
    """The store has no row for the requested identifier."""

    def __init__(self, message: str = "user not found") -> None:
        super().__init__(message)


class CacheError(UsersApiError):
    """The cache backend could not complete an operation."""
