"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request decoding and response serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import CreateUserRequest
from .responses import ErrorResponse, HealthResponse, UserResponse

__all__ = [
    "CreateUserRequest",
    "UserResponse",
    "ErrorResponse",
    "HealthResponse",
]
