"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .user_service import ALL_USERS_KEY, ALL_USERS_TTL, USER_TTL, UserService, user_cache_key

__all__ = [
    "ALL_USERS_KEY",
    "ALL_USERS_TTL",
    "USER_TTL",
    "UserService",
    "user_cache_key",
]
