"""Users API - users CRUD service with a read-through cache.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (UserStore, CacheStore)
    - repositories: Data access implementations (SQLAlchemy, Redis)
    - services: Business logic (read-through, invalidate-on-write)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from users_api import UserService, UserHandler, create_app

    service = UserService(store=store, cache=cache)
    app = create_app(UserHandler(service), resources=(store, cache))
    ```

Run the server with ``users-api`` or ``python -m users_api``.
"""

from users_api.api import build_router, create_app
from users_api.config import Settings, get_settings
from users_api.dto import CreateUserRequest, UserResponse
from users_api.entities import UserEntity
from users_api.errors import CacheError, UserNotFoundError, UsersApiError, UserValidationError
from users_api.handlers import UserHandler
from users_api.protocols import CACHE_MISS, CacheStore, UserStore
from users_api.repositories import RedisCache, SqlUserRepository
from users_api.services import UserService

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    # Protocols (interfaces)
    "CACHE_MISS",
    "CacheStore",
    "UserStore",
    # Services (business logic)
    "UserService",
    # Handlers and app (HTTP)
    "UserHandler",
    "build_router",
    "create_app",
    # Repositories (data access)
    "RedisCache",
    "SqlUserRepository",
    # Entities (domain models)
    "UserEntity",
    # DTOs (API contracts)
    "CreateUserRequest",
    "UserResponse",
    # Errors
    "UsersApiError",
    "UserValidationError",
    "UserNotFoundError",
    "CacheError",
]
