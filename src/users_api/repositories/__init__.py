"""Repository layer for data access.

This layer abstracts external dependencies (PostgreSQL, Redis) behind
protocol-based interfaces. This enables:
- Easy swapping of implementations
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from users_api.protocols import CacheStore, UserStore

from .redis_cache import RedisCache
from .sql_user_repository import SqlUserRepository, metadata, users_table

__all__ = [
    "CacheStore",
    "UserStore",
    "RedisCache",
    "SqlUserRepository",
    "metadata",
    "users_table",
]
