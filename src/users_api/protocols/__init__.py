"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis -> in-memory, PostgreSQL -> SQLite)
- Unit testing with fake implementations
- Clear separation of concerns
"""

from .cache_store import CACHE_MISS, CacheMiss, CacheStore
from .user_store import UserStore

__all__ = [
    "CACHE_MISS",
    "CacheMiss",
    "CacheStore",
    "UserStore",
]
