"""Cache storage protocol.

Defines the capability interface for a key-value cache used as a
best-effort read-through layer in front of the user store.

A miss is reported with the CACHE_MISS sentinel. A backend failure is
reported by raising CacheError. Keeping the two apart lets callers
choose to degrade on failure instead of doing so by accident.
"""

import enum
from typing import Final, Literal, Protocol, runtime_checkable


class CacheMiss(enum.Enum):
    """Sentinel type returned by CacheStore.get for absent keys."""

    MISS = "miss"

    def __bool__(self) -> bool:
        return False


CACHE_MISS: Final = CacheMiss.MISS


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for cache backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        cache: CacheStore = RedisCache.create(settings)

        value = cache.get("all_users")
        if value is CACHE_MISS:
            ...
        ```
    """

    def get(self, key: str) -> str | Literal[CacheMiss.MISS]:
        """Fetch a value.

        Args:
            key: The cache key

        Returns:
            The stored string, or CACHE_MISS if the key is absent or expired

        Raises:
            CacheError: If the backend is unreachable or misbehaves
        """
        ...

    def set(self, key: str, value: str, ttl: int) -> None:
        """Store a value with a time-to-live.

        Args:
            key: The cache key
            value: Serialized value
            ttl: Time-to-live in seconds

        Raises:
            CacheError: If the backend rejects the write
        """
        ...

    def invalidate(self, key: str) -> None:
        """Delete a key. Deleting an absent key is not an error.

        Raises:
            CacheError: If the backend rejects the delete
        """
        ...

    def ping(self) -> None:
        """Verify the backend is reachable.

        Raises:
            CacheError: If the backend cannot be reached
        """
        ...

    def close(self) -> None:
        """Release the underlying connection."""
        ...
