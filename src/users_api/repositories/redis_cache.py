"""Redis implementation of CacheStore.

Plain string GET/SET/DEL with per-key TTLs. Every redis-py failure is
re-raised as CacheError so the service can tell a failure from a miss.
"""

import logging
from typing import Literal

import redis

from users_api.config import Settings, get_redis_client
from users_api.errors import CacheError
from users_api.protocols import CACHE_MISS, CacheMiss

logger = logging.getLogger(__name__)


class RedisCache:
    """Redis implementation of the CacheStore protocol.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    The client is expected to be created with decode_responses=True so
    that values come back as str.
    """

    def __init__(self, redis_client: redis.Redis) -> None:
        """Initialize the Redis cache.

        Args:
            redis_client: Redis client instance (required).
        """
        self._client = redis_client

    @classmethod
    def create(cls, settings: Settings) -> "RedisCache":
        """Factory method to create RedisCache from settings.

        Args:
            settings: Application settings with redis_host/redis_port.

        Returns:
            Configured RedisCache (not yet pinged)
        """
        return cls(redis_client=get_redis_client(settings))

    def get(self, key: str) -> str | Literal[CacheMiss.MISS]:
        try:
            value = self._client.get(key)
        except redis.RedisError as e:
            raise CacheError(f"cache get {key!r} failed: {e}") from e

        if value is None:
            return CACHE_MISS
        return value  # type: ignore[return-value]

    def set(self, key: str, value: str, ttl: int) -> None:
        try:
            self._client.set(key, value, ex=ttl)
        except redis.RedisError as e:
            raise CacheError(f"cache set {key!r} failed: {e}") from e

    def invalidate(self, key: str) -> None:
        try:
            self._client.delete(key)
        except redis.RedisError as e:
            raise CacheError(f"cache delete {key!r} failed: {e}") from e

    def ping(self) -> None:
        """Check that Redis is reachable.

        Raises:
            CacheError: If the server does not answer the PING
        """
        try:
            self._client.ping()
        except redis.RedisError as e:
            raise CacheError(f"failed to connect to Redis: {e}") from e
        logger.info("Connected to Redis")

    def close(self) -> None:
        self._client.close()
