"""User service for core business logic.

This service implements the read-through path for user records:
check the cache, on a miss query the store and populate the cache,
and invalidate on write. The store is always the source of truth.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import TypeVar

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.exc import SQLAlchemyError

from users_api.entities import UserEntity
from users_api.errors import CacheError, UserNotFoundError, UsersApiError, UserValidationError
from users_api.protocols import CACHE_MISS, CacheStore, UserStore

logger = logging.getLogger(__name__)

ALL_USERS_KEY = "all_users"
USER_KEY_PREFIX = "user:"

ALL_USERS_TTL = 5 * 60
USER_TTL = 10 * 60

_user_adapter = TypeAdapter(UserEntity)
_user_list_adapter = TypeAdapter(list[UserEntity])

T = TypeVar("T")


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def user_cache_key(user_id: str) -> str:
    """Build the per-user cache key."""
    return f"{USER_KEY_PREFIX}{user_id}"


class UserService:
    """Read-through orchestration for user records.

    This service depends on PROTOCOLS, not concrete implementations:
    - UserStore: PostgreSQL in production, SQLite in tests
    - CacheStore: Redis in production, in-memory fakes in tests

    Cache failures never surface to callers. A failed or undecodable
    read is a miss; a failed write or invalidation is a no-op.

    Example:
        ```python
        service = UserService(
            store=SqlUserRepository.create(settings),
            cache=RedisCache.create(settings),
        )
        users = service.list_users()
        ```
    """

    def __init__(
        self,
        store: UserStore,
        cache: CacheStore,
        clock: Callable[[], datetime] = _now_utc,
    ) -> None:
        """Initialize the user service.

        Args:
            store: Relational store of record (required).
            cache: Best-effort cache (required).
            clock: Source of creation timestamps. Defaults to UTC now.
        """
        self._store = store
        self._cache = cache
        self._clock = clock

    def list_users(self) -> list[UserEntity]:
        """Return all users, served from cache when possible.

        Empty results are not cached so a fresh store is re-queried
        on every call until it has rows.

        Returns:
            List of users ordered by id (possibly empty, never None)
        """
        cached = self._read_cache(ALL_USERS_KEY, _user_list_adapter)
        if cached is not None:
            return cached

        users = self._store.list_all()
        if users:
            self._write_cache(ALL_USERS_KEY, _user_list_adapter.dump_json(users), ALL_USERS_TTL)
        return users

    def get_user(self, user_id: str | None) -> UserEntity:
        """Return one user by identifier.

        Args:
            user_id: Identifier as received from the caller

        Returns:
            The matching user

        Raises:
            UserValidationError: If user_id is empty or not an integer
            UserNotFoundError: If no row has that identifier
        """
        if not user_id:
            raise UserValidationError("id parameter is required")

        try:
            numeric_id = int(user_id)
        except ValueError:
            raise UserValidationError("id must be an integer") from None

        key = user_cache_key(user_id)
        cached = self._read_cache(key, _user_adapter)
        if cached is not None:
            return cached

        user = self._store.get_by_id(numeric_id)
        if user is None:
            raise UserNotFoundError()

        self._write_cache(key, _user_adapter.dump_json(user), USER_TTL)
        return user

    def create_user(self, user: UserEntity) -> UserEntity:
        """Insert a user and invalidate the cached list.

        The store-assigned id and the creation timestamp are written
        back onto ``user``, which is also returned.

        Args:
            user: Entity carrying name and email

        Returns:
            The same entity, fully populated

        Raises:
            UserValidationError: If name or email is empty
            UsersApiError: If the store rejects the insert
        """
        if not user.name or not user.email:
            raise UserValidationError("name and email are required")

        now = self._clock()
        try:
            user.id = self._store.insert(user.name, user.email, now)
        except SQLAlchemyError as e:
            raise UsersApiError(f"failed to create user: {e}") from e

        user.created_at = now
        user.updated_at = now
        logger.info("Created user %s", user.id)

        try:
            self._cache.invalidate(ALL_USERS_KEY)
        except CacheError as e:
            logger.warning("Cache invalidation failed: %s", e)

        return user

    def _read_cache(self, key: str, adapter: TypeAdapter[T]) -> T | None:
        """Look up and decode a cached value; None means fall back to the store."""
        try:
            raw = self._cache.get(key)
        except CacheError as e:
            logger.warning("Cache read failed, falling back to store: %s", e)
            return None

        if raw is CACHE_MISS:
            logger.debug("Cache miss: %s", key)
            return None

        try:
            value = adapter.validate_json(raw)
        except ValidationError:
            logger.warning("Discarding undecodable cache entry: %s", key)
            return None

        logger.debug("Cache hit: %s", key)
        return value

    def _write_cache(self, key: str, payload: bytes, ttl: int) -> None:
        try:
            self._cache.set(key, payload.decode(), ttl)
        except CacheError as e:
            logger.warning("Cache write failed: %s", e)

    @property
    def store(self) -> UserStore:
        """Get the underlying store (for testing)."""
        return self._store

    @property
    def cache(self) -> CacheStore:
        """Get the underlying cache (for testing)."""
        return self._cache
