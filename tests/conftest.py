"""Pytest configuration and fixtures for the users API.

The store runs on in-memory SQLite through the real SqlUserRepository.
The cache is an in-memory CacheStore that can be switched to failing.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from users_api.api import create_app
from users_api.errors import CacheError
from users_api.handlers import UserHandler
from users_api.protocols import CACHE_MISS
from users_api.repositories import SqlUserRepository
from users_api.services import UserService


class InMemoryCache:
    """CacheStore backed by a dict. TTLs are recorded, not enforced."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.ttls: dict[str, int] = {}
        self.failing = False

    def _check(self) -> None:
        if self.failing:
            raise CacheError("cache unavailable")

    def get(self, key: str):
        self._check()
        return self.data.get(key, CACHE_MISS)

    def set(self, key: str, value: str, ttl: int) -> None:
        self._check()
        self.data[key] = value
        self.ttls[key] = ttl

    def invalidate(self, key: str) -> None:
        self._check()
        self.data.pop(key, None)
        self.ttls.pop(key, None)

    def ping(self) -> None:
        self._check()

    def close(self) -> None:
        pass


@pytest.fixture
def store():
    """SqlUserRepository on a fresh in-memory SQLite database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    repository = SqlUserRepository(engine)
    repository.create_schema()
    yield repository
    repository.close()


@pytest.fixture
def store_spy(store):
    """Pass-through mock around the store that records calls."""
    return MagicMock(wraps=store)


@pytest.fixture
def cache():
    return InMemoryCache()


@pytest.fixture
def service(store_spy, cache):
    return UserService(store=store_spy, cache=cache)


@pytest.fixture
def client(service):
    """Create a test client."""
    app = create_app(UserHandler(user_service=service))
    return TestClient(app)
