"""
Tests for the read-through user service.
"""

from datetime import datetime, timezone

import pytest

from users_api.entities import UserEntity
from users_api.errors import UserNotFoundError, UsersApiError, UserValidationError
from users_api.services import ALL_USERS_KEY, ALL_USERS_TTL, USER_TTL, UserService, user_cache_key


def _create(service, name="Alice", email="alice@example.com"):
    return service.create_user(UserEntity(name=name, email=email))


def test_create_populates_record(service):
    user = UserEntity(name="Charlie", email="charlie@example.com")

    result = service.create_user(user)

    assert result is user
    assert user.id > 0
    assert user.created_at is not None
    assert user.created_at == user.updated_at


def test_create_uses_clock(store, cache):
    fixed = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    service = UserService(store=store, cache=cache, clock=lambda: fixed)

    user = _create(service)

    assert user.created_at == fixed
    assert user.updated_at == fixed


def test_create_assigns_increasing_ids(service):
    first = _create(service, "A", "a@example.com")
    second = _create(service, "B", "b@example.com")
    assert second.id > first.id


@pytest.mark.parametrize(
    "name,email",
    [("", "x@example.com"), ("X", ""), ("", "")],
)
def test_create_requires_name_and_email(service, store_spy, name, email):
    with pytest.raises(UserValidationError, match="name and email are required"):
        service.create_user(UserEntity(name=name, email=email))

    store_spy.insert.assert_not_called()
    assert store_spy.list_all() == []


def test_create_wraps_store_failure(service):
    _create(service)
    with pytest.raises(UsersApiError, match="failed to create user"):
        _create(service, name="Other")


def test_create_invalidates_list(service, cache):
    _create(service)
    service.list_users()
    assert ALL_USERS_KEY in cache.data

    _create(service, "Bob", "bob@example.com")

    assert ALL_USERS_KEY not in cache.data
    assert [u.name for u in service.list_users()] == ["Alice", "Bob"]


def test_create_ignores_invalidation_failure(service, cache):
    cache.failing = True
    user = _create(service)
    assert user.id > 0


def test_list_empty_is_not_cached(service, cache):
    assert service.list_users() == []
    assert ALL_USERS_KEY not in cache.data


def test_list_populates_cache(service, cache, store_spy):
    _create(service)

    first = service.list_users()
    second = service.list_users()

    assert cache.ttls[ALL_USERS_KEY] == ALL_USERS_TTL
    assert store_spy.list_all.call_count == 1
    assert [u.email for u in second] == [u.email for u in first]


def test_list_treats_bad_cache_entry_as_miss(service, cache, store_spy):
    _create(service)
    cache.data[ALL_USERS_KEY] = "not json"

    users = service.list_users()

    assert [u.name for u in users] == ["Alice"]
    store_spy.list_all.assert_called_once()


def test_list_falls_back_when_cache_down(service, cache):
    _create(service)
    cache.failing = True

    assert [u.name for u in service.list_users()] == ["Alice"]


def test_get_requires_id(service, store_spy):
    for empty in ("", None):
        with pytest.raises(UserValidationError, match="id parameter is required"):
            service.get_user(empty)
    store_spy.get_by_id.assert_not_called()


def test_get_rejects_non_integer_id(service, store_spy):
    with pytest.raises(UserValidationError, match="id must be an integer"):
        service.get_user("abc")
    store_spy.get_by_id.assert_not_called()


def test_get_not_found(service):
    with pytest.raises(UserNotFoundError, match="user not found"):
        service.get_user("999")


def test_get_caches_user(service, cache, store_spy):
    user = _create(service)
    key = user_cache_key(str(user.id))

    service.get_user(str(user.id))
    cached = service.get_user(str(user.id))

    assert cache.ttls[key] == USER_TTL
    assert store_spy.get_by_id.call_count == 1
    assert cached.name == "Alice"
    assert cached.email == "alice@example.com"


def test_get_round_trip(service, cache):
    user = _create(service, "Heidi", "heidi@example.com")
    cache.data.clear()

    fetched = service.get_user(str(user.id))

    assert fetched.id == user.id
    assert fetched.name == "Heidi"
    assert fetched.email == "heidi@example.com"


def test_get_falls_back_when_cache_down(service, cache):
    user = _create(service)
    cache.failing = True

    assert service.get_user(str(user.id)).id == user.id
