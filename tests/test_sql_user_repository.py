"""
Tests for the SQLAlchemy user store, run against in-memory SQLite.
"""

from datetime import datetime, timezone

from sqlalchemy import inspect

from users_api.protocols import UserStore

NOW = datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone.utc)


def test_satisfies_protocol(store):
    assert isinstance(store, UserStore)


def test_ping(store):
    store.ping()


def test_schema_has_email_index(store):
    indexes = inspect(store.engine).get_indexes("users")
    assert any(index["column_names"] == ["email"] for index in indexes)


def test_insert_and_get(store):
    user_id = store.insert("Ivan", "ivan@example.com", NOW)

    user = store.get_by_id(user_id)

    assert user is not None
    assert user.id == user_id
    assert user.name == "Ivan"
    assert user.email == "ivan@example.com"
    assert user.created_at == user.updated_at


def test_get_missing(store):
    assert store.get_by_id(12345) is None


def test_list_all_ordered_by_id(store):
    ids = [
        store.insert("Zed", "zed@example.com", NOW),
        store.insert("Amy", "amy@example.com", NOW),
    ]

    users = store.list_all()

    assert [u.id for u in users] == sorted(ids)
    assert [u.name for u in users] == ["Zed", "Amy"]


def test_create_schema_is_idempotent(store):
    store.create_schema()
    assert store.list_all() == []
