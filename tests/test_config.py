"""
Tests for environment-driven settings.
"""

import pytest

from users_api.config import Settings

ENV_VARS = (
    "DB_HOST",
    "DB_PORT",
    "DB_USER",
    "DB_PASSWORD",
    "DB_NAME",
    "REDIS_HOST",
    "REDIS_PORT",
    "API_HOST",
    "PORT",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings()
    assert settings.db_host == "localhost"
    assert settings.db_port == 5432
    assert settings.db_user == "postgres"
    assert settings.db_name == "api_db"
    assert settings.redis_host == "localhost"
    assert settings.redis_port == 6379
    assert settings.port == 8080
    assert settings.log_level == "INFO"


def test_reads_environment(clean_env):
    clean_env.setenv("DB_HOST", "db.internal")
    clean_env.setenv("REDIS_PORT", "6380")
    clean_env.setenv("PORT", "9000")
    clean_env.setenv("LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.db_host == "db.internal"
    assert settings.redis_port == 6380
    assert settings.port == 9000
    assert settings.log_level == "DEBUG"


def test_settings_are_immutable(clean_env):
    settings = Settings()
    with pytest.raises(AttributeError):
        settings.port = 1  # type: ignore[misc]


def test_database_url(clean_env):
    clean_env.setenv("DB_PASSWORD", "p@ss")
    url = Settings().database_url

    assert url.drivername == "postgresql+psycopg"
    assert url.password == "p@ss"
    assert url.database == "api_db"
    assert url.port == 5432


@pytest.mark.parametrize("name,value", [("PORT", "0"), ("DB_PORT", "70000")])
def test_rejects_bad_port(clean_env, name, value):
    clean_env.setenv(name, value)
    with pytest.raises(ValueError):
        Settings()


def test_rejects_bad_log_level(clean_env):
    clean_env.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Settings()
