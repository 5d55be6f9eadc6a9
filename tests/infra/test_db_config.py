from __future__ import annotations

import pytest

from vehicle_registry.infra.db.config import (
    DEFAULT_MAX_OVERFLOW,
    DEFAULT_POOL_SIZE,
    PoolSettings,
    database_url,
    pool_settings,
)


def test_database_url_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://user:pw@localhost/vehicles")

    assert database_url() == "postgresql+psycopg://user:pw@localhost/vehicles"


def test_database_url_missing_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        database_url()


def test_pool_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "DATABASE_POOL_SIZE",
        "DATABASE_MAX_OVERFLOW",
        "DATABASE_POOL_RECYCLE",
        "DATABASE_ECHO",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = pool_settings()

    assert settings == PoolSettings()
    assert settings.pool_size == DEFAULT_POOL_SIZE
    assert settings.max_overflow == DEFAULT_MAX_OVERFLOW
    assert settings.echo is False


def test_pool_settings_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_POOL_SIZE", "3")
    monkeypatch.setenv("DATABASE_MAX_OVERFLOW", "0")
    monkeypatch.setenv("DATABASE_POOL_RECYCLE", "60")
    monkeypatch.setenv("DATABASE_ECHO", "true")

    assert pool_settings() == PoolSettings(pool_size=3, max_overflow=0, pool_recycle=60, echo=True)


def test_pool_settings_rejects_non_integer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_POOL_SIZE", "many")

    with pytest.raises(RuntimeError, match="DATABASE_POOL_SIZE"):
        pool_settings()
