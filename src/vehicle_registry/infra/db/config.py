from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_POOL_SIZE = 10
DEFAULT_MAX_OVERFLOW = 20
DEFAULT_POOL_RECYCLE_SECONDS = 3600


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True, slots=True)
class PoolSettings:
    """Connection pool settings, overridable through DATABASE_* variables."""

    pool_size: int = DEFAULT_POOL_SIZE
    max_overflow: int = DEFAULT_MAX_OVERFLOW
    pool_recycle: int = DEFAULT_POOL_RECYCLE_SECONDS
    echo: bool = False


def pool_settings() -> PoolSettings:
    return PoolSettings(
        pool_size=_int_env("DATABASE_POOL_SIZE", DEFAULT_POOL_SIZE),
        max_overflow=_int_env("DATABASE_MAX_OVERFLOW", DEFAULT_MAX_OVERFLOW),
        pool_recycle=_int_env("DATABASE_POOL_RECYCLE", DEFAULT_POOL_RECYCLE_SECONDS),
        echo=os.getenv("DATABASE_ECHO", "").lower() in ("1", "true", "yes"),
    )
