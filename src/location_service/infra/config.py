"""Environment-driven settings for the infrastructure adapters."""

from __future__ import annotations

import os
from datetime import timedelta

from location_service.ports.location_cache import DEFAULT_CACHE_TTL


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def redis_url() -> str | None:
    """Redis connection URL, or None to keep the cache in process."""
    return os.getenv("REDIS_URL") or None


def cache_ttl() -> timedelta:
    raw = os.getenv("LOCATION_CACHE_TTL_MINUTES")
    if not raw:
        return DEFAULT_CACHE_TTL

    try:
        minutes = int(raw)
    except ValueError:
        raise RuntimeError("LOCATION_CACHE_TTL_MINUTES must be an integer") from None

    if minutes <= 0:
        raise RuntimeError("LOCATION_CACHE_TTL_MINUTES must be > 0")

    return timedelta(minutes=minutes)
