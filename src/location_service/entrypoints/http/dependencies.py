"""
Dependency injection for FastAPI routes.

Key principle: Database sessions are per-request. The location cache is the
only process-wide object; it is built once on first use and shared by every
request.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Generator

from fastapi import Depends
from redis import Redis
from sqlalchemy.orm import Session

from location_service.adapters.in_memory_location_cache import InMemoryLocationCache
from location_service.adapters.postgres_location_repository import PostgresLocationRepository
from location_service.adapters.redis_location_cache import RedisLocationCache
from location_service.infra.config import cache_ttl, redis_url
from location_service.infra.db.session import get_session
from location_service.ports.location_cache import LocationCache
from location_service.ports.location_repository import LocationRepository
from location_service.use_cases.create_location import CreateLocation
from location_service.use_cases.delete_location import DeleteLocation
from location_service.use_cases.get_all_locations import GetAllLocations
from location_service.use_cases.get_location_by_id import GetLocationById
from location_service.use_cases.refresh_location_cache import RefreshLocationCache
from location_service.use_cases.update_location import UpdateLocation

logger = logging.getLogger(__name__)


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() commits on success, rolls back on
    exception and always closes the session.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


@lru_cache(maxsize=1)
def get_location_cache() -> LocationCache:
    """
    Process-wide location cache.

    Redis when REDIS_URL is set, otherwise an in-process TTL cache.
    """
    url = redis_url()
    if url:
        logger.info("Using Redis location cache")
        return RedisLocationCache(Redis.from_url(url, socket_connect_timeout=5))

    logger.info("Using in-memory location cache")
    return InMemoryLocationCache()


def get_location_repository(db: Session = Depends(get_db)) -> LocationRepository:
    return PostgresLocationRepository(session=db)


def get_cache_refresher(
    repository: LocationRepository = Depends(get_location_repository),
    cache: LocationCache = Depends(get_location_cache),
) -> RefreshLocationCache:
    return RefreshLocationCache(
        location_repository=repository,
        location_cache=cache,
        ttl=cache_ttl(),
    )


def get_create_location_use_case(
    repository: LocationRepository = Depends(get_location_repository),
    cache_refresher: RefreshLocationCache = Depends(get_cache_refresher),
) -> CreateLocation:
    return CreateLocation(location_repository=repository, cache_refresher=cache_refresher)


def get_get_location_by_id_use_case(
    cache_refresher: RefreshLocationCache = Depends(get_cache_refresher),
) -> GetLocationById:
    return GetLocationById(cache_refresher=cache_refresher)


def get_get_all_locations_use_case(
    cache_refresher: RefreshLocationCache = Depends(get_cache_refresher),
) -> GetAllLocations:
    return GetAllLocations(cache_refresher=cache_refresher)


def get_update_location_use_case(
    repository: LocationRepository = Depends(get_location_repository),
    cache_refresher: RefreshLocationCache = Depends(get_cache_refresher),
) -> UpdateLocation:
    return UpdateLocation(location_repository=repository, cache_refresher=cache_refresher)


def get_delete_location_use_case(
    repository: LocationRepository = Depends(get_location_repository),
    cache_refresher: RefreshLocationCache = Depends(get_cache_refresher),
) -> DeleteLocation:
    return DeleteLocation(location_repository=repository, cache_refresher=cache_refresher)
