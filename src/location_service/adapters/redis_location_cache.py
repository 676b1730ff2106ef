"""Redis implementation of LocationCache."""

from __future__ import annotations

from datetime import timedelta
from typing import Any

import orjson
from redis import Redis

from location_service.domain.location import Location, Seat
from location_service.ports.location_cache import DEFAULT_CACHE_TTL, LocationCache


class RedisLocationCache(LocationCache):
    """
    Redis implementation of LocationCache.

    - Stores each list as one JSON document (orjson) under the given key
    - Expiry is delegated to Redis (SET ... EX)
    - Redis errors propagate; use cases treat them as infrastructure failures
    """

    def __init__(self, client: Redis, key_prefix: str = "location_service:") -> None:
        """
        Args:
            client: Connected Redis client
            key_prefix: Namespace prepended to every cache key
        """
        self._client = client
        self._key_prefix = key_prefix

    def get(self, key: str) -> list[Location] | None:
        payload = self._client.get(self._key(key))
        if payload is None:
            return None
        return [self._to_domain(item) for item in orjson.loads(payload)]

    def set(
        self, key: str, locations: list[Location], ttl: timedelta = DEFAULT_CACHE_TTL
    ) -> list[Location]:
        redis_key = self._key(key)
        # Dataclasses serialize natively; seat tuples become JSON arrays
        payload = orjson.dumps(locations)

        with self._client.pipeline(transaction=True) as pipe:
            pipe.delete(redis_key)
            pipe.set(redis_key, payload, ex=ttl)
            pipe.execute()

        return locations

    def _key(self, key: str) -> str:
        return f"{self._key_prefix}{key}"

    @staticmethod
    def _to_domain(item: dict[str, Any]) -> Location:
        return Location(
            id=item["id"],
            name=item["name"],
            street_name=item["street_name"],
            postal_code=item["postal_code"],
            city=item["city"],
            seats=tuple(Seat(**seat) for seat in item["seats"]),
        )
