"""Redis implementation of CacheStore.

Each entry is a hash with the serialized payload and the time it was
stored. Redis expires the key natively after the TTL; the stored timestamp
lets reads enforce a shorter TTL than the one the entry was written with.
"""

import json
import time
from typing import Any

import redis

from news_proxy.config import get_redis_client, settings
from news_proxy.entities import CacheLookup, CacheWrite
from news_proxy.logging_config import get_logger

logger = get_logger(__name__)


class RedisCacheRepository:
    """Redis-backed cache store.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    Connection and protocol errors never escape: reads become misses and
    writes become failed results.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        prefix: str | None = None,
        ttl: int | None = None,
    ) -> None:
        """Initialize the Redis cache repository.

        Args:
            redis_client: Redis client instance. If None, creates default.
            prefix: Key namespace prefix.
            ttl: Native expiry for written entries in seconds.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = prefix or settings.cache_key_prefix
        self._ttl = ttl or settings.cache_ttl

    @classmethod
    def create(
        cls,
        prefix: str | None = None,
        ttl: int | None = None,
    ) -> "RedisCacheRepository":
        """Factory method to create RedisCacheRepository with defaults.

        Args:
            prefix: Key namespace prefix. If None, uses settings.
            ttl: Entry TTL in seconds. If None, uses settings.

        Returns:
            Configured RedisCacheRepository
        """
        return cls(prefix=prefix, ttl=ttl)

    def _key(self, key: str) -> str:
        return f"{self._prefix}:{key}"

    def get(self, key: str, ttl: int) -> CacheLookup:
        try:
            entry = self._client.hgetall(self._key(key))
        except redis.RedisError as e:
            logger.warning("cache_read_failed", key=key, error=str(e))
            return CacheLookup.miss(f"error: {e}")

        if not entry:
            return CacheLookup.miss("absent")

        try:
            stored_at = float(entry[b"timestamp"])
            payload = json.loads(entry[b"payload"])
        except (KeyError, ValueError) as e:
            return CacheLookup.miss(f"error: {e}")

        age = time.time() - stored_at
        if age > ttl:
            self.delete(key)
            return CacheLookup.miss("expired")

        if not isinstance(payload, dict):
            return CacheLookup.miss("error: payload is not an object")

        return CacheLookup.found(payload, age)

    def set(self, key: str, payload: dict[str, Any]) -> CacheWrite:
        try:
            data = json.dumps(payload, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            return CacheWrite.failed(str(e))

        try:
            pipe = self._client.pipeline()
            pipe.hset(
                self._key(key),
                mapping={
                    "payload": data,
                    "timestamp": str(time.time()),
                },
            )
            pipe.expire(self._key(key), self._ttl)
            pipe.execute()
        except redis.RedisError as e:
            logger.warning("cache_write_failed", key=key, error=str(e))
            return CacheWrite.failed(str(e))

        return CacheWrite.stored()

    def delete(self, key: str) -> bool:
        try:
            result: int = self._client.delete(self._key(key))  # type: ignore[assignment]
        except redis.RedisError:
            return False
        return result > 0

    def clear(self) -> int:
        count = 0
        try:
            for key in self._client.scan_iter(match=f"{self._prefix}:*"):
                if self._client.delete(key):
                    count += 1
        except redis.RedisError as e:
            logger.warning("cache_clear_failed", error=str(e))
        return count

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
