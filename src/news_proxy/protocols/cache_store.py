"""Cache storage protocol.

Defines the interface for any key-value store with TTL semantics that can
hold serialized news payloads.

Implementations:
- Local disk, one JSON file per key (default)
- In-process dictionary
- Redis
"""

from typing import Any, Protocol, runtime_checkable

from news_proxy.entities import CacheLookup, CacheWrite


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for cache storage backends.

    Any type that implements these methods satisfies the protocol, no
    explicit inheritance needed. Implementations must not raise on I/O
    failures: reads degrade to a miss and writes to a failed result.
    """

    def get(self, key: str, ttl: int) -> CacheLookup:
        """Read a cache entry, expiring it if it is older than ``ttl``.

        Args:
            key: The cache key
            ttl: Maximum age in seconds; stale entries are deleted

        Returns:
            CacheLookup describing a hit or a miss
        """
        ...

    def set(self, key: str, payload: dict[str, Any]) -> CacheWrite:
        """Store a JSON-serializable payload under ``key``.

        Args:
            key: The cache key
            payload: The payload to store

        Returns:
            CacheWrite describing whether the entry was stored
        """
        ...

    def delete(self, key: str) -> bool:
        """Delete an entry.

        Args:
            key: The cache key

        Returns:
            True if an entry was deleted, False otherwise
        """
        ...

    def clear(self) -> int:
        """Delete every entry in the store.

        Returns:
            Number of entries deleted
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is usable.

        Returns:
            True if healthy, False otherwise
        """
        ...
