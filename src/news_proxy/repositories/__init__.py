"""Repository layer for data access.

This layer abstracts external dependencies (local disk, Redis, the GNews
API) behind protocol-based interfaces. This enables:
- Easy swapping of cache backends without touching the service
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from news_proxy.config import settings
from news_proxy.protocols import CacheStore, NewsProvider

from .file_cache_repository import FileCacheRepository
from .gnews_provider import GNewsProvider, build_request
from .memory_cache_repository import MemoryCacheRepository
from .redis_repository import RedisCacheRepository

__all__ = [
    "CacheStore",
    "NewsProvider",
    "FileCacheRepository",
    "MemoryCacheRepository",
    "RedisCacheRepository",
    "GNewsProvider",
    "build_request",
    "create_cache_store",
]


def create_cache_store(backend: str | None = None) -> CacheStore:
    """Build the cache store selected by ``CACHE_BACKEND``.

    Args:
        backend: "file", "memory" or "redis". If None, uses settings.

    Returns:
        A CacheStore implementation
    """
    backend = backend or settings.cache_backend
    if backend == "memory":
        return MemoryCacheRepository()
    if backend == "redis":
        return RedisCacheRepository.create()
    if backend == "file":
        return FileCacheRepository.create()
    raise ValueError(f"Unknown cache backend: {backend!r}")
