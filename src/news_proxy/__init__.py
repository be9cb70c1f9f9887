"""News Proxy - cached proxy for the GNews API.

This package provides a layered architecture for a news endpoint that
normalizes query parameters and short-circuits repeated requests through a
TTL-bounded cache:

Layers:
    - protocols: Interface contracts (CacheStore, NewsProvider)
    - repositories: Cache stores (disk, memory, Redis) and the GNews client
    - services: Query normalization and the cache-backed fetch coordinator
    - handlers: HTTP and serverless envelopes
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from news_proxy import FileCacheRepository, GNewsProvider, NewsQueryParams, NewsService

    service = NewsService.create(
        cache_store=FileCacheRepository.create(),
        provider=GNewsProvider.create(),
    )
    response = await service.handle(NewsQueryParams(q="deportes"), api_key)
    ```

For HTTP API:
    ```python
    from news_proxy.api.app import app
    ```

For serverless platforms:
    ```python
    from news_proxy.serverless import handler
    ```
"""

from news_proxy.config import get_api_key, get_redis_client, settings
from news_proxy.dto import ArticleItem, ArticlesResponse, NewsQueryParams
from news_proxy.entities import CacheLookup, CacheWrite, NewsQuery, NewsResponse, UpstreamResponse
from news_proxy.handlers import NewsHandler
from news_proxy.protocols import CacheStore, NewsProvider
from news_proxy.repositories import (
    FileCacheRepository,
    GNewsProvider,
    MemoryCacheRepository,
    RedisCacheRepository,
    create_cache_store,
)
from news_proxy.services import NewsService, build_query

__all__ = [
    # Configuration
    "settings",
    "get_api_key",
    "get_redis_client",
    # Protocols (interfaces)
    "CacheStore",
    "NewsProvider",
    # Services (business logic)
    "NewsService",
    "build_query",
    # Handlers (HTTP)
    "NewsHandler",
    # Repositories (data access)
    "FileCacheRepository",
    "MemoryCacheRepository",
    "RedisCacheRepository",
    "GNewsProvider",
    "create_cache_store",
    # Entities (domain models)
    "CacheLookup",
    "CacheWrite",
    "NewsQuery",
    "NewsResponse",
    "UpstreamResponse",
    # DTOs (API contracts)
    "NewsQueryParams",
    "ArticleItem",
    "ArticlesResponse",
]
