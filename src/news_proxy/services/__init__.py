"""Service layer for business logic.

This layer contains query normalization and the cache-backed fetch
coordinator. Services depend on protocols (interfaces), not concrete
implementations, making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from news_proxy.services import NewsService, build_query

    service = NewsService.create(cache_store=store, provider=provider)
    response = await service.handle(build_query(q="deportes"), api_key)
    ```
"""

from .news_service import NewsService
from .query_normalizer import CATEGORY_ALIASES, build_query, normalize_topic, parse_page_size

__all__ = [
    "NewsService",
    "CATEGORY_ALIASES",
    "build_query",
    "normalize_topic",
    "parse_page_size",
]
