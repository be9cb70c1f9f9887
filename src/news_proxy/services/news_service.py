"""News service for core business logic.

This service is the cache-backed fetch coordinator: it derives the cache
key, serves fresh entries straight from the store, and on a miss calls the
upstream provider, projects the articles and writes them back.
"""

import json
from typing import Any

from news_proxy.config import settings
from news_proxy.dto import ArticleItem, ArticlesResponse, ErrorResponse, NewsQueryParams, UpstreamErrorResponse
from news_proxy.entities import NewsQuery, NewsResponse, UpstreamResponse
from news_proxy.logging_config import get_logger
from news_proxy.protocols import CacheStore, NewsProvider

from .query_normalizer import build_query

logger = get_logger(__name__)

MISSING_API_KEY_ERROR = "GNEWS_API_KEY not configured"
UPSTREAM_ERROR = "Upstream request failed"
SERVER_ERROR = "Server error"


class NewsService:
    """Cache-backed news fetch coordinator.

    This service depends on PROTOCOLS, not concrete implementations:
    - CacheStore: local disk, in-memory, Redis
    - NewsProvider: GNews, or a fake in tests

    ``handle`` never raises. Configuration and upstream errors come back as
    non-2xx responses; cache failures degrade to "cache was empty" and
    malformed upstream bodies to "no articles".

    Example:
        ```python
        from news_proxy.repositories import FileCacheRepository, GNewsProvider
        from news_proxy.dto import NewsQueryParams
        from news_proxy.services import NewsService

        service = NewsService.create(
            cache_store=FileCacheRepository.create(),
            provider=GNewsProvider.create(),
        )
        response = await service.handle(NewsQueryParams(q="salud"), api_key="...")
        ```
    """

    def __init__(
        self,
        cache_store: CacheStore,
        provider: NewsProvider,
        ttl: int | None = None,
        max_age: int | None = None,
    ) -> None:
        """Initialize the news service.

        Args:
            cache_store: Cache storage backend (required).
            provider: Upstream news provider (required).
            ttl: Maximum age of served cache entries in seconds. Defaults to settings.
            max_age: ``Cache-Control`` max-age for successful responses. Defaults to settings.
        """
        self._cache = cache_store
        self._provider = provider
        self._ttl = ttl or settings.cache_ttl
        self._max_age = settings.cache_max_age if max_age is None else max_age

    @classmethod
    def create(
        cls,
        cache_store: CacheStore,
        provider: NewsProvider,
        ttl: int | None = None,
        max_age: int | None = None,
    ) -> "NewsService":
        """Factory method to create NewsService with sensible defaults.

        Args:
            cache_store: Cache storage backend (required).
            provider: Upstream news provider (required).
            ttl: Cache TTL in seconds. If None, uses settings.
            max_age: Cache-Control max-age. If None, uses settings.

        Returns:
            Configured NewsService instance
        """
        return cls(cache_store=cache_store, provider=provider, ttl=ttl, max_age=max_age)

    async def handle(self, params: NewsQueryParams, api_key: str | None) -> NewsResponse:
        """Serve a news request from cache or upstream.

        Business logic:
        1. Fail fast when the credential is missing (no I/O)
        2. Normalize the raw parameters into a NewsQuery
        3. Serve a fresh cache entry without calling upstream
        4. On a miss, call upstream once
        5. Forward upstream errors without caching them
        6. Project the articles, cache them best-effort, return them

        Args:
            params: Raw query parameters
            api_key: Upstream credential, resolved by the caller

        Returns:
            NewsResponse with status code, JSON body and headers
        """
        if not api_key:
            logger.error("missing_api_key")
            return self._json(500, ErrorResponse(error=MISSING_API_KEY_ERROR).model_dump(exclude_none=True))

        try:
            query = build_query(
                q=params.q,
                page_size=params.page_size,
                lang=params.lang,
                country=params.country,
            )
            return await self.serve(query, api_key)
        except Exception as e:
            logger.exception("news_request_failed", q=params.q)
            return self._json(500, ErrorResponse(error=SERVER_ERROR, details=str(e)).model_dump())

    async def serve(self, query: NewsQuery, api_key: str) -> NewsResponse:
        """Cache read, upstream fetch and cache write for a normalized query.

        Exceptions propagate; ``handle`` turns them into a generic 500.
        """
        key = query.cache_key

        lookup = self._cache.get(key, self._ttl)
        if lookup.hit and lookup.payload is not None:
            logger.info("cache_hit", cache_key=key, age=round(lookup.age or 0.0, 3))
            return self._json(200, lookup.payload, cacheable=True, cache_status="hit")

        logger.info("cache_miss", cache_key=key, reason=lookup.reason)
        upstream = await self._provider.fetch(query, api_key)

        if not upstream.is_success:
            logger.warning("upstream_error", cache_key=key, status=upstream.status_code)
            envelope = UpstreamErrorResponse(
                error=UPSTREAM_ERROR,
                status=upstream.status_code,
                details=self._error_details(upstream),
            )
            return self._json(upstream.status_code, envelope.model_dump())

        payload = self.project(self._parse_body(upstream))

        write = self._cache.set(key, payload)
        if not write.ok:
            logger.warning("cache_write_skipped", cache_key=key, error=write.error)

        return self._json(200, payload, cacheable=True, cache_status="miss")

    @staticmethod
    def _parse_body(upstream: UpstreamResponse) -> dict[str, Any]:
        try:
            data = json.loads(upstream.text)
        except ValueError:
            logger.warning("upstream_body_not_json", length=len(upstream.text))
            return {"articles": []}
        if not isinstance(data, dict):
            return {"articles": []}
        return data

    @staticmethod
    def _error_details(upstream: UpstreamResponse) -> Any:
        try:
            return json.loads(upstream.text)
        except ValueError:
            return upstream.text

    @staticmethod
    def project(data: dict[str, Any]) -> dict[str, Any]:
        """Reduce an upstream body to ``{"articles": [...]}`` with the exposed fields."""
        raw_articles = data.get("articles")
        if not isinstance(raw_articles, list):
            raw_articles = []
        response = ArticlesResponse(articles=[ArticleItem.from_upstream(item) for item in raw_articles])
        return response.to_payload()

    def _json(
        self,
        status_code: int,
        body: dict[str, Any],
        cacheable: bool = False,
        cache_status: str | None = None,
    ) -> NewsResponse:
        headers = {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": "*",
        }
        if cacheable:
            headers["Cache-Control"] = f"public, max-age={self._max_age}"
        return NewsResponse(
            status_code=status_code,
            body=json.dumps(body, ensure_ascii=False),
            headers=headers,
            cache_status=cache_status,
        )

    def is_healthy(self) -> bool:
        """Check if the cache store is usable."""
        return self._cache.health_check()

    async def close(self) -> None:
        """Release the provider's network resources."""
        await self._provider.close()

    @property
    def ttl(self) -> int:
        """Get the cache TTL in seconds."""
        return self._ttl

    @property
    def cache_store(self) -> CacheStore:
        """Get the underlying cache store (for testing)."""
        return self._cache

    @property
    def provider(self) -> NewsProvider:
        """Get the underlying provider (for testing)."""
        return self._provider
