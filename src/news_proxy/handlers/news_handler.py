"""HTTP handlers for news requests.

Handlers convert between transport envelopes and service calls. They
resolve the credential at request entry and translate the service's
``NewsResponse`` into a FastAPI response or a serverless result dict.
"""

from collections.abc import Callable
from typing import Any

from fastapi import Response

from news_proxy.config import get_api_key, settings
from news_proxy.dto import HealthCheckResponse, NewsQueryParams
from news_proxy.entities import NewsResponse
from news_proxy.services import NewsService


class NewsHandler:
    """HTTP handlers for the news endpoint.

    This handler delegates business logic to NewsService and handles
    transport-specific concerns like:
    - Reading the credential from the environment per request
    - Converting NewsResponse to FastAPI / serverless responses

    Example:
        ```python
        handler = NewsHandler(news_service=service)

        @app.get("/api/news")
        async def news(q: str = ""):
            return await handler.get_news(NewsQueryParams(q=q))
        ```
    """

    def __init__(
        self,
        news_service: NewsService,
        api_key_resolver: Callable[[], str | None] = get_api_key,
    ) -> None:
        """Initialize the news handler.

        Args:
            news_service: The news service for business logic (required).
            api_key_resolver: Returns the upstream credential. Defaults to
                reading GNEWS_API_KEY from the environment.
        """
        self._news = news_service
        self._resolve_api_key = api_key_resolver

    async def _respond(self, params: NewsQueryParams) -> NewsResponse:
        return await self._news.handle(params, api_key=self._resolve_api_key())

    async def get_news(self, params: NewsQueryParams) -> Response:
        """Handle GET /api/news requests.

        Args:
            params: The raw query parameters

        Returns:
            Response with the JSON body, status and headers chosen by the service
        """
        result = await self._respond(params)
        return Response(
            content=result.body,
            status_code=result.status_code,
            headers=result.headers,
            media_type="application/json",
        )

    async def handle_event(self, event: dict[str, Any] | None) -> dict[str, Any]:
        """Handle a serverless (Netlify / AWS Lambda) invocation.

        Args:
            event: Platform event; only ``queryStringParameters`` is read

        Returns:
            Dict with ``statusCode``, ``headers`` and ``body``
        """
        params = NewsQueryParams.from_mapping((event or {}).get("queryStringParameters"))
        result = await self._respond(params)
        return {
            "statusCode": result.status_code,
            "headers": dict(result.headers),
            "body": result.body,
        }

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        is_healthy = self._news.is_healthy()

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            cache_healthy=is_healthy,
            cache_backend=settings.cache_backend,
        )
