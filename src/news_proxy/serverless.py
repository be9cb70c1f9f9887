"""Serverless entry point.

Exposes ``handler(event, context)`` for platforms that invoke a function
with a query-string event and expect ``{statusCode, headers, body}`` back
(Netlify Functions, AWS Lambda behind API Gateway).

The service and its event loop are built once per warm instance, so the
file cache and the HTTP client are reused between invocations of the same
container.
"""

import asyncio
from typing import Any

from news_proxy.handlers import NewsHandler
from news_proxy.repositories import GNewsProvider, create_cache_store
from news_proxy.services import NewsService

_handler: NewsHandler | None = None
_loop: asyncio.AbstractEventLoop | None = None


def get_handler() -> NewsHandler:
    """Get or create the per-instance handler."""
    global _handler
    if _handler is None:
        service = NewsService.create(
            cache_store=create_cache_store(),
            provider=GNewsProvider.create(),
        )
        _handler = NewsHandler(news_service=service)
    return _handler


async def handle(event: dict[str, Any] | None) -> dict[str, Any]:
    return await get_handler().handle_event(event)


def handler(event: dict[str, Any] | None, context: Any = None) -> dict[str, Any]:
    """Synchronous platform entry point.

    Reuses one event loop per instance; the cached httpx client is bound to
    the loop it was first used on.
    """
    global _loop
    if _loop is None or _loop.is_closed():
        _loop = asyncio.new_event_loop()
    return _loop.run_until_complete(handle(event))
