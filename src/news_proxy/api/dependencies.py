"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from news_proxy.config import settings
from news_proxy.handlers import NewsHandler
from news_proxy.logging_config import get_logger
from news_proxy.repositories import GNewsProvider, create_cache_store
from news_proxy.services import NewsService

logger = get_logger(__name__)


def get_news_service(request: Request) -> NewsService:
    """Dependency injection for NewsService from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The NewsService instance from app.state

    Raises:
        RuntimeError: If service is not initialized
    """
    service = getattr(request.app.state, "news_service", None)
    if service is None:
        raise RuntimeError("NewsService not initialized. Check lifespan setup.")
    return service


def get_handler(request: Request) -> NewsHandler:
    """Dependency injection for NewsHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The NewsHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "news_handler", None)
    if handler is None:
        raise RuntimeError("NewsHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Cache store and upstream provider (data access)
    2. Service (business logic) - stored in app.state.news_service
    3. Handler (HTTP endpoints) - stored in app.state.news_handler

    Cleanup:
        Closes the upstream HTTP client and removes services from app.state
    """
    cache_store = create_cache_store(settings.cache_backend)
    provider = GNewsProvider.create()

    news_service = NewsService.create(cache_store=cache_store, provider=provider)
    news_handler = NewsHandler(news_service=news_service)

    app.state.news_service = news_service
    app.state.news_handler = news_handler

    logger.info(
        "news_service_started",
        cache_backend=settings.cache_backend,
        cache_ttl=news_service.ttl,
        upstream=provider.base_url,
        healthy=news_service.is_healthy(),
    )

    yield

    await news_service.close()
    del app.state.news_handler
    del app.state.news_service
    logger.info("news_service_stopped")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[NewsHandler, Depends(get_handler)]
ServiceDep = Annotated[NewsService, Depends(get_news_service)]
