"""
Shared fixtures for the news proxy tests.
"""

import json

import pytest

from news_proxy.entities import NewsQuery, UpstreamResponse
from news_proxy.repositories import FileCacheRepository, MemoryCacheRepository
from news_proxy.services import NewsService

SAMPLE_UPSTREAM = {
    "totalArticles": 2,
    "articles": [
        {
            "id": "a1",
            "title": "Nueva vacuna aprobada",
            "description": "La autoridad sanitaria aprobó una nueva vacuna.",
            "content": "Texto completo que no debe exponerse...",
            "url": "https://example.com/salud/vacuna",
            "image": "https://example.com/img/vacuna.jpg",
            "publishedAt": "2026-10-17T12:00:00Z",
            "lang": "es",
            "source": {"id": "s1", "name": "Diario Ejemplo", "url": "https://example.com", "country": "ar"},
        },
        {
            "id": "a2",
            "title": "Hospitales amplían guardias",
            "url": "https://example.com/salud/guardias",
            "publishedAt": "2026-10-17T10:30:00Z",
            "source": {"name": "Otro Diario", "url": "https://otro.example.com"},
        },
    ],
}


class FakeNewsProvider:
    """NewsProvider that records calls and replays a canned reply."""

    def __init__(self, status_code: int = 200, text: str | None = None) -> None:
        self.status_code = status_code
        self.text = json.dumps(SAMPLE_UPSTREAM) if text is None else text
        self.calls: list[NewsQuery] = []
        self.closed = False

    async def fetch(self, query: NewsQuery, api_key: str) -> UpstreamResponse:
        self.calls.append(query)
        return UpstreamResponse(status_code=self.status_code, text=self.text)

    async def close(self) -> None:
        self.closed = True


class FailingNewsProvider(FakeNewsProvider):
    """NewsProvider whose transport always fails."""

    async def fetch(self, query: NewsQuery, api_key: str) -> UpstreamResponse:
        self.calls.append(query)
        raise ConnectionError("connection refused")


@pytest.fixture
def provider():
    """Create a fake upstream provider."""
    return FakeNewsProvider()


@pytest.fixture
def memory_store():
    """Create an in-memory cache store."""
    return MemoryCacheRepository()


@pytest.fixture
def file_store(tmp_path):
    """Create a file cache store in a temporary directory."""
    return FileCacheRepository(directory=tmp_path / "news-cache")


@pytest.fixture
def service(file_store, provider):
    """Create a news service backed by the file store and fake provider."""
    return NewsService.create(cache_store=file_store, provider=provider, ttl=300, max_age=60)
