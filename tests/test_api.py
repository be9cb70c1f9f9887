"""
Tests for the news proxy API.
"""

import pytest
from fastapi.testclient import TestClient

from news_proxy.api.app import app
from news_proxy.handlers import NewsHandler


@pytest.fixture
def client(service):
    """Create a test client with a fake upstream and a temporary file cache."""
    app.state.news_service = service
    app.state.news_handler = NewsHandler(news_service=service, api_key_resolver=lambda: "secret")
    yield TestClient(app)
    del app.state.news_handler
    del app.state.news_service


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "News Proxy API"
    assert data["endpoints"]["news"] == "/api/news"


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["cache_healthy"] is True


def test_news_headlines(client, provider):
    """Alias topics resolve to headline categories."""
    response = client.get("/api/news", params={"q": "salud"})
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["cache-control"] == "public, max-age=60"
    assert len(response.json()["articles"]) == 2
    assert provider.calls[0].category == "health"


def test_news_repeated_request_hits_cache(client, provider):
    """A repeated request within the TTL does not reach upstream."""
    first = client.get("/api/news", params={"q": "bitcoin", "pageSize": "5"})
    second = client.get("/api/news", params={"q": "bitcoin", "pageSize": "5"})
    assert first.status_code == second.status_code == 200
    assert second.json() == first.json()
    assert len(provider.calls) == 1


def test_news_non_numeric_page_size_uses_default(client, provider):
    """A malformed pageSize falls back to the default instead of failing validation."""
    response = client.get("/api/news", params={"q": "bitcoin", "pageSize": "lots"})
    assert response.status_code == 200
    assert provider.calls[0].page_size == 12


def test_news_page_size_is_clamped(client, provider):
    response = client.get("/api/news", params={"pageSize": "500"})
    assert response.status_code == 200
    assert provider.calls[0].page_size == 50
    assert provider.calls[0].category == "general"


def test_legacy_function_path(client, provider):
    """The legacy Netlify function path serves the same endpoint."""
    response = client.get("/.netlify/functions/news", params={"q": "deportes"})
    assert response.status_code == 200
    assert provider.calls[0].category == "sports"


def test_news_missing_api_key(service):
    """Missing credential is reported as a 500 without calling upstream."""
    app.state.news_handler = NewsHandler(news_service=service, api_key_resolver=lambda: None)
    try:
        response = TestClient(app).get("/api/news", params={"q": "salud"})
    finally:
        del app.state.news_handler

    assert response.status_code == 500
    assert response.json() == {"error": "GNEWS_API_KEY not configured"}
    assert service.provider.calls == []


def test_news_reads_api_key_from_environment(service, monkeypatch):
    """The default resolver reads GNEWS_API_KEY per request."""
    monkeypatch.delenv("GNEWS_API_KEY", raising=False)
    app.state.news_handler = NewsHandler(news_service=service)
    try:
        client = TestClient(app)
        assert client.get("/api/news").status_code == 500

        monkeypatch.setenv("GNEWS_API_KEY", "from-env")
        assert client.get("/api/news").status_code == 200
    finally:
        del app.state.news_handler
