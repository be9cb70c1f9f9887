"""
Tests for the GNews upstream provider.
"""

import httpx
import pytest

from news_proxy.repositories import GNewsProvider, build_request
from news_proxy.services import build_query

BASE_URL = "https://gnews.example/api/v4"


def test_headline_request_uses_category_and_country():
    url, params = build_request(build_query(q="salud"), "secret", BASE_URL)

    assert url == f"{BASE_URL}/top-headlines"
    assert params == {
        "apikey": "secret",
        "lang": "es",
        "max": "12",
        "category": "health",
        "country": "ar",
    }


def test_empty_topic_requests_general_headlines():
    url, params = build_request(build_query(q=""), "secret", BASE_URL)

    assert url.endswith("/top-headlines")
    assert params["category"] == "general"


def test_search_request_uses_term():
    url, params = build_request(build_query(q="bitcoin", page_size="5"), "secret", BASE_URL + "/")

    assert url == f"{BASE_URL}/search"
    assert params == {"apikey": "secret", "lang": "es", "max": "5", "q": "bitcoin"}
    assert "category" not in params
    assert "country" not in params


@pytest.mark.asyncio
async def test_fetch_returns_status_and_text():
    seen: list[httpx.Request] = []

    def reply(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(429, text='{"errors": ["Too many requests"]}')

    provider = GNewsProvider(base_url=BASE_URL, transport=httpx.MockTransport(reply))
    upstream = await provider.fetch(build_query(q="deportes", page_size="3"), "secret")
    await provider.close()

    assert upstream.status_code == 429
    assert not upstream.is_success
    assert upstream.text == '{"errors": ["Too many requests"]}'

    request, = seen
    assert request.method == "GET"
    assert request.url.path == "/api/v4/top-headlines"
    assert request.url.params["category"] == "sports"
    assert request.url.params["max"] == "3"
    assert request.url.params["apikey"] == "secret"


@pytest.mark.asyncio
async def test_fetch_propagates_transport_errors():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    provider = GNewsProvider(base_url=BASE_URL, transport=httpx.MockTransport(refuse))
    with pytest.raises(httpx.ConnectError):
        await provider.fetch(build_query(q="bitcoin"), "secret")
    await provider.close()


def test_search_request_sends_term_as_typed():
    _, params = build_request(build_query(q="Bitcoin AND Ethereum"), "secret", BASE_URL)

    assert params["q"] == "Bitcoin AND Ethereum"


@pytest.mark.asyncio
async def test_fetch_follows_redirects():
    def reply(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/v4/search":
            return httpx.Response(301, headers={"Location": f"{BASE_URL}/v2/search"})
        return httpx.Response(200, text='{"articles": []}')

    provider = GNewsProvider(base_url=BASE_URL, transport=httpx.MockTransport(reply))
    upstream = await provider.fetch(build_query(q="bitcoin"), "secret")
    await provider.close()

    assert upstream.status_code == 200
    assert upstream.text == '{"articles": []}'
