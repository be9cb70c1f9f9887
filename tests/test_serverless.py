"""
Tests for the serverless entry point.
"""

import json

import pytest

from news_proxy import serverless
from news_proxy.handlers import NewsHandler


@pytest.fixture
def handler(service, monkeypatch):
    """Install a handler with a fake upstream as the per-instance handler."""
    monkeypatch.setattr(serverless, "_handler", NewsHandler(news_service=service, api_key_resolver=lambda: "secret"))
    return serverless


def test_event_round_trip(handler, provider):
    result = handler.handler({"queryStringParameters": {"q": "salud", "pageSize": "3"}})

    assert result["statusCode"] == 200
    assert result["headers"]["Cache-Control"] == "public, max-age=60"
    assert len(json.loads(result["body"])["articles"]) == 2
    assert provider.calls[0].page_size == 3


def test_event_without_parameters_requests_general_headlines(handler, provider):
    for event in (None, {}, {"queryStringParameters": None}):
        assert handler.handler(event)["statusCode"] == 200

    assert provider.calls[0].category == "general"
    assert len(provider.calls) == 1


def test_missing_api_key(service, monkeypatch):
    monkeypatch.setattr(serverless, "_handler", NewsHandler(news_service=service, api_key_resolver=lambda: None))

    result = serverless.handler({"queryStringParameters": {"q": "salud"}})

    assert result["statusCode"] == 500
    assert json.loads(result["body"]) == {"error": "GNEWS_API_KEY not configured"}
