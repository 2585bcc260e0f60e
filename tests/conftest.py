"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")

import httpx
import pytest
from httpx import AsyncClient, ASGITransport
from unittest.mock import AsyncMock, MagicMock

from main import app
from chat import ChatRelay, get_chat_relay
from urlcheck import UrlCheckService, get_url_check_service
from urlhaus import UrlhausClient


@pytest.fixture
async def async_client():
    """Async HTTP client for testing API endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def mock_chat_relay():
    """Mock ChatRelay wired into the app."""
    relay = MagicMock(spec=ChatRelay)
    relay.reply = AsyncMock(return_value="Hello from the professor")
    app.dependency_overrides[get_chat_relay] = lambda: relay
    return relay


@pytest.fixture
def urlhaus_calls():
    """Requests received by the stub URLhaus server."""
    return []


@pytest.fixture
def urlhaus_response():
    """Response the stub URLhaus server answers with; tests may replace it."""
    return {"value": httpx.Response(200, json={"query_status": "no_results"})}


@pytest.fixture
def urlhaus_client(urlhaus_calls, urlhaus_response):
    """UrlhausClient backed by an in-process mock transport."""

    def handler(request: httpx.Request) -> httpx.Response:
        urlhaus_calls.append(request)
        response = urlhaus_response["value"]
        if isinstance(response, Exception):
            raise response
        # Fresh copy so the same stub can answer repeated requests
        return httpx.Response(
            response.status_code,
            content=response.content,
            headers=response.headers
        )

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return UrlhausClient(
        api_url="https://urlhaus.test/v1/url/",
        user_agent="Professor Hackmenomore URL Checker",
        timeout=10.0,
        client=client,
    )


@pytest.fixture
def url_check_service(urlhaus_client):
    """UrlCheckService over the stub URLhaus client, wired into the app."""
    service = UrlCheckService(urlhaus_client)
    app.dependency_overrides[get_url_check_service] = lambda: service
    return service
