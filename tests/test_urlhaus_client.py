"""Tests for the URLhaus client."""

import asyncio
import httpx
import pytest
from pydantic import SecretStr

from config import Settings
from urlhaus import LookupFailure, LookupSuccess, ServiceUnavailable, UrlhausClient


def make_client(handler, **kwargs) -> UrlhausClient:
    options = {
        "api_url": "https://urlhaus.test/v1/url/",
        "user_agent": "test-agent",
        "timeout": 10.0,
    }
    options.update(kwargs)
    return UrlhausClient(
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        **options
    )


@pytest.mark.asyncio
async def test_query_returns_parsed_json():
    """Test a successful lookup returns the JSON object."""
    client = make_client(lambda request: httpx.Response(200, json={"query_status": "no_results"}))

    assert await client.query("https://example.com") == {"query_status": "no_results"}


@pytest.mark.asyncio
async def test_query_times_out():
    """Test a slow URLhaus answer is cut off by the timeout."""

    async def slow(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(5)
        return httpx.Response(200, json={"query_status": "no_results"})

    client = make_client(slow, timeout=0.05)

    with pytest.raises(ServiceUnavailable, match="timed out"):
        await client.query("https://example.com")


@pytest.mark.asyncio
@pytest.mark.parametrize("response,message", [
    (httpx.Response(500), "URLhaus API returned 500"),
    (httpx.Response(200, text="not json"), "Invalid JSON response from URLhaus API"),
    (httpx.Response(200, json=["not", "an", "object"]), "Invalid JSON response from URLhaus API"),
])
async def test_query_rejects_bad_answers(response, message):
    """Test unusable answers raise ServiceUnavailable."""
    client = make_client(lambda request: response)

    with pytest.raises(ServiceUnavailable) as exc_info:
        await client.query("https://example.com")

    assert str(exc_info.value) == message


@pytest.mark.asyncio
async def test_lookup_folds_failures():
    """Test lookup never raises and reports the failure reason."""

    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused")

    outcome = await make_client(refuse).lookup("https://example.com")

    assert isinstance(outcome, LookupFailure)
    assert "connection refused" in outcome.error


@pytest.mark.asyncio
async def test_lookup_success():
    """Test lookup wraps a good answer."""
    client = make_client(lambda request: httpx.Response(200, json={"query_status": "ok"}))

    outcome = await client.lookup("https://example.com")

    assert outcome == LookupSuccess(result={"query_status": "ok"})


@pytest.mark.asyncio
async def test_auth_key_header_sent_when_configured():
    """Test the Auth-Key header is only sent when a key is set."""
    seen = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"query_status": "no_results"})

    await make_client(record, auth_key="secret").query("https://example.com")
    await make_client(record).query("https://example.com")

    assert seen[0].headers["Auth-Key"] == "secret"
    assert "Auth-Key" not in seen[1].headers
    assert seen[1].headers["User-Agent"] == "test-agent"


@pytest.mark.asyncio
async def test_from_settings_and_close():
    """Test the client is configured from settings and closes its transport."""
    settings = Settings(
        openai_api_key=SecretStr("key"),
        urlhaus_auth_key=SecretStr("abc"),
        urlhaus_timeout=3.0,
    )

    client = UrlhausClient.from_settings(settings)

    assert client.api_url == "https://urlhaus-api.abuse.ch/v1/url/"
    assert client.user_agent == "Professor Hackmenomore URL Checker"
    assert client.auth_key == "abc"
    assert client.timeout == 3.0

    http_client = await client._get_client()
    await client.close()
    assert http_client.is_closed
