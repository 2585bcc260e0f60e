"""URLhaus API client for reputation lookups."""

from dataclasses import dataclass
from typing import Optional, Any, Union
import asyncio
import httpx
import structlog

from config import Settings

logger = structlog.get_logger()


class ServiceUnavailable(Exception):
    """URLhaus could not be queried or returned an unusable answer."""


@dataclass(frozen=True)
class LookupSuccess:
    """URLhaus answered with a JSON object."""
    result: dict[str, Any]


@dataclass(frozen=True)
class LookupFailure:
    """URLhaus lookup failed; carries the reason for the fallback path."""
    error: str


LookupOutcome = Union[LookupSuccess, LookupFailure]


class UrlhausClient:
    """Async client for the URLhaus URL lookup endpoint."""

    def __init__(
        self,
        api_url: str,
        user_agent: str,
        timeout: float = 10.0,
        auth_key: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_url = api_url
        self.user_agent = user_agent
        self.timeout = timeout
        self.auth_key = auth_key
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "UrlhausClient":
        """Build a client from application settings."""
        auth_key = settings.urlhaus_auth_key
        return cls(
            api_url=settings.urlhaus_api_url,
            user_agent=settings.urlhaus_user_agent,
            timeout=settings.urlhaus_timeout,
            auth_key=auth_key.get_secret_value() if auth_key else None,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def query(self, url: str) -> dict[str, Any]:
        """Look up a URL and return the parsed URLhaus response.

        The whole exchange is bounded by ``self.timeout`` seconds.

        Raises:
            ServiceUnavailable: transport error, timeout, non-2xx status or
                a body that is not a JSON object.
        """
        client = await self._get_client()
        headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "User-Agent": self.user_agent,
        }
        if self.auth_key:
            headers["Auth-Key"] = self.auth_key

        try:
            response = await asyncio.wait_for(
                client.post(
                    self.api_url,
                    data={"url": url},
                    headers=headers,
                    timeout=self.timeout
                ),
                timeout=self.timeout
            )
        except asyncio.TimeoutError:
            raise ServiceUnavailable(f"URLhaus API timed out after {self.timeout:g}s")
        except httpx.TimeoutException as e:
            raise ServiceUnavailable(f"URLhaus API timed out: {e}") from e
        except httpx.HTTPError as e:
            raise ServiceUnavailable(f"URLhaus request failed: {e}") from e

        logger.debug("urlhaus_response_received", status_code=response.status_code)

        if not response.is_success:
            raise ServiceUnavailable(f"URLhaus API returned {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise ServiceUnavailable("Invalid JSON response from URLhaus API") from e

        if not isinstance(data, dict):
            raise ServiceUnavailable("Invalid JSON response from URLhaus API")

        return data

    async def lookup(self, url: str) -> LookupOutcome:
        """Look up a URL, folding any failure into a LookupFailure."""
        try:
            return LookupSuccess(result=await self.query(url))
        except ServiceUnavailable as e:
            logger.warning("urlhaus_lookup_failed", url=url, error=str(e))
            return LookupFailure(error=str(e))
