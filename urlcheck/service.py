"""URL check service: URLhaus lookup followed by verdict resolution."""

from fastapi import Request
import structlog

from urlhaus import UrlhausClient
from urlcheck.models import VerdictResult
from urlcheck.validator import validate_url
from urlcheck.verdicts import resolve_verdict

logger = structlog.get_logger()


class UrlCheckService:
    """Checks URLs against URLhaus, degrading to hostname heuristics."""

    def __init__(self, urlhaus: UrlhausClient):
        self.urlhaus = urlhaus

    async def check(self, url: str) -> VerdictResult:
        """Check a URL and always return a verdict.

        Raises:
            InvalidFormat: if the URL is not an absolute http(s) URL. No
                lookup is attempted in that case.
            FallbackFailed: if URLhaus failed and the heuristics could not run.
        """
        parsed = validate_url(url)
        logger.info("url_validation_passed", url=url, host=parsed.hostname)

        outcome = await self.urlhaus.lookup(url)
        result = resolve_verdict(url, outcome)

        logger.info(
            "url_check_completed",
            url=url,
            verdict=result.verdict,
            fallback=bool(result.fallback)
        )
        return result


# Dependency injection helper
def get_url_check_service(request: Request) -> UrlCheckService:
    """FastAPI dependency for the UrlCheckService built at startup."""
    return request.app.state.url_check_service
