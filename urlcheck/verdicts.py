"""Verdict mapping for URLhaus results and the heuristic fallback."""

from typing import Any, Optional
import structlog

from urlhaus import LookupOutcome, LookupSuccess
from urlcheck.models import Verdict, VerdictResult
from urlcheck.heuristics import FallbackFailed, extract_hostname, matching_rules

logger = structlog.get_logger()

SUSPICIOUS_FALLBACK = "URL has suspicious characteristics (fallback check)"
UNVERIFIED_FALLBACK = "Could not verify URL safety (external API unavailable)"


def map_verdict(query_status: Optional[str], url_status: Optional[str]) -> tuple[Verdict, str]:
    """Map URLhaus status fields to a verdict and explanation.

    Unrecognised statuses map to "unknown" and are echoed in the explanation.
    """
    if query_status == "no_results":
        return "safe", "URL not found in URLhaus malware database"
    if query_status == "ok":
        if url_status == "online":
            return "malicious", "URL is active and flagged as malicious"
        if url_status == "offline":
            return "suspicious", "URL was previously flagged but is now offline"
        return "unknown", f"URL status: {url_status}"
    return "unknown", f"Query status: {query_status}"


def verdict_from_result(result: dict[str, Any]) -> VerdictResult:
    """Verdict for a URLhaus answer, carrying the raw answer as details."""
    verdict, explanation = map_verdict(
        result.get("query_status"),
        result.get("url_status")
    )
    return VerdictResult(verdict=verdict, explanation=explanation, details=result)


def fallback_verdict(url: str, error: str) -> VerdictResult:
    """Classify a URL from its hostname alone.

    Raises:
        FallbackFailed: if no hostname can be extracted. The message is the
            original lookup error.
    """
    try:
        hostname = extract_hostname(url)
    except FallbackFailed as e:
        logger.error("fallback_check_failed", url=url, error=str(e))
        raise FallbackFailed(error) from e
    matched = matching_rules(hostname)
    logger.info("fallback_rules_evaluated", hostname=hostname, matched=matched)

    if matched:
        return VerdictResult(
            verdict="suspicious",
            explanation=SUSPICIOUS_FALLBACK,
            error=error,
            fallback=True
        )
    return VerdictResult(
        verdict="unknown",
        explanation=UNVERIFIED_FALLBACK,
        error=error,
        fallback=True
    )


def resolve_verdict(url: str, outcome: LookupOutcome) -> VerdictResult:
    """Turn either lookup outcome into a verdict."""
    if isinstance(outcome, LookupSuccess):
        return verdict_from_result(outcome.result)
    return fallback_verdict(url, outcome.error)
