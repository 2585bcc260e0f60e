"""URLhaus reputation lookup client."""

from .client import (
    UrlhausClient, ServiceUnavailable,
    LookupSuccess, LookupFailure, LookupOutcome
)

__all__ = [
    "UrlhausClient", "ServiceUnavailable",
    "LookupSuccess", "LookupFailure", "LookupOutcome"
]
