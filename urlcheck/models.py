"""URL check data models."""

from typing import Optional, Literal, Any
from pydantic import BaseModel

Verdict = Literal["safe", "malicious", "suspicious", "unknown"]


class UrlCheckRequest(BaseModel):
    """URL check request from user."""
    url: Optional[str] = None


class VerdictResult(BaseModel):
    """Final classification of a URL.

    ``details`` holds the raw URLhaus answer on the primary path;
    ``error`` and ``fallback`` are set when heuristics were used instead.
    """
    verdict: Verdict
    explanation: str
    details: Optional[dict[str, Any]] = None
    error: Optional[str] = None
    fallback: Optional[bool] = None

    def to_payload(self) -> dict[str, Any]:
        """Response body without the fields that do not apply to this path."""
        return {
            key: value
            for key, value in self.model_dump().items()
            if value is not None
        }


class ErrorResponse(BaseModel):
    """Error body for rejected URL checks."""
    error: str


class UnavailableResponse(BaseModel):
    """Body returned when even the fallback check could not run."""
    verdict: Verdict = "unknown"
    error: str = "URL check service temporarily unavailable"
    details: str
