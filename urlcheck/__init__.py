"""URL reputation check feature."""

from .models import UrlCheckRequest, VerdictResult, Verdict
from .service import UrlCheckService, get_url_check_service
from .routes import router

__all__ = [
    "UrlCheckRequest", "VerdictResult", "Verdict",
    "UrlCheckService", "get_url_check_service", "router"
]
