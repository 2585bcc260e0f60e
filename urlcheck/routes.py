"""URL check API routes."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
import structlog

from urlcheck.models import UrlCheckRequest, VerdictResult, ErrorResponse, UnavailableResponse
from urlcheck.service import UrlCheckService, get_url_check_service
from urlcheck.validator import InvalidFormat
from urlcheck.heuristics import FallbackFailed
from request_body import json_body

logger = structlog.get_logger()

router = APIRouter()


@router.post(
    "/check-url",
    response_model=VerdictResult,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid URL"},
        500: {"model": UnavailableResponse, "description": "Fallback check failed"},
    },
)
async def check_url(
    request: UrlCheckRequest = Depends(json_body(UrlCheckRequest)),
    service: UrlCheckService = Depends(get_url_check_service)
):
    """Check a URL against URLhaus.

    Always answers 200 with a verdict for a valid URL. When URLhaus is
    unreachable the verdict comes from hostname heuristics and carries
    `fallback: true`.
    """
    logger.info("url_check_requested", url=request.url)

    if not request.url:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error="No URL provided").model_dump()
        )

    try:
        result = await service.check(request.url)
    except InvalidFormat as e:
        logger.info("url_validation_failed", url=request.url, reason=str(e))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error="Invalid URL format").model_dump()
        )
    except FallbackFailed as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=UnavailableResponse(details=str(e)).model_dump()
        )

    return JSONResponse(content=result.to_payload())
