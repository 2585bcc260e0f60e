"""Professor Hackmenomore relay API - Main Application."""

from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
import structlog

from config import get_settings
from chat import ChatRelay, router as chat_router
from urlcheck import UrlCheckService, router as urlcheck_router
from urlhaus import UrlhausClient

logger = structlog.get_logger()
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build outbound clients on startup and release them on shutdown."""
    logger.info("starting_relay_api", environment=settings.environment)
    urlhaus = UrlhausClient.from_settings(settings)
    app.state.chat_relay = ChatRelay.from_settings(settings)
    app.state.url_check_service = UrlCheckService(urlhaus)
    try:
        yield
    finally:
        await urlhaus.close()
        logger.info("shutting_down_relay_api")


app = FastAPI(
    title="Professor Hackmenomore API",
    version="1.0.0",
    description="Cybersecurity tutor chat relay and URL reputation checker",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Answer malformed bodies with 400 and the API's error shape."""
    logger.info("invalid_request_body", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"}
    )


# Include routers
app.include_router(chat_router, prefix="/api", tags=["Chat"])
app.include_router(urlcheck_router, prefix="/api", tags=["URL Check"])


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "service": "hackmenomore-relay"}


def mount_static(app: FastAPI, directory: str) -> bool:
    """Serve the web front end from ``directory`` at / if it exists."""
    if not Path(directory).is_dir():
        logger.info("static_dir_missing", directory=directory)
        return False
    app.mount("/", StaticFiles(directory=directory, html=True), name="static")
    return True


# Mounted last so the API routes take precedence
mount_static(app, settings.static_dir)


if __name__ == "__main__":
    import uvicorn
    logger.info("server_listening", url=f"http://localhost:{settings.port}")
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
