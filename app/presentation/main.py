import os
import logging
from logging.handlers import RotatingFileHandler

from fastapi import FastAPI, APIRouter
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
from contextlib import asynccontextmanager

from app.core.exceptions import (
    AdStudioError,
    RenderFailedError,
    UpstreamError,
    ad_studio_exception_handler,
    render_failed_exception_handler,
    upstream_exception_handler,
    validation_exception_handler,
)
from app.core.middleware import RequestLoggingMiddleware
from app.presentation.api.v1.routers import catalog, health, script, video, voice
from app.core.config import settings


# Configure logging: both to console and to file
os.makedirs(os.path.dirname(settings.log_file) or ".", exist_ok=True)
log_handlers = [
    logging.StreamHandler(),
    RotatingFileHandler(
        settings.log_file, maxBytes=5 * 1024 * 1024, backupCount=2, encoding="utf-8"
    ),
]
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format=settings.log_format,
    datefmt=settings.log_date_format,
    handlers=log_handlers,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    logger.info("Starting UGC Ad Studio API...")
    for provider, configured in settings.provider_keys_configured.items():
        if not configured:
            logger.warning("No API key configured for %s", provider)
    yield
    logger.info("Shutting down UGC Ad Studio API...")


def create_application() -> FastAPI:
    """Create and configure FastAPI application"""

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(RequestLoggingMiddleware)

    # Most specific class wins when Starlette resolves a handler
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(UpstreamError, upstream_exception_handler)
    app.add_exception_handler(RenderFailedError, render_failed_exception_handler)
    app.add_exception_handler(AdStudioError, ad_studio_exception_handler)

    # Include API routers under versioned prefix
    api_v1 = APIRouter(prefix="/api/v1")
    api_v1.include_router(script.router)
    api_v1.include_router(video.router)
    api_v1.include_router(voice.router)
    api_v1.include_router(catalog.router)
    api_v1.include_router(health.router)
    app.include_router(api_v1)

    return app


# Create application instance
app = create_application()

if __name__ == "__main__":
    dev_mode = os.getenv("DEV_MODE", "true").lower() == "true"
    uvicorn.run(
        "app.presentation.main:app",
        host=settings.host,
        port=settings.port,
        reload=dev_mode,
    )
