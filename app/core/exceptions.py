"""
Custom exception handlers and error types
"""

import json
import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

logger = logging.getLogger(__name__)


class AdStudioError(Exception):
    """Base exception for ad generation errors"""

    status_code: int = 500

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class ValidationError(AdStudioError):
    """Exception raised when user input is incomplete (no network call is made)"""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


class UpstreamError(AdStudioError):
    """Exception raised when a provider call fails.

    Carries the provider's status code and raw body so handlers can pass them
    through to the caller unchanged.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 502,
        body: bytes = b"",
        content_type: Optional[str] = None,
        provider: Optional[str] = None,
        error_code: str = "UPSTREAM_ERROR",
    ):
        super().__init__(message, error_code)
        self.status_code = status_code
        self.body = body
        self.content_type = content_type
        self.provider = provider


class UpstreamTransportError(UpstreamError):
    """Provider answered with a non-success HTTP status"""

    def __init__(
        self,
        provider: str,
        status_code: int,
        body: bytes,
        content_type: Optional[str] = None,
    ):
        super().__init__(
            f"{provider} returned HTTP {status_code}",
            status_code=status_code,
            body=body,
            content_type=content_type,
            provider=provider,
            error_code="UPSTREAM_TRANSPORT_ERROR",
        )


class UpstreamShapeError(UpstreamError):
    """Provider answered successfully but the payload is missing expected fields"""

    def __init__(self, provider: str, message: str, payload: Any = None):
        body = json.dumps({"error": message}).encode("utf-8")
        super().__init__(
            message,
            status_code=502,
            body=body,
            content_type="application/json",
            provider=provider,
            error_code="UPSTREAM_SHAPE_ERROR",
        )
        self.payload = payload


class RenderFailedError(AdStudioError):
    """Exception raised when the video provider reports the render as failed"""

    status_code = 500

    def __init__(self, payload: Any, job_id: Optional[str] = None):
        super().__init__(f"Render {job_id or '<unknown>'} failed", "RENDER_FAILED")
        self.payload = payload
        self.job_id = job_id


class RenderTimeoutError(AdStudioError):
    """Exception raised when the render does not finish within the poll budget"""

    status_code = 504

    def __init__(self, attempts: int, job_id: Optional[str] = None):
        super().__init__("Timeout waiting for video", "RENDER_TIMEOUT")
        self.attempts = attempts
        self.job_id = job_id


class UnexpectedError(AdStudioError):
    """Any uncaught exception surfaced from a request handler"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message or "Server crash", "UNEXPECTED_ERROR")


@contextmanager
def unexpected_errors_as(operation: str) -> Iterator[None]:
    """Re-raise anything that is not an AdStudioError as UnexpectedError.

    Used at the top of each request handler so every failure ends up in one of
    the registered exception handlers.
    """
    try:
        yield
    except AdStudioError:
        raise
    except Exception as exc:  # noqa: BLE001
        logger.exception("%s crashed", operation)
        raise UnexpectedError(str(exc)) from exc


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors"""
    logger.warning(f"Validation error: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={
            "detail": {
                "error": "Validation error",
                "details": "Invalid request data",
                "errors": jsonable_errors(exc),
            }
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    # ctx may hold exception instances which are not JSON serializable
    return [
        {key: value for key, value in err.items() if key != "ctx"}
        for err in exc.errors()
    ]


async def upstream_exception_handler(request: Request, exc: UpstreamError):
    """Pass the provider's status code and raw body through"""
    logger.warning(
        "Upstream error from %s: %s (%d bytes)",
        exc.provider,
        exc.message,
        len(exc.body),
    )
    return Response(
        content=exc.body,
        status_code=exc.status_code,
        media_type=exc.content_type,
    )


async def render_failed_exception_handler(request: Request, exc: RenderFailedError):
    """Provider reported the render as failed: return its payload with a 500"""
    logger.error("Render failed: %s", exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.payload)


async def ad_studio_exception_handler(request: Request, exc: AdStudioError):
    """Handle timeouts, validation and unexpected errors"""
    logger.error(f"{type(exc).__name__}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "error_code": exc.error_code},
    )
