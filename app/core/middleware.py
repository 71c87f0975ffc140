"""
Custom middleware for request logging
"""

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with a correlation id and its duration.

    Video requests stay open for the whole render poll, so the duration logged
    here is the end-to-end wait seen by the client.
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]

        client_host = request.client.host if request.client is not None else "unknown"
        logger.info(
            "[%s] Request: %s %s from %s",
            request_id,
            request.method,
            request.url.path,
            client_host,
        )

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            "[%s] Response: %d in %.3fs", request_id, response.status_code, process_time
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
