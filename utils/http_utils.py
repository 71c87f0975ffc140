"""
HTTP utility functions for talking to upstream providers.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import aiohttp

from app.core.config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpstreamResponse:
    """Fully buffered provider response."""

    status: int
    body: bytes
    content_type: Optional[str] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Decode the body as JSON; raises ValueError if it is not JSON."""
        return json.loads(self.body.decode("utf-8"))


async def send_request(
    method: str,
    url: str,
    *,
    headers: Optional[Dict[str, str]] = None,
    json_body: Any = None,
    timeout: Optional[float] = None,
) -> UpstreamResponse:
    """
    Send one request and buffer the whole response body.

    Args:
        method: HTTP method
        url: Target URL
        headers: Request headers (credentials included, never logged)
        json_body: Payload serialized as JSON when not None
        timeout: Total timeout in seconds (default: settings.upstream_timeout)

    Returns:
        UpstreamResponse with status, raw body and content type. Non-success
        statuses are returned, not raised, so callers can pass them through.

    Raises:
        aiohttp.ClientError: on connection-level failures
    """
    client_timeout = aiohttp.ClientTimeout(total=timeout or settings.upstream_timeout)
    async with aiohttp.ClientSession(timeout=client_timeout) as session:
        async with session.request(
            method, url, headers=headers, json=json_body
        ) as response:
            body = await response.read()
            logger.debug(
                "%s %s -> %d (%d bytes)", method, url, response.status, len(body)
            )
            return UpstreamResponse(
                status=response.status,
                body=body,
                content_type=response.headers.get("Content-Type"),
            )
