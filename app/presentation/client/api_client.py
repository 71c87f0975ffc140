"""
HTTP client for the Ad Studio API, used by the client controller and CLI.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from app.core.config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiReply:
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        return json.loads(self.text)


class AdStudioApiClient:
    """Thin requests wrapper around the /api/v1 endpoints.

    Non-success statuses are returned as ApiReply; only connection-level
    failures raise (requests.RequestException).
    """

    def __init__(
        self, base_url: Optional[str] = None, *, timeout: Optional[float] = None
    ) -> None:
        self.base_url = (base_url or settings.client_api_base_url).rstrip("/")
        self.timeout = timeout or settings.client_request_timeout

    def _post(self, path: str, payload: Dict[str, Any]) -> ApiReply:
        response = requests.post(
            f"{self.base_url}{path}", json=payload, timeout=self.timeout
        )
        logger.debug("POST %s -> %d", path, response.status_code)
        return ApiReply(status_code=response.status_code, text=response.text)

    def _get(self, path: str) -> ApiReply:
        response = requests.get(f"{self.base_url}{path}", timeout=self.timeout)
        return ApiReply(status_code=response.status_code, text=response.text)

    def create_video(self, payload: Dict[str, Any]) -> ApiReply:
        return self._post("/video", payload)

    def generate_script(self, product: str) -> ApiReply:
        return self._post("/script", {"product": product})

    def list_avatars(self) -> ApiReply:
        return self._get("/avatars")

    def list_voices(self) -> ApiReply:
        return self._get("/voices")

    def fetch_catalog(self) -> Dict[str, Any]:
        """Avatars and voices as served by the API; raises RuntimeError on failure."""
        avatars = self.list_avatars()
        voices = self.list_voices()
        for reply in (avatars, voices):
            if not reply.ok:
                raise RuntimeError(
                    f"Catalog request failed ({reply.status_code}): {reply.text}"
                )
        return {"avatars": avatars.json(), "voices": voices.json()}
