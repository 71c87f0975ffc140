from __future__ import annotations

import logging
from typing import Optional

from app.application.interfaces import IAvatarVideoProvider
from app.core.config import settings
from app.core.exceptions import UpstreamShapeError, UpstreamTransportError
from app.core.pyd_schemas import RenderJob
from utils.http_utils import UpstreamResponse, send_request

logger = logging.getLogger(__name__)

PROVIDER = "d-id"


class DIDAvatarVideoProvider(IAvatarVideoProvider):
    """IAvatarVideoProvider for the D-ID talks API.

    Workflow:
    1. POST /talks with the avatar URL and a text script -> job id
    2. GET /talks/{id} until status is done or error
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        api_url: Optional[str] = None,
        voice_provider: Optional[str] = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else settings.did_api_key
        self.api_url = (api_url or settings.did_api_url).rstrip("/")
        self.voice_provider = voice_provider or settings.did_voice_provider

    def _auth_headers(self) -> dict:
        return {"Authorization": f"Basic {self.api_key}"}

    def build_payload(self, *, script: str, source_url: str, voice_id: str) -> dict:
        return {
            "source_url": source_url,
            "script": {
                "type": "text",
                "input": script,
                "provider": {"type": self.voice_provider, "voice_id": voice_id},
            },
        }

    def _to_job(self, response: UpstreamResponse) -> RenderJob:
        logger.debug("D-ID response %d: %s", response.status, response.text())
        if not response.ok:
            raise UpstreamTransportError(
                PROVIDER, response.status, response.body, response.content_type
            )
        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamShapeError(PROVIDER, "Response is not JSON") from exc
        return RenderJob.from_payload(payload)

    async def create_job(
        self, *, script: str, source_url: str, voice_id: str
    ) -> RenderJob:
        response = await send_request(
            "POST",
            self.api_url,
            headers={**self._auth_headers(), "Content-Type": "application/json"},
            json_body=self.build_payload(
                script=script, source_url=source_url, voice_id=voice_id
            ),
        )
        return self._to_job(response)

    async def get_job(self, job_id: str) -> RenderJob:
        response = await send_request(
            "GET",
            f"{self.api_url}/{job_id}",
            headers=self._auth_headers(),
        )
        return self._to_job(response)
