from __future__ import annotations

import logging
from typing import Optional

from app.application.interfaces import ISpeechSynthesizer
from app.core.config import settings
from app.core.exceptions import UpstreamTransportError
from utils.http_utils import send_request

logger = logging.getLogger(__name__)

PROVIDER = "elevenlabs"


class ElevenLabsSpeechSynthesizer(ISpeechSynthesizer):
    """ISpeechSynthesizer backed by the ElevenLabs text-to-speech API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        voice_id: Optional[str] = None,
        api_url: Optional[str] = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else settings.eleven_api_key
        self.voice_id = voice_id or settings.eleven_voice_id
        self.api_url = (api_url or settings.eleven_api_url).rstrip("/")

    async def synthesize(self, text: str) -> bytes:
        response = await send_request(
            "POST",
            f"{self.api_url}/{self.voice_id}",
            headers={
                "xi-api-key": self.api_key,
                "Content-Type": "application/json",
            },
            json_body={
                "text": text,
                "voice_settings": {
                    "stability": settings.eleven_stability,
                    "similarity_boost": settings.eleven_similarity_boost,
                },
            },
        )
        if not response.ok:
            raise UpstreamTransportError(
                PROVIDER, response.status, response.body, response.content_type
            )
        logger.info("Synthesized %d bytes of audio", len(response.body))
        return response.body
