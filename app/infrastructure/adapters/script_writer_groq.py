from __future__ import annotations

import logging
from typing import Optional

from app.application.interfaces import IScriptWriter
from app.core.config import settings
from app.core.exceptions import UpstreamShapeError, UpstreamTransportError
from utils.http_utils import send_request

logger = logging.getLogger(__name__)

PROVIDER = "groq"


class GroqScriptWriter(IScriptWriter):
    """IScriptWriter backed by Groq's OpenAI-compatible chat completions API.

    A missing API key is not checked here: the request goes out and Groq's own
    authentication error is passed back to the caller.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        model: Optional[str] = None,
        api_url: Optional[str] = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else settings.groq_api_key
        self.model = model or settings.groq_model
        self.api_url = api_url or settings.groq_api_url

    def build_payload(self, product: str) -> dict:
        prompt = settings.script_prompt_template.format(product=product)
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
        }

    async def write_script(self, product: str) -> str:
        response = await send_request(
            "POST",
            self.api_url,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            json_body=self.build_payload(product),
        )
        if not response.ok:
            raise UpstreamTransportError(
                PROVIDER, response.status, response.body, response.content_type
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamShapeError(PROVIDER, "Response is not JSON") from exc

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            logger.debug("Unexpected Groq payload: %s", data)
            raise UpstreamShapeError(
                PROVIDER, "Response has no generated choices", payload=data
            ) from exc

        if not isinstance(content, str):
            raise UpstreamShapeError(
                PROVIDER, "Generated content is not text", payload=data
            )
        return content
