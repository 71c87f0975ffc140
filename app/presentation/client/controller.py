"""
Client-side controller for one ad generation session.

Holds the user's inputs and exactly one view state (idle, loading, error or
result). Submissions are serialized with a busy flag; a successful render
replaces the previous result wholesale.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Protocol

from app.core.catalog import build_avatar_url
from app.core.config import settings
from app.core.exceptions import ValidationError
from app.core.pyd_schemas import (
    AdRequest,
    ResultUrlFound,
    VideoResult,
    extract_video_result,
)

logger = logging.getLogger(__name__)

MISSING_SCRIPT_MESSAGE = "Please enter a script for your UGC ad."
MISSING_AVATAR_MESSAGE = "Please select an avatar image first."
REQUEST_FAILED_MESSAGE = "Failed to generate video"
GENERIC_ERROR_MESSAGE = "Something went wrong while generating the video."
IDLE_MESSAGE = "No video generated yet. Submit a script to generate one."
NO_URL_MESSAGE = (
    "The video was created, but a direct video URL was not found in the "
    "response. Here is the raw response from the API:"
)


class VideoApi(Protocol):
    def create_video(self, payload: Dict[str, Any]) -> Any:
        ...


class ViewKind(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    RESULT = "result"


@dataclass(frozen=True)
class ViewState:
    kind: ViewKind
    message: Optional[str] = None
    result: Optional[VideoResult] = None


class AdStudioController:
    def __init__(
        self,
        api: VideoApi,
        *,
        avatar_base_url: Optional[str] = None,
        voice_id: Optional[str] = None,
    ) -> None:
        self._api = api
        self._avatar_base_url = avatar_base_url
        self.script = ""
        self.avatar: Optional[str] = None
        self.voice_id = voice_id or settings.default_voice_id
        self._busy = False
        self._result: Optional[VideoResult] = None
        self._view = ViewState(ViewKind.IDLE, message=IDLE_MESSAGE)

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def view(self) -> ViewState:
        return self._view

    @property
    def result(self) -> Optional[VideoResult]:
        return self._result

    def set_script(self, script: str) -> None:
        self.script = script

    def select_avatar(self, path: Optional[str]) -> None:
        self.avatar = path

    def select_voice(self, voice_id: str) -> None:
        self.voice_id = voice_id

    def build_request(self) -> AdRequest:
        """Validate inputs and build the request; raises ValidationError."""
        if not self.script.strip():
            raise ValidationError(MISSING_SCRIPT_MESSAGE, field="script")
        if not self.avatar:
            raise ValidationError(MISSING_AVATAR_MESSAGE, field="avatar")
        return AdRequest(
            script=self.script,
            avatar_image_url=build_avatar_url(self.avatar, self._avatar_base_url),
            voice_id=self.voice_id,
        )

    def generate_video(self) -> ViewState:
        if self._busy:
            logger.warning("Generation already in progress; submission ignored")
            return self._view

        try:
            ad_request = self.build_request()
        except ValidationError as exc:
            self._view = ViewState(ViewKind.ERROR, message=exc.message)
            return self._view

        self._busy = True
        self._view = ViewState(ViewKind.LOADING, message="Generating...")
        try:
            reply = self._api.create_video(
                {
                    "script": ad_request.script,
                    "avatarImage": ad_request.avatar_image_url,
                    "voiceId": ad_request.voice_id,
                }
            )
            if not reply.ok:
                self._view = ViewState(
                    ViewKind.ERROR, message=reply.text or REQUEST_FAILED_MESSAGE
                )
                return self._view

            self._result = extract_video_result(reply.json())
            self._view = ViewState(ViewKind.RESULT, result=self._result)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Video request failed")
            self._view = ViewState(
                ViewKind.ERROR, message=str(exc) or GENERIC_ERROR_MESSAGE
            )
        finally:
            self._busy = False
        return self._view


def render_view(view: ViewState) -> str:
    """Plain-text rendering of a view state."""
    if view.kind is ViewKind.RESULT and view.result is not None:
        if isinstance(view.result, ResultUrlFound):
            return f"Video Result\n{view.result.url}"
        raw = json.dumps(view.result.raw_payload, indent=2)
        return f"Video Result\n{NO_URL_MESSAGE}\n{raw}"
    if view.kind is ViewKind.ERROR:
        return f"Error: {view.message}"
    return view.message or IDLE_MESSAGE


def render_catalog(catalog: Dict[str, Any]) -> str:
    """Plain-text listing of the avatar and voice catalog returned by the API."""
    lines = []
    for group, options in catalog["avatars"]["groups"].items():
        lines.append(f"[{group}]")
        lines.extend(f"  {option['path']}" for option in options)
    voices = catalog["voices"]
    lines.append(f"[voices] (default: {voices['default']})")
    lines.extend(f"  {v['id']:<22} {v['label']}" for v in voices["voices"])
    return "\n".join(lines)
