from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from app.core.exceptions import UpstreamShapeError


class RenderStatus(str, Enum):
    created = "created"
    pending = "pending"
    done = "done"
    error = "error"

    @classmethod
    def from_provider(cls, value: Any) -> "RenderStatus":
        """Map a provider status string onto the lifecycle enum.

        'rejected' counts as a failure; anything unrecognised ('started',
        'queued', ...) is treated as still in progress.
        """
        text = str(value or "").strip().lower()
        if text == "rejected":
            return cls.error
        try:
            return cls(text)
        except ValueError:
            return cls.pending


class AdRequest(BaseModel):
    script: str
    avatar_image_url: str
    voice_id: Optional[str] = None


class RenderJob(BaseModel):
    """Snapshot of a provider job as last observed."""

    id: Optional[str] = None
    status: RenderStatus = RenderStatus.created
    result_url: Optional[str] = None
    raw: Any = Field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Any) -> "RenderJob":
        """Build a job from provider JSON.

        A numeric id is kept as text; a result_url that is not a non-empty
        string is ignored. Anything else that does not fit raises
        UpstreamShapeError.
        """
        if not isinstance(payload, dict):
            return cls(raw=payload)
        job_id = payload.get("id")
        status = payload.get("status")
        result_url = payload.get("result_url")
        try:
            return cls(
                id=str(job_id) if job_id is not None else None,
                status=(
                    RenderStatus.from_provider(status)
                    if status is not None
                    else RenderStatus.created
                ),
                result_url=(
                    result_url
                    if isinstance(result_url, str) and result_url.strip()
                    else None
                ),
                raw=payload,
            )
        except PydanticValidationError as exc:
            raise UpstreamShapeError(
                "avatar-video", "Unexpected render job payload", payload=payload
            ) from exc

    @property
    def is_done(self) -> bool:
        return self.status is RenderStatus.done

    @property
    def is_failed(self) -> bool:
        return self.status is RenderStatus.error


class ResultUrlFound(BaseModel):
    kind: Literal["url_found"] = "url_found"
    url: str
    raw_payload: Any = None


class NoUrlFound(BaseModel):
    kind: Literal["no_url_found"] = "no_url_found"
    raw_payload: Any = None


VideoResult = Annotated[
    Union[ResultUrlFound, NoUrlFound], Field(discriminator="kind")
]


def extract_video_result(payload: Any) -> VideoResult:
    """Find the playable URL in a terminal render payload.

    Checks ``result_url``, then ``url``, then ``result.url``. A payload without
    any of them is still a successful response and is kept whole so it can be
    shown to the user.
    """
    if isinstance(payload, dict):
        nested: Dict[str, Any] = payload.get("result") or {}
        candidates = [
            payload.get("result_url"),
            payload.get("url"),
            nested.get("url") if isinstance(nested, dict) else None,
        ]
        for candidate in candidates:
            if isinstance(candidate, str) and candidate.strip():
                return ResultUrlFound(url=candidate, raw_payload=payload)
    return NoUrlFound(raw_payload=payload)
