from __future__ import annotations

from typing import Protocol

from app.core.pyd_schemas import RenderJob


class IAvatarVideoProvider(Protocol):
    """Talking-avatar video provider with an asynchronous job protocol.

    Both calls return the job as the provider currently reports it. Non-success
    HTTP statuses raise UpstreamTransportError; undecodable bodies raise
    UpstreamShapeError.
    """

    async def create_job(
        self, *, script: str, source_url: str, voice_id: str
    ) -> RenderJob:
        ...

    async def get_job(self, job_id: str) -> RenderJob:
        ...
