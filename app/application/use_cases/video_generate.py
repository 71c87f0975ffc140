from __future__ import annotations

import logging
from typing import Optional

from app.application.interfaces import IAvatarVideoProvider, IClock
from app.application.polling import PollPolicy
from app.core.config import settings
from app.core.exceptions import (
    RenderFailedError,
    RenderTimeoutError,
    UpstreamShapeError,
)
from app.core.pyd_schemas import AdRequest, RenderJob

logger = logging.getLogger(__name__)


class GenerateVideoUseCase:
    """Drive one avatar render job to a terminal state.

    The provider's create/poll protocol is hidden behind a single awaitable:
    ``execute`` returns the finished job or raises. Nothing is retried; each
    failure mode has its own exception.
    """

    def __init__(
        self,
        provider: IAvatarVideoProvider,
        clock: IClock,
        *,
        policy: Optional[PollPolicy] = None,
        default_voice_id: Optional[str] = None,
    ) -> None:
        self._provider = provider
        self._clock = clock
        self._policy = policy or PollPolicy.from_settings()
        self._default_voice_id = default_voice_id or settings.default_voice_id

    async def execute(self, request: AdRequest) -> RenderJob:
        voice_id = request.voice_id or self._default_voice_id
        started = self._clock.monotonic()

        job = await self._provider.create_job(
            script=request.script,
            source_url=request.avatar_image_url,
            voice_id=voice_id,
        )
        logger.info("Render job created: id=%s status=%s", job.id, job.status.value)

        if job.result_url or job.is_done:
            return job

        if not job.id:
            raise UpstreamShapeError(
                "avatar-video", "Create response has no job id", payload=job.raw
            )

        job_id = job.id
        for attempt, delay in enumerate(self._policy.delays(), start=1):
            await self._clock.sleep(delay)
            job = await self._provider.get_job(job_id)
            logger.debug(
                "Render job %s poll %d/%d: %s",
                job_id,
                attempt,
                self._policy.max_attempts,
                job.status.value,
            )

            if job.is_done and job.result_url:
                logger.info(
                    "Render job %s done after %d polls (%.1fs)",
                    job_id,
                    attempt,
                    self._clock.monotonic() - started,
                )
                return job

            if job.is_failed:
                raise RenderFailedError(job.raw, job_id=job_id)

        logger.warning(
            "Render job %s not finished after %d polls",
            job_id,
            self._policy.max_attempts,
        )
        raise RenderTimeoutError(self._policy.max_attempts, job_id=job_id)
