import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.application.use_cases.video_generate import GenerateVideoUseCase
from app.core.exceptions import unexpected_errors_as
from app.core.pyd_schemas import AdRequest
from app.presentation.api.v1.dependencies.ad import get_generate_video_use_case
from app.presentation.api.v1.schemas.ad import VideoRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["video"])


@router.post("/video")
async def generate_video(
    payload: VideoRequest,
    use_case: GenerateVideoUseCase = Depends(get_generate_video_use_case),
):
    """Render a talking-avatar video and wait for it.

    Returns the provider's terminal job payload. Errors: the provider's own
    status and body, 500 when the provider reports a failed render or the
    handler crashes, 504 when the poll budget runs out.
    """
    ad_request = AdRequest(
        script=payload.script,
        avatar_image_url=payload.avatar_image,
        voice_id=payload.voice_id,
    )
    logger.info("Video requested for avatar %s", ad_request.avatar_image_url)
    with unexpected_errors_as("Video generation"):
        job = await use_case.execute(ad_request)
    return JSONResponse(content=job.raw)
