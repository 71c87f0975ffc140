from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.application.use_cases.voice_synthesize import SynthesizeVoiceUseCase
from app.core.exceptions import unexpected_errors_as
from app.presentation.api.v1.dependencies.ad import get_synthesize_voice_use_case
from app.presentation.api.v1.schemas.ad import VoiceRequest

router = APIRouter(tags=["voice"])


@router.post("/voice", response_class=Response)
async def synthesize_voice(
    payload: VoiceRequest,
    use_case: SynthesizeVoiceUseCase = Depends(get_synthesize_voice_use_case),
):
    with unexpected_errors_as("Voice synthesis"):
        audio = await use_case.execute(payload.text)
    return Response(content=audio, media_type="audio/mpeg")
