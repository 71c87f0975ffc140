from app.application.polling import PollPolicy
from app.application.use_cases.script_generate import GenerateScriptUseCase
from app.application.use_cases.video_generate import GenerateVideoUseCase
from app.application.use_cases.voice_synthesize import SynthesizeVoiceUseCase
from app.infrastructure.adapters.bundles.ad_studio import get_ad_studio_adapter_bundle


def get_generate_script_use_case() -> GenerateScriptUseCase:
    adapters = get_ad_studio_adapter_bundle()
    return GenerateScriptUseCase(adapters.script_writer)


def get_synthesize_voice_use_case() -> SynthesizeVoiceUseCase:
    adapters = get_ad_studio_adapter_bundle()
    return SynthesizeVoiceUseCase(adapters.speech_synth)


def get_generate_video_use_case() -> GenerateVideoUseCase:
    """Compose a fresh GenerateVideoUseCase per request from settings."""
    adapters = get_ad_studio_adapter_bundle()
    return GenerateVideoUseCase(
        adapters.avatar_video,
        adapters.clock,
        policy=PollPolicy.from_settings(),
    )
