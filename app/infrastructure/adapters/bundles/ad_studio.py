from __future__ import annotations

from types import SimpleNamespace
from app.application.interfaces.ad_adapters import IAdStudioAdapters
from app.infrastructure.adapters import (
    GroqScriptWriter,
    ElevenLabsSpeechSynthesizer,
    DIDAvatarVideoProvider,
    SystemClock,
)


def get_ad_studio_adapter_bundle() -> IAdStudioAdapters:
    """Provide the concrete provider adapters.

    Built per request so no adapter state is shared between invocations.
    """
    return SimpleNamespace(
        script_writer=GroqScriptWriter(),
        speech_synth=ElevenLabsSpeechSynthesizer(),
        avatar_video=DIDAvatarVideoProvider(),
        clock=SystemClock(),
    )
