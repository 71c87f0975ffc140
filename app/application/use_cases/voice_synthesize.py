from __future__ import annotations

from app.application.interfaces import ISpeechSynthesizer


class SynthesizeVoiceUseCase:
    """Turn text into a buffered audio/mpeg payload."""

    def __init__(self, synthesizer: ISpeechSynthesizer) -> None:
        self._synthesizer = synthesizer

    async def execute(self, text: str) -> bytes:
        return await self._synthesizer.synthesize(text)
