from __future__ import annotations
from typing import Protocol


class ISpeechSynthesizer(Protocol):
    """Text-to-speech interface."""

    async def synthesize(self, text: str) -> bytes:
        """Synthesize speech and return the whole audio/mpeg payload."""
        ...
