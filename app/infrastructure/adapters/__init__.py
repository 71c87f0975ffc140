from .script_writer_groq import GroqScriptWriter
from .speech_synth_elevenlabs import ElevenLabsSpeechSynthesizer
from .avatar_video_did import DIDAvatarVideoProvider
from .system_clock import SystemClock

__all__ = [
    "GroqScriptWriter",
    "ElevenLabsSpeechSynthesizer",
    "DIDAvatarVideoProvider",
    "SystemClock",
]
