from .script_writer import IScriptWriter
from .speech_synth import ISpeechSynthesizer
from .avatar_video import IAvatarVideoProvider
from .utils import IClock
from .ad_adapters import IAdStudioAdapters

__all__ = [
    "IScriptWriter",
    "ISpeechSynthesizer",
    "IAvatarVideoProvider",
    "IClock",
    "IAdStudioAdapters",
]
