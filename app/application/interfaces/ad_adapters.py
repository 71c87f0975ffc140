from __future__ import annotations

from typing import Protocol, runtime_checkable

from .script_writer import IScriptWriter
from .speech_synth import ISpeechSynthesizer
from .avatar_video import IAvatarVideoProvider
from .utils import IClock


@runtime_checkable
class IAdStudioAdapters(Protocol):
    script_writer: IScriptWriter
    speech_synth: ISpeechSynthesizer
    avatar_video: IAvatarVideoProvider
    clock: IClock
