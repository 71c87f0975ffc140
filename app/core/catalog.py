"""
Stock avatars and voices offered to the user.

Avatar entries are relative asset paths served by the front-end deployment;
the video provider downloads them itself, so they must be turned into absolute
URLs with :func:`build_avatar_url` before being sent upstream.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from app.core.config import settings

AVATAR_GROUPS: Dict[str, List[str]] = {
    "male": ["/avatars/male/male1.jpg", "/avatars/male/male2.jpg"],
    "female": ["/avatars/female/female1.png", "/avatars/female/female2.png"],
    "business": ["/avatars/business/business1.png"],
}


@dataclass(frozen=True, slots=True)
class Voice:
    id: str
    label: str


VOICES: List[Voice] = [
    Voice("en-US-JennyNeural", "Female - Jenny (US)"),
    Voice("en-US-AriaNeural", "Female - Aria (US)"),
    Voice("en-US-GuyNeural", "Male - Guy (US)"),
    Voice("en-US-DavisNeural", "Male - Davis (US)"),
    Voice("en-IN-NeerjaNeural", "Female - Neerja (IN)"),
    Voice("en-IN-PrabhatNeural", "Male - Prabhat (IN)"),
]


def build_avatar_url(path: str, base_url: str | None = None) -> str:
    """Join the deployment base URL and a relative avatar path with one slash."""
    if path.startswith(("http://", "https://")):
        return path
    base = (base_url if base_url is not None else settings.avatar_base_url).strip()
    return f"{base.rstrip('/')}/{path.strip().lstrip('/')}"


def all_avatar_paths() -> List[str]:
    return [path for paths in AVATAR_GROUPS.values() for path in paths]


def find_voice(voice_id: str) -> Voice | None:
    return next((v for v in VOICES if v.id == voice_id), None)


def selection_warnings(avatar: str | None, voice_id: str | None) -> List[str]:
    """Notes about selections outside the stock catalog (still allowed)."""
    warnings: List[str] = []
    if avatar and not avatar.startswith(("http://", "https://")):
        if avatar not in all_avatar_paths():
            warnings.append(f"Avatar {avatar!r} is not a stock avatar")
    if voice_id and find_voice(voice_id) is None:
        warnings.append(f"Voice {voice_id!r} is not in the voice list")
    return warnings
