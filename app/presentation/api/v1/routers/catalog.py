"""
Avatar and voice catalog endpoints
"""

from fastapi import APIRouter

from app.core.catalog import AVATAR_GROUPS, VOICES, build_avatar_url
from app.core.config import settings
from app.presentation.api.v1.schemas.ad import (
    AvatarCatalogResponse,
    AvatarOption,
    VoiceCatalogResponse,
    VoiceOption,
)

router = APIRouter(tags=["catalog"])


@router.get("/avatars", response_model=AvatarCatalogResponse)
async def list_avatars():
    """Stock avatars grouped by style, with the absolute URL sent to the provider"""
    return AvatarCatalogResponse(
        base_url=settings.avatar_base_url,
        groups={
            group: [AvatarOption(path=p, url=build_avatar_url(p)) for p in paths]
            for group, paths in AVATAR_GROUPS.items()
        },
    )


@router.get("/voices", response_model=VoiceCatalogResponse)
async def list_voices():
    return VoiceCatalogResponse(
        default=settings.default_voice_id,
        voices=[VoiceOption(id=v.id, label=v.label) for v in VOICES],
    )
