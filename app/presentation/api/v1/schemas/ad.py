from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ScriptRequest(BaseModel):
    product: str


class ScriptResponse(BaseModel):
    script: str


class VideoRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    script: str
    avatar_image: str = Field(alias="avatarImage")
    voice_id: Optional[str] = Field(default=None, alias="voiceId")


class VoiceRequest(BaseModel):
    text: str


class AvatarOption(BaseModel):
    path: str
    url: str


class AvatarCatalogResponse(BaseModel):
    base_url: str
    groups: Dict[str, List[AvatarOption]]


class VoiceOption(BaseModel):
    id: str
    label: str


class VoiceCatalogResponse(BaseModel):
    default: str
    voices: List[VoiceOption]
