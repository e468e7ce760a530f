"""
Schémas Pydantic pour les paramètres du site.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, field_validator

from vitrine.schemas.common import SuccessResponse


class SettingUpdate(BaseModel):
    key: str
    value: Optional[str]  # obligatoire, mais null accepté

    @field_validator("key")
    @classmethod
    def key_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Key is required")
        return v.strip()

    @field_validator("value", mode="before")
    @classmethod
    def stringify(cls, v):
        # Les valeurs sont stockées en texte : booléens et nombres sont convertis
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, bool):
            return "true" if v else "false"
        return str(v)


class SettingResponse(BaseModel):
    setting_id: int
    key: str
    value: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    model_config = {"from_attributes": True}


class SettingListResponse(SuccessResponse):
    settings: List[SettingResponse]
