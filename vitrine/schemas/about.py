"""
Schémas Pydantic pour les sections « À propos ».
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from vitrine.schemas.common import SuccessResponse, blank_to_none, required_text


class AboutCreate(BaseModel):
    title: str
    description: str
    fr_title: Optional[str] = None
    fr_description: Optional[str] = None
    image_url: Optional[str] = None
    display_order: Optional[int] = None  # calculé (max + 1) si absent

    @field_validator("title", "description")
    @classmethod
    def not_empty(cls, v: str, info) -> str:
        return required_text(v, info.field_name)

    @field_validator("fr_title", "fr_description", "image_url", mode="before")
    @classmethod
    def optional_blank(cls, v):
        return blank_to_none(v)


class AboutUpdate(BaseModel):
    """Mise à jour partielle : seuls les champs fournis sont modifiés, null efface."""
    title: Optional[str] = None
    description: Optional[str] = None
    fr_title: Optional[str] = None
    fr_description: Optional[str] = None
    image_url: Optional[str] = None
    display_order: Optional[int] = None

    @field_validator("title", "description")
    @classmethod
    def not_empty(cls, v: Optional[str], info) -> Optional[str]:
        return required_text(v, info.field_name)

    @field_validator("fr_title", "fr_description", "image_url", mode="before")
    @classmethod
    def optional_blank(cls, v):
        return blank_to_none(v)


class AboutResponse(BaseModel):
    about_id: int
    title: str
    description: str
    fr_title: Optional[str]
    fr_description: Optional[str]
    image_url: Optional[str]
    display_order: int
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    model_config = {"from_attributes": True}


class AboutListResponse(SuccessResponse):
    sections: List[AboutResponse]


class AboutOrderItem(BaseModel):
    about_id: int
    display_order: Optional[int] = None


class AboutReorder(BaseModel):
    """L'ordre de la liste fait foi : les positions sont renumérotées 1..N."""
    sections: List[AboutOrderItem] = Field(min_length=1)
