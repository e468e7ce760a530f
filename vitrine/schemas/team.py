"""
Schémas Pydantic pour les membres de l'équipe.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from vitrine.schemas.common import SuccessResponse, blank_to_none, required_text


class TeamCreate(BaseModel):
    name: str
    title: str
    bio: Optional[str] = None
    fr_title: Optional[str] = None
    fr_bio: Optional[str] = None
    email: Optional[EmailStr] = None
    image_url: Optional[str] = None  # avatar généré si absent
    display_order: Optional[int] = None

    @field_validator("name", "title")
    @classmethod
    def not_empty(cls, v: str, info) -> str:
        return required_text(v, info.field_name)

    @field_validator("bio", "fr_title", "fr_bio", "email", "image_url", mode="before")
    @classmethod
    def optional_blank(cls, v):
        return blank_to_none(v)


class TeamUpdate(BaseModel):
    name: Optional[str] = None
    title: Optional[str] = None
    bio: Optional[str] = None
    fr_title: Optional[str] = None
    fr_bio: Optional[str] = None
    email: Optional[EmailStr] = None
    image_url: Optional[str] = None  # null ou "" : remplacé par un avatar généré
    display_order: Optional[int] = None

    @field_validator("name", "title")
    @classmethod
    def not_empty(cls, v: Optional[str], info) -> Optional[str]:
        return required_text(v, info.field_name)

    @field_validator("bio", "fr_title", "fr_bio", "email", "image_url", mode="before")
    @classmethod
    def optional_blank(cls, v):
        return blank_to_none(v)


class TeamResponse(BaseModel):
    team_id: int
    name: str
    title: str
    bio: Optional[str]
    fr_title: Optional[str]
    fr_bio: Optional[str]
    email: Optional[str]
    image_url: Optional[str]
    display_order: int
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    model_config = {"from_attributes": True}


class TeamListResponse(SuccessResponse):
    members: List[TeamResponse]


class TeamOrderItem(BaseModel):
    team_id: int
    display_order: Optional[int] = None


class TeamReorder(BaseModel):
    members: List[TeamOrderItem] = Field(min_length=1)
