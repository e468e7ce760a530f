"""
Schémas Pydantic pour la gestion des utilisateurs (administration).
Le hash du mot de passe n'est jamais exposé.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, field_validator

from vitrine.schemas.common import SuccessResponse, blank_to_none, required_text


class UserCreate(BaseModel):
    first_name: str
    last_name: str
    email: EmailStr
    admin: bool = False
    password: Optional[str] = None  # compte local si fourni, sinon connexion Google uniquement

    @field_validator("first_name", "last_name")
    @classmethod
    def not_empty(cls, v: str, info) -> str:
        return required_text(v, info.field_name)

    @field_validator("password", mode="before")
    @classmethod
    def optional_blank(cls, v):
        return blank_to_none(v)


class UserUpdate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None
    admin: Optional[bool] = None
    password: Optional[str] = None

    @field_validator("first_name", "last_name")
    @classmethod
    def not_empty(cls, v: Optional[str], info) -> Optional[str]:
        return required_text(v, info.field_name)

    @field_validator("password", mode="before")
    @classmethod
    def optional_blank(cls, v):
        return blank_to_none(v)


class AdminStatusUpdate(BaseModel):
    admin: bool


class UserResponse(BaseModel):
    user_id: int
    first_name: str
    last_name: str
    email: str
    admin: bool
    google_id: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    model_config = {"from_attributes": True}


class UserListResponse(SuccessResponse):
    users: List[UserResponse]
