"""
Schémas Pydantic de l'assistant d'installation.
"""

from pydantic import BaseModel, EmailStr, field_validator

from vitrine.schemas.common import required_text


class SetupStatus(BaseModel):
    hasAdmin: bool
    hasSettings: bool


class AdminSetup(BaseModel):
    first_name: str
    last_name: str
    email: EmailStr
    password: str

    @field_validator("first_name", "last_name")
    @classmethod
    def not_empty(cls, v: str, info) -> str:
        return required_text(v, info.field_name)

    @field_validator("password")
    @classmethod
    def password_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Password is required")
        return v
