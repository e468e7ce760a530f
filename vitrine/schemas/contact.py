"""
Schémas Pydantic pour le formulaire de contact et le CAPTCHA.
"""

from typing import Optional

from pydantic import BaseModel, field_validator

from vitrine.schemas.common import blank_to_none


class CaptchaDataUrlResponse(BaseModel):
    dataUrl: str
    width: int
    height: int


class CaptchaVerifyRequest(BaseModel):
    captchaInput: Optional[str] = None


class ContactMessage(BaseModel):
    """Tous les champs sont optionnels : la route vérifie d'abord le CAPTCHA, puis leur présence et le format de l'email."""
    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None

    @field_validator("name", "email", "subject", "message", mode="before")
    @classmethod
    def optional_blank(cls, v):
        return blank_to_none(v)

    @property
    def is_complete(self) -> bool:
        return bool(self.name and self.email and self.message)
