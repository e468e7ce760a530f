"""
Schémas Pydantic pour l'authentification (Google OAuth et identifiants locaux).
"""

from typing import Optional

from pydantic import BaseModel

from vitrine.schemas.common import SuccessResponse


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class GoogleProfile(BaseModel):
    """Profil renvoyé par l'endpoint userinfo de Google (OpenID Connect)."""
    id: str
    email: str
    given_name: str = ""
    family_name: str = ""

    @classmethod
    def from_userinfo(cls, data: dict) -> "GoogleProfile":
        return cls(
            id=data["sub"],
            email=data["email"],
            given_name=data.get("given_name") or "",
            family_name=data.get("family_name") or "",
        )


class AuthUser(BaseModel):
    id: int
    email: str
    firstName: str
    lastName: str
    isAdmin: bool

    @classmethod
    def from_user(cls, user) -> "AuthUser":
        return cls(
            id=user.user_id,
            email=user.email,
            firstName=user.first_name,
            lastName=user.last_name,
            isAdmin=bool(user.admin),
        )


class AuthStatusResponse(BaseModel):
    authenticated: bool
    user: Optional[AuthUser] = None


class LoginResponse(SuccessResponse):
    user: AuthUser
