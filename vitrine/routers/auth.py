"""
Router d'authentification : Google OAuth, identifiants locaux, statut et déconnexion.
L'utilisateur connecté est conservé dans la session (cookie signé).
"""

import logging
import secrets
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from vitrine.config import settings
from vitrine.database import get_db
from vitrine.dependencies import get_current_user
from vitrine.models.user import User
from vitrine.schemas.auth import AuthStatusResponse, AuthUser, LoginRequest, LoginResponse
from vitrine.schemas.common import SuccessResponse
from vitrine.services import google_auth_service, user_service
from vitrine.services.google_auth_service import GoogleAuthError
from vitrine.session_state import AuthMethod, AuthSession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Authentification"])

DEFAULT_RETURN_TO = "/admin"


def frontend_base_url(request: Request) -> str:
    """Derrière un proxy, l'URL publique vient des en-têtes X-Forwarded-*, sinon de FRONTEND_URL."""
    forwarded_host = request.headers.get("x-forwarded-host")
    if forwarded_host:
        protocol = request.headers.get("x-forwarded-proto") or "https"
        return f"{protocol}://{forwarded_host}"
    return (settings.FRONTEND_URL or "http://localhost:3010").rstrip("/")


def normalize_return_to(return_to: Optional[str]) -> str:
    """Chemin relatif commençant par un seul « / » (jamais une URL vers un autre domaine)."""
    path = (return_to or DEFAULT_RETURN_TO).strip()
    return "/" + path.lstrip("/\\")


@router.get("/google", summary="Connexion Google")
def google_login(request: Request, returnTo: Optional[str] = None):
    if not google_auth_service.is_configured():
        raise HTTPException(status_code=503, detail="Google authentication is not configured")

    state = secrets.token_urlsafe(24)
    AuthSession(request.session).begin_oauth(state, returnTo)
    return RedirectResponse(google_auth_service.authorization_url(state), status_code=302)


@router.get("/google/callback", summary="Retour de Google")
def google_callback(
    request: Request,
    code: Optional[str] = None,
    state: Optional[str] = None,
    error: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """
    Termine la connexion Google puis redirige vers le frontend.
    En cas d'échec : redirection vers /admin/login?error=...
    """
    auth = AuthSession(request.session)
    valid_state, return_to = auth.finish_oauth(state)
    base_url = frontend_base_url(request)

    def failure(reason: str) -> RedirectResponse:
        return RedirectResponse(f"{base_url}/admin/login?error={quote(reason)}", status_code=302)

    if error:
        logger.warning("Connexion Google refusée: %s", error)
        return failure(error)
    if not valid_state or not code:
        logger.warning("Retour Google invalide (state ou code manquant)")
        return failure("invalid_state")

    try:
        profile = google_auth_service.fetch_profile(google_auth_service.exchange_code(code))
    except GoogleAuthError:
        return failure("authentication_failed")

    try:
        user = user_service.upsert_user_from_google(db, profile)
    except ValueError as e:
        logger.warning("Connexion Google impossible pour %s: %s", profile.email, e)
        return failure("account_conflict")
    auth.login(user.user_id, AuthMethod.GOOGLE)
    logger.info("Connexion Google : %s", user.email)
    return RedirectResponse(f"{base_url}{normalize_return_to(return_to)}", status_code=302)


@router.post("/login", response_model=LoginResponse, summary="Connexion par email et mot de passe")
def local_login(data: LoginRequest, request: Request, db: Session = Depends(get_db)):
    if not data.email or not data.password:
        raise HTTPException(status_code=400, detail="Email and password are required")

    user, reason = user_service.authenticate_local(db, data.email, data.password)
    if user is None:
        raise HTTPException(status_code=401, detail=reason)

    AuthSession(request.session).login(user.user_id, AuthMethod.LOCAL)
    logger.info("Connexion locale : %s", user.email)
    return {"user": AuthUser.from_user(user)}


@router.get("/logout", response_model=SuccessResponse, summary="Déconnexion")
def logout(request: Request):
    AuthSession(request.session).logout()
    return {}


@router.get(
    "/status",
    response_model=AuthStatusResponse,
    response_model_exclude_none=True,
    summary="Utilisateur connecté",
)
def auth_status(user: Optional[User] = Depends(get_current_user)):
    if user is None:
        return {"authenticated": False}
    return {"authenticated": True, "user": AuthUser.from_user(user)}
