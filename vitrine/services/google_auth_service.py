"""
Connexion via Google (OAuth 2.0, flux « authorization code »).

1. authorization_url()  → redirection vers l'écran de consentement Google
2. exchange_code()      → échange du code contre un access token
3. fetch_profile()      → profil OpenID (sub, email, given_name, family_name)
"""

import logging
from urllib.parse import urlencode

import requests

from vitrine.config import settings
from vitrine.schemas.auth import GoogleProfile

logger = logging.getLogger(__name__)

AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
TOKEN_URL = "https://oauth2.googleapis.com/token"
USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"
SCOPES = "openid email profile"


class GoogleAuthError(RuntimeError):
    pass


def is_configured() -> bool:
    return bool(settings.GOOGLE_CLIENT_ID and settings.GOOGLE_CLIENT_SECRET)


def authorization_url(state: str) -> str:
    params = {
        "client_id": settings.GOOGLE_CLIENT_ID,
        "redirect_uri": settings.GOOGLE_CALLBACK_URL,
        "response_type": "code",
        "scope": SCOPES,
        "state": state,
        "prompt": "select_account",
    }
    return f"{AUTHORIZE_URL}?{urlencode(params)}"


def exchange_code(code: str) -> str:
    """Retourne l'access token obtenu pour ce code. Lève GoogleAuthError sinon."""
    try:
        resp = requests.post(
            TOKEN_URL,
            data={
                "code": code,
                "client_id": settings.GOOGLE_CLIENT_ID,
                "client_secret": settings.GOOGLE_CLIENT_SECRET,
                "redirect_uri": settings.GOOGLE_CALLBACK_URL,
                "grant_type": "authorization_code",
            },
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )
        resp.raise_for_status()
        token = resp.json().get("access_token")
    except (requests.RequestException, ValueError) as exc:
        logger.error("Échange du code Google impossible: %s", exc)
        raise GoogleAuthError("Token exchange failed") from exc

    if not token:
        raise GoogleAuthError("No access token in Google response")
    return token


def fetch_profile(access_token: str) -> GoogleProfile:
    try:
        resp = requests.get(
            USERINFO_URL,
            headers={"Authorization": f"Bearer {access_token}"},
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )
        resp.raise_for_status()
        data = resp.json()
    except (requests.RequestException, ValueError) as exc:
        logger.error("Lecture du profil Google impossible: %s", exc)
        raise GoogleAuthError("Profile request failed") from exc

    if not data.get("sub") or not data.get("email"):
        raise GoogleAuthError("Incomplete Google profile")
    return GoogleProfile.from_userinfo(data)
