"""
Accès typé à la session du navigateur (cookie signé géré par SessionMiddleware).

Au lieu de poser des clés arbitraires dans request.session, chaque usage passe
par une classe qui définit ses champs et ses transitions :

- AuthSession   : utilisateur connecté, méthode de connexion, retour après OAuth.
- CaptchaState  : NONE → ISSUED → VERIFIED, le drapeau VERIFIED étant consommé
                  une seule fois par l'envoi d'email.

Le cookie étant signé mais lisible par le client, la réponse du CAPTCHA n'y est
jamais stockée en clair : seule une empreinte HMAC (clé = SESSION_SECRET) est conservée.
"""

import enum
import hashlib
import hmac
from typing import Optional

from vitrine.config import settings


class AuthMethod(str, enum.Enum):
    GOOGLE = "google"
    LOCAL = "local"


class CaptchaPhase(str, enum.Enum):
    NONE = "none"
    ISSUED = "issued"
    VERIFIED = "verified"


class CaptchaExpired(Exception):
    """Aucun défi CAPTCHA en cours dans la session."""


class AuthSession:
    USER_ID = "user_id"
    METHOD = "auth_method"
    RETURN_TO = "return_to"
    OAUTH_STATE = "oauth_state"

    def __init__(self, session: dict):
        self._session = session

    @property
    def user_id(self) -> Optional[int]:
        return self._session.get(self.USER_ID)

    @property
    def method(self) -> Optional[AuthMethod]:
        value = self._session.get(self.METHOD)
        return AuthMethod(value) if value else None

    def login(self, user_id: int, method: AuthMethod) -> None:
        self._session[self.USER_ID] = user_id
        self._session[self.METHOD] = method.value

    def logout(self) -> None:
        self._session.clear()

    def begin_oauth(self, state: str, return_to: Optional[str]) -> None:
        self._session[self.OAUTH_STATE] = state
        if return_to:
            self._session[self.RETURN_TO] = return_to
        else:
            self._session.pop(self.RETURN_TO, None)

    def finish_oauth(self, state: Optional[str]) -> tuple[bool, Optional[str]]:
        """Retourne (state valide, chemin de retour) et retire les deux clés de la session."""
        expected = self._session.pop(self.OAUTH_STATE, None)
        return_to = self._session.pop(self.RETURN_TO, None)
        valid = bool(expected and state and hmac.compare_digest(expected, state))
        return valid, return_to


def normalize_captcha(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def _captcha_digest(answer: str) -> str:
    return hmac.new(
        settings.SESSION_SECRET.encode("utf-8"),
        normalize_captcha(answer).encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


class CaptchaState:
    DIGEST = "captcha_digest"
    VERIFIED = "captcha_verified"

    def __init__(self, session: dict):
        self._session = session

    @property
    def phase(self) -> CaptchaPhase:
        if self._session.get(self.VERIFIED):
            return CaptchaPhase.VERIFIED
        if self._session.get(self.DIGEST):
            return CaptchaPhase.ISSUED
        return CaptchaPhase.NONE

    @property
    def verified(self) -> bool:
        return self.phase == CaptchaPhase.VERIFIED

    def issue(self, answer: str) -> None:
        """Nouveau défi : remplace le précédent et annule une vérification antérieure."""
        self._session[self.DIGEST] = _captcha_digest(answer)
        self._session.pop(self.VERIFIED, None)

    def verify(self, user_input: Optional[str]) -> bool:
        """
        Compare la saisie (insensible à la casse et aux espaces autour) au défi en cours.
        Lève CaptchaExpired si aucun défi n'a été émis.
        """
        expected = self._session.get(self.DIGEST)
        if not expected:
            raise CaptchaExpired()
        if hmac.compare_digest(expected, _captcha_digest(user_input or "")):
            self._session[self.VERIFIED] = True
            return True
        return False

    def consume(self) -> None:
        self._session.pop(self.VERIFIED, None)
