"""
Proxy vers l'API Google Cloud Translation (v2).
La clé API reste côté serveur ; le navigateur n'appelle que /api/translate.
"""

import html
import logging
from typing import Optional

import requests

from vitrine.config import settings

logger = logging.getLogger(__name__)


class TranslationError(RuntimeError):
    """Échec de l'appel au fournisseur de traduction."""


def is_origin_allowed(origin: Optional[str]) -> bool:
    return bool(origin) and origin in settings.allowed_origins


def translate_text(text: str, target: str = "fr", origin: Optional[str] = None, source: str = "en") -> str:
    """
    Traduit un texte et retourne le résultat en texte brut (entités HTML décodées).
    Lève TranslationError en cas d'échec réseau ou de réponse inattendue.
    """
    if not settings.GOOGLE_CLOUD_API_KEY:
        raise TranslationError("Translation API key is not configured")

    headers = {"Content-Type": "application/json"}
    if origin:
        # La clé peut être restreinte par référent côté Google Cloud
        headers["Origin"] = origin
        headers["Referer"] = origin

    try:
        resp = requests.post(
            settings.TRANSLATE_API_URL,
            params={"key": settings.GOOGLE_CLOUD_API_KEY},
            json={"q": text, "target": target, "source": source, "format": "text"},
            headers=headers,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )
        resp.raise_for_status()
        payload = resp.json()
    except (requests.RequestException, ValueError) as exc:
        logger.error("Erreur lors de l'appel à l'API de traduction: %s", exc)
        raise TranslationError("Failed to translate text") from exc

    try:
        translated = payload["data"]["translations"][0]["translatedText"]
    except (KeyError, IndexError, TypeError) as exc:
        logger.error("Réponse inattendue de l'API de traduction: %s", payload)
        raise TranslationError("Failed to translate text") from exc

    return html.unescape(translated)
