"""
Schémas Pydantic pour le proxy de traduction et l'édition des fichiers de langue.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from vitrine.schemas.common import SuccessResponse


class TranslateRequest(BaseModel):
    text: Optional[str] = None
    targetLanguage: str = "fr"


class TranslateResponse(BaseModel):
    translation: str


class LocaleFile(BaseModel):
    name: str
    content: Dict[str, Any]


class TranslationPair(BaseModel):
    en: LocaleFile
    fr: LocaleFile


class TranslationListResponse(SuccessResponse):
    translations: List[TranslationPair]


class TranslationUpdate(BaseModel):
    locale: Optional[str] = None
    filename: Optional[str] = None
    content: Optional[Dict[str, Any]] = None
