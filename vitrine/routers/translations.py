"""
Router de traduction : proxy vers Google Translate et édition des fichiers de langue du site.
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from vitrine.dependencies import require_admin, require_authenticated
from vitrine.schemas.common import SuccessResponse
from vitrine.schemas.translation import (
    TranslateRequest,
    TranslateResponse,
    TranslationListResponse,
    TranslationUpdate,
)
from vitrine.services import locale_service, translation_service
from vitrine.services.locale_service import LocaleFileNotFound
from vitrine.services.translation_service import TranslationError

router = APIRouter(prefix="/api", tags=["Traduction"])


@router.post("/translate", response_model=TranslateResponse, summary="Traduire un texte")
def translate(data: TranslateRequest, request: Request):
    """Réservé aux pages servies depuis une origine autorisée (en-tête Origin)."""
    origin = request.headers.get("origin")
    if not translation_service.is_origin_allowed(origin):
        raise HTTPException(status_code=403, detail="Origin not allowed")
    if not data.text or not data.text.strip():
        raise HTTPException(status_code=400, detail="Text is required")

    try:
        translated = translation_service.translate_text(data.text, data.targetLanguage, origin)
    except TranslationError:
        raise HTTPException(status_code=500, detail="Failed to translate text")
    return {"translation": translated}


@router.get(
    "/admin/translations",
    response_model=TranslationListResponse,
    dependencies=[Depends(require_authenticated)],
    summary="Lister les fichiers de langue",
)
def list_translations():
    return {"translations": locale_service.list_translation_pairs()}


@router.post(
    "/admin/translations",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Modifier un fichier de langue",
)
def update_translation(data: TranslationUpdate):
    if not data.locale or not data.filename or data.content is None:
        raise HTTPException(status_code=400, detail="Locale, filename and content are required")
    try:
        locale_service.update_translation_file(data.locale, data.filename, data.content)
    except LocaleFileNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {}
