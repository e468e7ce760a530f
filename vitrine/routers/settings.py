"""
Router pour les paramètres du site.
L'endpoint public n'expose que les clés utiles au site (nom, contact, logo, vidéo).
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from vitrine.database import get_db
from vitrine.dependencies import require_admin
from vitrine.schemas.common import SuccessResponse
from vitrine.schemas.setting import SettingListResponse, SettingUpdate
from vitrine.services import setting_service

router = APIRouter(tags=["Paramètres"])


@router.get("/api/settings", response_model=SettingListResponse, summary="Paramètres publics")
def list_public_settings(db: Session = Depends(get_db)):
    return {"settings": setting_service.get_public_settings(db)}


@router.get(
    "/api/admin/settings",
    response_model=SettingListResponse,
    dependencies=[Depends(require_admin)],
    summary="Tous les paramètres",
)
def list_settings(db: Session = Depends(get_db)):
    return {"settings": setting_service.get_settings(db)}


@router.post(
    "/api/admin/settings",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Créer ou modifier un paramètre",
)
def save_setting(data: SettingUpdate, db: Session = Depends(get_db)):
    setting_service.set_setting(db, data.key, data.value)
    return {}


@router.delete(
    "/api/admin/settings/{key}",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Supprimer un paramètre",
)
def delete_setting(key: str, db: Session = Depends(get_db)):
    if not setting_service.delete_setting(db, key):
        raise HTTPException(status_code=404, detail="Setting not found")
    return {}
