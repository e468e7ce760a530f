"""
Router pour l'upload des médias : images des contenus, vidéo d'accueil et logo.
Les fichiers sont enregistrés sous PUBLIC_DIR et servis en statique.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from sqlalchemy.orm import Session

from vitrine.database import get_db
from vitrine.dependencies import require_admin
from vitrine.schemas.common import SuccessResponse
from vitrine.schemas.upload import ImageUploadResponse, LogoResponse, VideoUploadResponse
from vitrine.services import avatar_service, setting_service, upload_service
from vitrine.services.upload_service import FileTooLarge, InvalidFileType

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["Médias"], dependencies=[Depends(require_admin)])

DEFAULT_SITE_NAME = "Company Name"


async def read_bounded(file: UploadFile, kind: str) -> bytes:
    """
    Lit au plus max_bytes + 1 octets : un fichier trop gros n'est jamais chargé en entier.
    La taille annoncée, quand elle est connue, est vérifiée avant toute lecture.
    """
    if file.size is not None:
        upload_service.check_size(file.size, kind)
    return await file.read(upload_service.max_bytes(kind) + 1)


async def _store(file: Optional[UploadFile], kind: str) -> str:
    """Lit le fichier reçu et l'enregistre. Traduit les erreurs de validation en 400 / 413."""
    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded")

    try:
        content = await read_bounded(file, kind)
        return upload_service.save_upload(content, kind)
    except FileTooLarge as e:
        raise HTTPException(status_code=413, detail=str(e))
    except InvalidFileType as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/upload/team-image", response_model=ImageUploadResponse, summary="Photo d'un membre")
async def upload_team_image(image: Optional[UploadFile] = File(None)):
    return {"imagePath": await _store(image, "team")}


@router.post("/upload/about-image", response_model=ImageUploadResponse, summary="Image d'une section")
async def upload_about_image(image: Optional[UploadFile] = File(None)):
    return {"imagePath": await _store(image, "about")}


@router.post("/upload/project-image", response_model=ImageUploadResponse, summary="Image d'un projet")
async def upload_project_image(image: Optional[UploadFile] = File(None)):
    return {"imagePath": await _store(image, "project")}


@router.post("/hero-video", response_model=VideoUploadResponse, summary="Vidéo d'accueil")
async def upload_hero_video(video: Optional[UploadFile] = File(None), db: Session = Depends(get_db)):
    """Enregistre la vidéo et met à jour le paramètre hero_video_path."""
    path = await _store(video, "hero-video")
    setting_service.set_setting(db, "hero_video_path", path)
    return {"videoPath": path}


@router.delete("/hero-video", response_model=SuccessResponse, summary="Retirer la vidéo d'accueil")
def remove_hero_video(db: Session = Depends(get_db)):
    """Retire la vidéo du site (le fichier reste sur le disque)."""
    setting_service.delete_setting(db, "hero_video_path")
    return {}


@router.post("/logo", response_model=LogoResponse, summary="Logo du site")
async def upload_logo(logo: Optional[UploadFile] = File(None), db: Session = Depends(get_db)):
    """
    Sans fichier, un logo à initiales est généré à partir du nom du site.
    Dans les deux cas, logo_path est mis à jour.
    """
    if logo is not None:
        path = await _store(logo, "logo")
    else:
        site_name = setting_service.get_setting(db, "site_name") or DEFAULT_SITE_NAME
        path = avatar_service.save_avatar(site_name, "logo", size=200, height=100)

    setting_service.set_setting(db, "logo_path", path)
    return {"path": path}
