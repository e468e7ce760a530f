"""
Router pour les sections « À propos » : liste publique et gestion par les administrateurs.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from vitrine.database import get_db
from vitrine.dependencies import require_admin
from vitrine.schemas.about import AboutCreate, AboutListResponse, AboutReorder, AboutUpdate
from vitrine.schemas.common import CreatedResponse, SuccessResponse
from vitrine.services import about_service

router = APIRouter(tags=["À propos"])


@router.get("/api/about", response_model=AboutListResponse, summary="Lister les sections")
def list_sections(db: Session = Depends(get_db)):
    return {"sections": about_service.get_sections(db)}


@router.post(
    "/api/admin/about",
    response_model=CreatedResponse,
    status_code=201,
    dependencies=[Depends(require_admin)],
    summary="Créer une section",
)
def create_section(data: AboutCreate, db: Session = Depends(get_db)):
    section = about_service.create_section(db, data)
    return {"id": section.about_id}


# Déclarée avant /{about_id} pour que « reorder » ne soit pas lu comme un identifiant
@router.put(
    "/api/admin/about/reorder",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Réordonner les sections",
)
def reorder_sections(data: AboutReorder, db: Session = Depends(get_db)):
    """L'ordre de la liste envoyée devient l'ordre d'affichage (1..N)."""
    about_service.reorder_sections(db, [item.about_id for item in data.sections])
    return {}


@router.put(
    "/api/admin/about/{about_id}",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Modifier une section",
)
def update_section(about_id: int, data: AboutUpdate, db: Session = Depends(get_db)):
    if about_service.update_section(db, about_id, data) is None:
        raise HTTPException(status_code=404, detail="About section not found")
    return {}


@router.delete(
    "/api/admin/about/{about_id}",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Supprimer une section",
)
def delete_section(about_id: int, db: Session = Depends(get_db)):
    if not about_service.delete_section(db, about_id):
        raise HTTPException(status_code=404, detail="About section not found")
    return {}
