"""
Router pour les membres de l'équipe.

La modification d'un profil est ouverte à tout utilisateur connecté pour
son propre profil (email identique) ; le reste est réservé aux administrateurs.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from vitrine.database import get_db
from vitrine.dependencies import require_admin, require_authenticated
from vitrine.models.user import User
from vitrine.schemas.common import CreatedResponse, SuccessResponse
from vitrine.schemas.team import TeamCreate, TeamListResponse, TeamReorder, TeamUpdate
from vitrine.services import team_service

router = APIRouter(tags=["Équipe"])


@router.get("/api/team", response_model=TeamListResponse, summary="Lister les membres")
def list_members(db: Session = Depends(get_db)):
    return {"members": team_service.get_members(db)}


@router.post(
    "/api/admin/team",
    response_model=CreatedResponse,
    status_code=201,
    dependencies=[Depends(require_admin)],
    summary="Ajouter un membre",
)
def create_member(data: TeamCreate, db: Session = Depends(get_db)):
    """Ajoute un membre. Sans photo, un avatar à initiales est généré."""
    member = team_service.create_member(db, data)
    return {"id": member.team_id}


@router.put(
    "/api/admin/team/reorder",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Réordonner les membres",
)
def reorder_members(data: TeamReorder, db: Session = Depends(get_db)):
    team_service.reorder_members(db, [item.team_id for item in data.members])
    return {}


@router.put("/api/admin/team/{team_id}", response_model=SuccessResponse, summary="Modifier un membre")
def update_member(
    team_id: int,
    data: TeamUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(require_authenticated),
):
    try:
        member = team_service.update_member(db, team_id, data, editor=user)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    if member is None:
        raise HTTPException(status_code=404, detail="Team member not found")
    return {}


@router.delete(
    "/api/admin/team/{team_id}",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Supprimer un membre",
)
def delete_member(team_id: int, db: Session = Depends(get_db)):
    if not team_service.delete_member(db, team_id):
        raise HTTPException(status_code=404, detail="Team member not found")
    return {}
