"""
Router pour la gestion des utilisateurs de l'administration.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from vitrine.database import get_db
from vitrine.dependencies import require_admin
from vitrine.models.user import User
from vitrine.schemas.common import CreatedResponse, SuccessResponse
from vitrine.schemas.user import AdminStatusUpdate, UserCreate, UserListResponse, UserUpdate
from vitrine.services import user_service

router = APIRouter(prefix="/api/admin/users", tags=["Utilisateurs"])


@router.get("", response_model=UserListResponse, summary="Lister les utilisateurs")
def list_users(db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    return {"users": user_service.get_users(db)}


@router.post("", response_model=CreatedResponse, status_code=201, summary="Créer un utilisateur")
def create_user(data: UserCreate, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    """Crée un utilisateur. Avec un mot de passe, il pourra se connecter sans Google."""
    try:
        user = user_service.create_user(db, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"id": user.user_id}


@router.put("/{user_id}", response_model=SuccessResponse, summary="Modifier un utilisateur")
def update_user(
    user_id: int,
    data: UserUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    if admin.user_id == user_id and data.admin is False:
        raise HTTPException(status_code=400, detail="Cannot remove admin status from your own account")
    try:
        user = user_service.update_user(db, user_id, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return {}


@router.delete("/{user_id}", response_model=SuccessResponse, summary="Supprimer un utilisateur")
def delete_user(user_id: int, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    """Supprime un utilisateur. Un administrateur ne peut pas supprimer son propre compte."""
    if admin.user_id == user_id:
        raise HTTPException(status_code=400, detail="Cannot delete your own account")
    if not user_service.delete_user(db, user_id):
        raise HTTPException(status_code=404, detail="User not found")
    return {}


@router.put("/{user_id}/admin", response_model=SuccessResponse, summary="Changer le statut administrateur")
def set_admin_status(
    user_id: int,
    data: AdminStatusUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    if admin.user_id == user_id and not data.admin:
        raise HTTPException(status_code=400, detail="Cannot remove admin status from your own account")
    if not user_service.set_admin_status(db, user_id, data.admin):
        raise HTTPException(status_code=404, detail="User not found")
    return {}
