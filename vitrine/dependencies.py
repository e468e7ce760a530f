"""
Dépendances FastAPI réutilisables : utilisateur courant et gardes d'accès.

- require_authenticated : tout utilisateur connecté (401 sinon)
- require_admin         : utilisateur avec le drapeau admin (403 sinon)
"""

from typing import Optional

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from vitrine.database import get_db
from vitrine.models.user import User
from vitrine.services import user_service
from vitrine.session_state import AuthSession


def get_current_user(request: Request, db: Session = Depends(get_db)) -> Optional[User]:
    """Retourne l'utilisateur de la session, ou None (anonyme ou compte supprimé)."""
    user_id = AuthSession(request.session).user_id
    if user_id is None:
        return None
    return user_service.get_user(db, user_id)


def require_authenticated(user: Optional[User] = Depends(get_current_user)) -> User:
    if user is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user


def require_admin(user: Optional[User] = Depends(get_current_user)) -> User:
    if user is None or not user.admin:
        raise HTTPException(status_code=403, detail="Not authorized")
    return user
