"""
Service métier pour les membres de l'équipe.
Un membre sans photo reçoit un avatar à initiales généré côté serveur.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from vitrine.models.team import TeamMember
from vitrine.models.user import User
from vitrine.schemas.team import TeamCreate, TeamUpdate
from vitrine.services import avatar_service
from vitrine.services.ordering import apply_order, next_display_order

logger = logging.getLogger(__name__)

# Champs réservés aux administrateurs lors de l'édition d'un profil
ADMIN_ONLY_FIELDS = {"email", "display_order"}


def get_members(db: Session) -> list[TeamMember]:
    return list(db.execute(
        select(TeamMember).order_by(TeamMember.display_order, TeamMember.team_id)
    ).scalars().all())


def get_member(db: Session, team_id: int) -> Optional[TeamMember]:
    return db.get(TeamMember, team_id)


def create_member(db: Session, data: TeamCreate) -> TeamMember:
    """Crée un membre. Sans image fournie, un avatar à initiales est généré."""
    member = TeamMember(**data.model_dump(exclude={"display_order", "image_url"}))
    member.image_url = data.image_url or avatar_service.save_avatar(data.name, "team")
    member.display_order = (
        data.display_order if data.display_order is not None else next_display_order(db, TeamMember)
    )
    db.add(member)
    db.commit()
    db.refresh(member)
    logger.info("Membre de l'équipe créé : %s (%s)", member.name, member.team_id)
    return member


def update_member(db: Session, team_id: int, data: TeamUpdate, editor: User) -> Optional[TeamMember]:
    """
    Met à jour les champs fournis d'un membre.

    Règles :
    - Un non-administrateur ne peut modifier que le profil lié à son email,
      et jamais l'email ni l'ordre d'affichage (ignorés) → PermissionError sinon
    - image_url explicitement vidée → nouvel avatar généré à partir du nom

    Retourne None si le membre est introuvable.
    """
    member = db.get(TeamMember, team_id)
    if member is None:
        return None

    if not editor.admin and (not member.email or member.email != editor.email):
        raise PermissionError("You can only edit your own profile")

    update_data = data.model_dump(exclude_unset=True)
    if not editor.admin:
        for field in ADMIN_ONLY_FIELDS:
            update_data.pop(field, None)

    regenerate_avatar = "image_url" in update_data and update_data["image_url"] is None
    for field, value in update_data.items():
        if value is None and field in ("name", "title", "display_order", "image_url"):
            continue
        setattr(member, field, value)

    if regenerate_avatar:
        member.image_url = avatar_service.save_avatar(member.name, "team")

    db.commit()
    db.refresh(member)
    return member


def delete_member(db: Session, team_id: int) -> bool:
    member = db.get(TeamMember, team_id)
    if member is None:
        return False
    db.delete(member)
    db.commit()
    return True


def reorder_members(db: Session, team_ids: list[int]) -> int:
    return apply_order(db, TeamMember, team_ids)
