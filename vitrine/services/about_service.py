"""
Service métier pour les sections de la page « À propos ».
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from vitrine.models.about import AboutSection
from vitrine.schemas.about import AboutCreate, AboutUpdate
from vitrine.services.ordering import apply_order, next_display_order

logger = logging.getLogger(__name__)


def get_sections(db: Session) -> list[AboutSection]:
    """Retourne toutes les sections dans l'ordre d'affichage."""
    return list(db.execute(
        select(AboutSection).order_by(AboutSection.display_order, AboutSection.about_id)
    ).scalars().all())


def get_section(db: Session, about_id: int) -> Optional[AboutSection]:
    return db.get(AboutSection, about_id)


def create_section(db: Session, data: AboutCreate) -> AboutSection:
    """Crée une section. Sans display_order fourni, elle est placée en dernière position."""
    section = AboutSection(**data.model_dump(exclude={"display_order"}))
    section.display_order = (
        data.display_order if data.display_order is not None else next_display_order(db, AboutSection)
    )
    db.add(section)
    db.commit()
    db.refresh(section)
    logger.info("Section « À propos » créée : %s (%s)", section.title, section.about_id)
    return section


def update_section(db: Session, about_id: int, data: AboutUpdate) -> Optional[AboutSection]:
    """
    Met à jour les champs fournis d'une section.
    Les champs absents ne sont pas modifiés ; null efface un champ optionnel.
    """
    section = db.get(AboutSection, about_id)
    if section is None:
        return None

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        if value is None and field in ("title", "description", "display_order"):
            continue
        setattr(section, field, value)

    db.commit()
    db.refresh(section)
    return section


def delete_section(db: Session, about_id: int) -> bool:
    section = db.get(AboutSection, about_id)
    if section is None:
        return False
    db.delete(section)
    db.commit()
    return True


def reorder_sections(db: Session, about_ids: list[int]) -> int:
    """Renumérote les sections 1..N dans l'ordre donné (transaction unique)."""
    return apply_order(db, AboutSection, about_ids)
