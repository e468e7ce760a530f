"""
Gestion de l'ordre d'affichage (display_order) commune aux sections, membres et projets.
"""

import logging
from typing import Iterable

from sqlalchemy import func, select
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


def next_display_order(db: Session, model) -> int:
    """Position suivant la dernière existante (1 si la table est vide)."""
    current = db.execute(select(func.max(model.display_order))).scalar()
    return (current or 0) + 1


def apply_order(db: Session, model, ids: Iterable[int]) -> int:
    """
    Renumérote display_order de 1 à N dans l'ordre des identifiants fournis.

    Toutes les mises à jour sont faites dans une seule transaction : en cas d'erreur,
    rien n'est modifié. Un identifiant inconnu est ignoré (log) et ne consomme pas de position.
    Retourne le nombre de lignes mises à jour.
    """
    updated = 0
    try:
        for row_id in ids:
            row = db.get(model, row_id)
            if row is None:
                logger.warning("%s %s introuvable lors du réordonnancement", model.__tablename__, row_id)
                continue
            updated += 1
            row.display_order = updated
        db.commit()
    except Exception:
        db.rollback()
        raise
    return updated
