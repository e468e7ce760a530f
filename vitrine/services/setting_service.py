"""
Service pour les paramètres du site (table settings, paires clé → valeur).
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from vitrine.models.setting import Setting

logger = logging.getLogger(__name__)

# Seules ces clés sont exposées sur l'endpoint public
PUBLIC_KEYS = ("site_name", "contact_email", "logo_path", "hero_video_path")


def get_setting(db: Session, key: str) -> Optional[str]:
    """Retourne la valeur d'un paramètre, ou None s'il n'existe pas."""
    return db.execute(select(Setting.value).where(Setting.key == key)).scalar()


def set_setting(db: Session, key: str, value: Optional[str]) -> Setting:
    """Crée ou met à jour un paramètre."""
    setting = db.execute(select(Setting).where(Setting.key == key)).scalar()
    if setting is None:
        setting = Setting(key=key, value=value)
        db.add(setting)
    else:
        setting.value = value
    db.commit()
    db.refresh(setting)
    return setting


def get_settings(db: Session) -> list[Setting]:
    return list(db.execute(select(Setting).order_by(Setting.key)).scalars().all())


def get_public_settings(db: Session) -> list[Setting]:
    return list(db.execute(
        select(Setting).where(Setting.key.in_(PUBLIC_KEYS)).order_by(Setting.key)
    ).scalars().all())


def delete_setting(db: Session, key: str) -> bool:
    setting = db.execute(select(Setting).where(Setting.key == key)).scalar()
    if setting is None:
        return False
    db.delete(setting)
    db.commit()
    logger.info("Paramètre supprimé : %s", key)
    return True
