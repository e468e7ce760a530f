"""
Logique de l'assistant d'installation : état de la base, paramètres initiaux,
fichiers d'environnement et compte administrateur local.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import dotenv_values, set_key
from sqlalchemy import select
from sqlalchemy.orm import Session

from vitrine.config import settings
from vitrine.models.user import User
from vitrine.schemas.setup import AdminSetup
from vitrine.services import setting_service, user_service

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = {
    "version": settings.APP_VERSION,
    "site_name": "Company Name",
    "contact_email": "contact@example.com",
}

DEFAULT_ADMIN = {
    "first_name": "Admin",
    "last_name": "User",
    "email": "admin@example.com",
    "password": None,
}

# Nom demandé par l'assistant → fichier réel
ENV_FILES = {
    ".env": lambda: settings.FRONTEND_ENV_PATH,
    "setup.env": lambda: settings.BACKEND_ENV_PATH,
}


def get_local_admin(db: Session) -> Optional[User]:
    """Administrateur à identifiants locaux (non lié à Google)."""
    return db.execute(
        select(User)
        .where(User.admin.is_(True), User.google_id.is_(None))
        .order_by(User.user_id)
        .limit(1)
    ).scalar()


def get_status(db: Session) -> dict:
    return {
        "hasAdmin": get_local_admin(db) is not None,
        "hasSettings": setting_service.get_setting(db, "site_name") is not None,
    }


# --- Paramètres du site ---

def load_settings(db: Session) -> Dict[str, Any]:
    """Paramètres en base, ou valeurs par défaut marquées _isDefault si le site n'est pas configuré."""
    if setting_service.get_setting(db, "site_name") is None:
        return {**DEFAULT_SETTINGS, "_isDefault": True}
    values = {s.key: s.value for s in setting_service.get_settings(db)}
    return {**values, "_isDefault": False}


def save_settings(db: Session, values: Dict[str, Any]) -> None:
    """
    Enregistre chaque clé reçue. Un nouveau site_name est aussi reporté dans
    index.html et manifest.json ; un échec sur ces fichiers est journalisé sans bloquer.
    """
    site_name = values.get("site_name")
    if site_name:
        apply_site_name(str(site_name))

    for key, value in values.items():
        if key.startswith("_"):
            continue
        setting_service.set_setting(db, key, None if value is None else str(value))
    logger.info("Paramètres d'installation enregistrés : %s", ", ".join(values))


def apply_site_name(site_name: str, public_dir: Optional[str] = None) -> None:
    root = Path(public_dir or settings.PUBLIC_DIR)

    index_path = root / "index.html"
    try:
        if index_path.is_file():
            content = index_path.read_text(encoding="utf-8")
            content = re.sub(r"<title>.*?</title>", lambda _: f"<title>{site_name}</title>", content, count=1, flags=re.S)
            index_path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.error("Mise à jour du titre de index.html impossible: %s", e)

    manifest_path = root / "manifest.json"
    try:
        if manifest_path.is_file():
            manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
            manifest["short_name"] = site_name
            manifest_path.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    except (OSError, ValueError) as e:
        logger.error("Mise à jour de manifest.json impossible: %s", e)


# --- Fichiers d'environnement ---

def resolve_env_path(filename: str) -> Path:
    """Seuls « .env » (frontend) et « setup.env » (backend) sont accessibles. ValueError sinon."""
    if filename not in ENV_FILES:
        raise ValueError("Invalid file name")
    return Path(ENV_FILES[filename]())


def read_env(filename: str) -> Dict[str, Optional[str]]:
    path = resolve_env_path(filename)
    if not path.is_file():
        return {}
    return dict(dotenv_values(path))


def write_env(filename: str, values: Dict[str, Any]) -> None:
    """Remplace le fichier par les variables reçues."""
    path = resolve_env_path(filename)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")
    for key, value in values.items():
        set_key(path, key, "" if value is None else str(value), quote_mode="never")
    logger.info("Fichier d'environnement écrit : %s (%d variables)", path, len(values))


# --- Administrateur ---

def load_admin(db: Session) -> Dict[str, Any]:
    admin = get_local_admin(db)
    if admin is None:
        return {**DEFAULT_ADMIN, "_isDefault": True}
    return {
        "first_name": admin.first_name,
        "last_name": admin.last_name,
        "email": admin.email,
        "password": None,
        "_isDefault": False,
    }


def save_admin(db: Session, data: AdminSetup) -> User:
    """
    Crée ou met à jour l'administrateur local.
    Lève une ValueError si l'email appartient déjà à un autre utilisateur.
    """
    admin = get_local_admin(db)
    owner = user_service.get_user_by_email(db, data.email)
    if owner is not None and (admin is None or owner.user_id != admin.user_id):
        raise ValueError("Email is already in use by another user")

    if admin is None:
        admin = User(admin=True)
        db.add(admin)
    admin.first_name = data.first_name
    admin.last_name = data.last_name
    admin.email = data.email
    admin.password_hash = user_service.hash_password(data.password)

    db.commit()
    db.refresh(admin)
    logger.info("Administrateur local enregistré : %s", admin.email)
    return admin
