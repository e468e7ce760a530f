"""
Initialisation de la base de données au démarrage.

Pas de framework de migrations : les tables sont créées une fois, puis les colonnes
ajoutées au fil des versions (champs français, image_url, email d'équipe, mot de passe
local) sont rajoutées sur les bases existantes. Une base vide reçoit un jeu de données
initial. Toutes les étapes sont idempotentes.
"""

import logging

from sqlalchemy import inspect, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

import vitrine.models  # noqa: F401  enregistre tous les modèles dans Base.metadata
from vitrine.config import settings
from vitrine.database import Base
from vitrine.models.about import AboutSection
from vitrine.models.project import ProjectType
from vitrine.models.setting import Setting

logger = logging.getLogger(__name__)

# Colonnes apparues après la première version du schéma : table → [(colonne, type SQL)]
LEGACY_COLUMNS = {
    "users": [("password_hash", "TEXT")],
    "about": [("image_url", "TEXT"), ("fr_title", "TEXT"), ("fr_description", "TEXT")],
    "team": [("fr_title", "TEXT"), ("fr_bio", "TEXT"), ("email", "TEXT")],
}

DEFAULT_ABOUT_SECTIONS = [
    {
        "title": "Our Mission",
        "description": "To provide innovative solutions that help businesses grow and succeed.",
        "fr_title": "Notre Mission",
        "fr_description": "Fournir des solutions innovantes qui aident les entreprises à croître et à réussir.",
    },
    {
        "title": "Our Vision",
        "description": "To be the leading provider of business solutions in our industry.",
        "fr_title": "Notre Vision",
        "fr_description": "Être le principal fournisseur de solutions commerciales dans notre industrie.",
    },
    {
        "title": "Our Values",
        "description": "Innovation, Integrity, and Excellence in everything we do.",
        "fr_title": "Nos Valeurs",
        "fr_description": "Innovation, Intégrité et Excellence dans tout ce que nous faisons.",
    },
]

DEFAULT_PROJECT_TYPES = [
    ("Web App", "Application Web"),
    ("Mobile App", "Application Mobile"),
    ("DevOps", "DevOps"),
]


def init_db(db_engine: Engine) -> None:
    """Crée les tables manquantes, complète le schéma et insère les données initiales."""
    is_new = not inspect(db_engine).has_table("settings")
    Base.metadata.create_all(bind=db_engine)
    add_missing_columns(db_engine)

    with Session(db_engine) as db:
        seed(db, with_samples=is_new)


def add_missing_columns(db_engine: Engine) -> list[str]:
    """
    Ajoute les colonnes récentes absentes d'une base créée par une ancienne version.
    Retourne la liste des colonnes ajoutées (format table.colonne).
    """
    inspector = inspect(db_engine)
    added = []
    with db_engine.begin() as conn:
        for table, columns in LEGACY_COLUMNS.items():
            if not inspector.has_table(table):
                continue
            existing = {c["name"] for c in inspector.get_columns(table)}
            for name, sql_type in columns:
                if name in existing:
                    continue
                conn.execute(text(f"ALTER TABLE {table} ADD COLUMN {name} {sql_type}"))
                added.append(f"{table}.{name}")

    if added:
        logger.info("Colonnes ajoutées au schéma : %s", ", ".join(added))
    return added


def seed(db: Session, with_samples: bool) -> None:
    """
    Garantit la présence de la version du schéma. Sur une base neuve, insère aussi
    les sections « À propos » et les types de projets d'exemple.
    """
    has_version = db.execute(
        select(Setting.setting_id).where(Setting.key == "version")
    ).scalar()
    if not has_version:
        db.add(Setting(key="version", value=settings.APP_VERSION))

    if with_samples and not db.execute(select(AboutSection.about_id).limit(1)).scalar():
        for position, section in enumerate(DEFAULT_ABOUT_SECTIONS, start=1):
            db.add(AboutSection(display_order=position, **section))

    if with_samples and not db.execute(select(ProjectType.type_id).limit(1)).scalar():
        for type_name, fr_type in DEFAULT_PROJECT_TYPES:
            db.add(ProjectType(type=type_name, fr_type=fr_type))

    if db.new:
        db.commit()
        logger.info("Données initiales insérées (%s).", settings.DATABASE_URL)
