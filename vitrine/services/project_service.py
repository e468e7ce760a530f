"""
Service métier pour les projets et les types de projets.
Le type référencé par un projet doit exister (vérifié ici, en plus de la clé étrangère).
"""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vitrine.models.project import Project, ProjectType
from vitrine.schemas.project import (
    ProjectCreate,
    ProjectResponse,
    ProjectTypeCreate,
    ProjectTypeUpdate,
    ProjectUpdate,
)
from vitrine.services.ordering import apply_order, next_display_order

logger = logging.getLogger(__name__)


# --- Projets ---

def get_projects(db: Session) -> list[ProjectResponse]:
    """Retourne tous les projets dans l'ordre d'affichage, avec le libellé de leur type."""
    rows = db.execute(
        select(Project, ProjectType)
        .outerjoin(ProjectType, ProjectType.type_id == Project.type_id)
        .order_by(Project.display_order, Project.project_id)
    ).all()
    return [_to_response(project, project_type) for project, project_type in rows]


def get_project(db: Session, project_id: int) -> Optional[ProjectResponse]:
    project = db.get(Project, project_id)
    if project is None:
        return None
    return _to_response(project, db.get(ProjectType, project.type_id))


def create_project(db: Session, data: ProjectCreate) -> Project:
    """Crée un projet. Lève une ValueError si le type n'existe pas."""
    _ensure_type_exists(db, data.type_id)

    project = Project(**data.model_dump(exclude={"display_order"}))
    project.display_order = (
        data.display_order if data.display_order is not None else next_display_order(db, Project)
    )
    db.add(project)
    db.commit()
    db.refresh(project)
    logger.info("Projet créé : %s (%s)", project.title, project.project_id)
    return project


def update_project(db: Session, project_id: int, data: ProjectUpdate) -> Optional[Project]:
    project = db.get(Project, project_id)
    if project is None:
        return None

    update_data = data.model_dump(exclude_unset=True)
    if update_data.get("type_id") is not None:
        _ensure_type_exists(db, update_data["type_id"])

    for field, value in update_data.items():
        if value is None and field in ("title", "description", "type_id", "status", "display_order"):
            continue
        setattr(project, field, value)

    db.commit()
    db.refresh(project)
    return project


def delete_project(db: Session, project_id: int) -> bool:
    project = db.get(Project, project_id)
    if project is None:
        return False
    db.delete(project)
    db.commit()
    return True


def reorder_projects(db: Session, project_ids: list[int]) -> int:
    return apply_order(db, Project, project_ids)


# --- Types de projets ---

def get_project_types(db: Session) -> list[ProjectType]:
    return list(db.execute(select(ProjectType).order_by(ProjectType.type)).scalars().all())


def create_project_type(db: Session, data: ProjectTypeCreate) -> ProjectType:
    """Crée un type de projet. Lève une ValueError si le libellé existe déjà."""
    project_type = ProjectType(type=data.type, fr_type=data.fr_type)
    db.add(project_type)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValueError(f"Project type '{data.type}' already exists")
    db.refresh(project_type)
    return project_type


def update_project_type(db: Session, type_id: int, data: ProjectTypeUpdate) -> Optional[ProjectType]:
    project_type = db.get(ProjectType, type_id)
    if project_type is None:
        return None

    for field, value in data.model_dump(exclude_unset=True).items():
        if value is None and field == "type":
            continue
        setattr(project_type, field, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValueError("A project type with this name already exists")
    db.refresh(project_type)
    return project_type


def delete_project_type(db: Session, type_id: int) -> bool:
    """Supprime un type. Bloqué (ValueError) tant qu'un projet l'utilise."""
    project_type = db.get(ProjectType, type_id)
    if project_type is None:
        return False

    in_use = db.execute(
        select(func.count()).select_from(Project).where(Project.type_id == type_id)
    ).scalar() or 0
    if in_use:
        raise ValueError(f"Project type is in use by {in_use} project(s)")

    db.delete(project_type)
    db.commit()
    return True


def _ensure_type_exists(db: Session, type_id: int) -> None:
    if db.get(ProjectType, type_id) is None:
        raise ValueError("Project type not found")


def _to_response(project: Project, project_type: Optional[ProjectType]) -> ProjectResponse:
    response = ProjectResponse.model_validate(project)
    if project_type is not None:
        response.type = project_type.type
        response.fr_type = project_type.fr_type
    return response
