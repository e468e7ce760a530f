"""
Router pour les projets du portfolio et leurs types.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from vitrine.database import get_db
from vitrine.dependencies import require_admin
from vitrine.schemas.common import CreatedResponse, SuccessResponse
from vitrine.schemas.project import (
    ProjectCreate,
    ProjectListResponse,
    ProjectReorder,
    ProjectTypeCreate,
    ProjectTypeListResponse,
    ProjectTypeUpdate,
    ProjectUpdate,
)
from vitrine.services import project_service

router = APIRouter(tags=["Projets"])


@router.get("/api/projects", response_model=ProjectListResponse, summary="Lister les projets")
def list_projects(db: Session = Depends(get_db)):
    return {"projects": project_service.get_projects(db)}


@router.post(
    "/api/admin/projects",
    response_model=CreatedResponse,
    status_code=201,
    dependencies=[Depends(require_admin)],
    summary="Créer un projet",
)
def create_project(data: ProjectCreate, db: Session = Depends(get_db)):
    try:
        project = project_service.create_project(db, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"id": project.project_id}


@router.put(
    "/api/admin/projects/reorder",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Réordonner les projets",
)
def reorder_projects(data: ProjectReorder, db: Session = Depends(get_db)):
    project_service.reorder_projects(db, [item.project_id for item in data.projects])
    return {}


@router.put(
    "/api/admin/projects/{project_id}",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Modifier un projet",
)
def update_project(project_id: int, data: ProjectUpdate, db: Session = Depends(get_db)):
    try:
        project = project_service.update_project(db, project_id, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if project is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return {}


@router.delete(
    "/api/admin/projects/{project_id}",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Supprimer un projet",
)
def delete_project(project_id: int, db: Session = Depends(get_db)):
    if not project_service.delete_project(db, project_id):
        raise HTTPException(status_code=404, detail="Project not found")
    return {}


# --- Types de projets ---

@router.get("/api/project-types", response_model=ProjectTypeListResponse, summary="Lister les types")
def list_project_types(db: Session = Depends(get_db)):
    return {"types": project_service.get_project_types(db)}


@router.post(
    "/api/admin/project-types",
    response_model=CreatedResponse,
    status_code=201,
    dependencies=[Depends(require_admin)],
    summary="Créer un type de projet",
)
def create_project_type(data: ProjectTypeCreate, db: Session = Depends(get_db)):
    try:
        project_type = project_service.create_project_type(db, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"id": project_type.type_id}


@router.put(
    "/api/admin/project-types/{type_id}",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Modifier un type de projet",
)
def update_project_type(type_id: int, data: ProjectTypeUpdate, db: Session = Depends(get_db)):
    try:
        project_type = project_service.update_project_type(db, type_id, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if project_type is None:
        raise HTTPException(status_code=404, detail="Project type not found")
    return {}


@router.delete(
    "/api/admin/project-types/{type_id}",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Supprimer un type de projet",
)
def delete_project_type(type_id: int, db: Session = Depends(get_db)):
    """Refusé tant qu'au moins un projet utilise ce type."""
    try:
        deleted = project_service.delete_project_type(db, type_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Project type not found")
    return {}
