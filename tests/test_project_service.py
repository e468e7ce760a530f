"""
Tests du service des projets et des types de projets.
"""

import pytest
from pydantic import ValidationError

from vitrine.schemas.project import ProjectCreate, ProjectTypeCreate, ProjectTypeUpdate, ProjectUpdate
from vitrine.services import project_service


@pytest.fixture
def web_type(db):
    return project_service.create_project_type(db, ProjectTypeCreate(type="Web App", fr_type="Application Web"))


def make_project(db, type_id, title="Portal", **kwargs):
    return project_service.create_project(
        db, ProjectCreate(title=title, description="A project", type_id=type_id, **kwargs)
    )


def test_project_statut_invalide_rejete():
    with pytest.raises(ValidationError):
        ProjectCreate(title="x", description="y", type_id=1, status="archived")


def test_create_project_statut_par_defaut(db, web_type):
    project = make_project(db, web_type.type_id)
    assert project.status == "pending-approval"
    assert project.display_order == 1


def test_create_project_type_inexistant(db):
    with pytest.raises(ValueError, match="Project type not found"):
        make_project(db, type_id=99)


def test_get_projects_inclut_le_type(db, web_type):
    make_project(db, web_type.type_id)
    projects = project_service.get_projects(db)
    assert projects[0].type == "Web App"
    assert projects[0].fr_type == "Application Web"


def test_update_project_type_inexistant(db, web_type):
    project = make_project(db, web_type.type_id)
    with pytest.raises(ValueError, match="Project type not found"):
        project_service.update_project(db, project.project_id, ProjectUpdate(type_id=42))


def test_update_project_partiel(db, web_type):
    project = make_project(db, web_type.type_id, git_url="https://git.example.com/portal")
    project_service.update_project(db, project.project_id, ProjectUpdate(status="completed"))
    assert project.status == "completed"
    assert project.git_url == "https://git.example.com/portal"


def test_reorder_projects(db, web_type):
    a = make_project(db, web_type.type_id, "A")
    b = make_project(db, web_type.type_id, "B")
    project_service.reorder_projects(db, [b.project_id, a.project_id])
    assert [p.title for p in project_service.get_projects(db)] == ["B", "A"]


def test_create_project_type_duplique(db, web_type):
    with pytest.raises(ValueError, match="already exists"):
        project_service.create_project_type(db, ProjectTypeCreate(type="Web App"))


def test_update_project_type(db, web_type):
    updated = project_service.update_project_type(db, web_type.type_id, ProjectTypeUpdate(fr_type="Appli Web"))
    assert updated.type == "Web App"
    assert updated.fr_type == "Appli Web"


def test_delete_project_type_utilise_refuse(db, web_type):
    make_project(db, web_type.type_id)
    with pytest.raises(ValueError, match="in use"):
        project_service.delete_project_type(db, web_type.type_id)


def test_delete_project_type_libre(db, web_type):
    assert project_service.delete_project_type(db, web_type.type_id) is True
    assert project_service.get_project_types(db) == []
