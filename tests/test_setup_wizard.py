"""
Tests de l'assistant d'installation (application séparée, même base).
"""

import json

import pytest
from fastapi.testclient import TestClient

from vitrine.config import settings
from vitrine.database import get_db
from vitrine.services import setting_service, user_service
from vitrine.setup_wizard.main import app as setup_app


@pytest.fixture
def setup_client(db, tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "FRONTEND_ENV_PATH", str(tmp_path / "frontend" / ".env"))
    monkeypatch.setattr(settings, "BACKEND_ENV_PATH", str(tmp_path / "backend" / ".env"))
    setup_app.dependency_overrides[get_db] = lambda: db
    with TestClient(setup_app) as c:
        yield c
    setup_app.dependency_overrides.clear()


def test_statut_base_vide(setup_client):
    assert setup_client.get("/api/setup/status").json() == {"hasAdmin": False, "hasSettings": False}


def test_parametres_par_defaut(setup_client):
    body = setup_client.get("/api/setup/settings").json()
    assert body["_isDefault"] is True
    assert body["site_name"] == "Company Name"
    assert body["contact_email"] == "contact@example.com"


def test_enregistrer_nom_du_site_met_a_jour_les_fichiers(setup_client, db, public_dir):
    (public_dir / "index.html").write_text("<html><head><title>Old</title></head></html>", encoding="utf-8")
    (public_dir / "manifest.json").write_text(json.dumps({"short_name": "Old", "name": "Old"}), encoding="utf-8")

    response = setup_client.post("/api/setup/settings", json={"site_name": "Acme", "contact_email": "hi@acme.test"})

    assert response.json() == {"success": True}
    assert setting_service.get_setting(db, "site_name") == "Acme"
    assert "<title>Acme</title>" in (public_dir / "index.html").read_text(encoding="utf-8")
    assert json.loads((public_dir / "manifest.json").read_text(encoding="utf-8"))["short_name"] == "Acme"

    body = setup_client.get("/api/setup/settings").json()
    assert body["_isDefault"] is False
    assert body["contact_email"] == "hi@acme.test"


def test_enregistrer_nom_du_site_sans_fichiers_public(setup_client, db):
    assert setup_client.post("/api/setup/settings", json={"site_name": "Acme"}).status_code == 200
    assert setup_client.get("/api/setup/status").json()["hasSettings"] is True


def test_fichier_env_ecriture_et_lecture(setup_client, tmp_path):
    response = setup_client.post("/api/setup/env/setup.env", json={"PORT": 3011, "SESSION_SECRET": "abc=def"})
    assert response.status_code == 200
    assert (tmp_path / "backend" / ".env").is_file()

    assert setup_client.get("/api/setup/env/setup.env").json() == {"PORT": "3011", "SESSION_SECRET": "abc=def"}


def test_fichier_env_absent(setup_client):
    assert setup_client.get("/api/setup/env/.env").json() == {}


@pytest.mark.parametrize("filename", ["passwords.txt", "other.env", "..env"])
def test_fichier_env_non_autorise(setup_client, filename):
    assert setup_client.get(f"/api/setup/env/{filename}").status_code == 400
    assert setup_client.post(f"/api/setup/env/{filename}", json={"A": "1"}).status_code == 400


def test_admin_par_defaut(setup_client):
    body = setup_client.get("/api/setup/admin").json()
    assert body["_isDefault"] is True
    assert body["email"] == "admin@example.com"
    assert body["password"] is None


def test_admin_cree_puis_mis_a_jour(setup_client, db):
    payload = {"first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com", "password": "s3cret"}
    assert setup_client.post("/api/setup/admin", json=payload).json() == {"success": True}
    assert setup_client.post("/api/setup/admin", json={**payload, "password": "n3w"}).status_code == 200

    users = user_service.get_users(db)
    assert len(users) == 1
    assert users[0].admin is True
    user, _ = user_service.authenticate_local(db, "ada@example.com", "n3w")
    assert user is not None

    body = setup_client.get("/api/setup/admin").json()
    assert body["_isDefault"] is False
    assert body["password"] is None
    assert setup_client.get("/api/setup/status").json()["hasAdmin"] is True


def test_admin_mot_de_passe_obligatoire(setup_client):
    response = setup_client.post(
        "/api/setup/admin",
        json={"first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com", "password": ""},
    )
    assert response.status_code == 400


def test_route_inconnue_enveloppe_json(setup_client):
    response = setup_client.get("/api/setup/unknown")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not Found"}


def test_methode_non_autorisee_enveloppe_json(setup_client):
    response = setup_client.delete("/api/setup/status")
    assert response.status_code == 405
    assert response.json() == {"success": False, "message": "Method Not Allowed"}
