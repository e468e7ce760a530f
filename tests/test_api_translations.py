"""
Tests d'intégration API : proxy de traduction et fichiers de langue.
"""

import json
from unittest.mock import patch

import pytest

from vitrine.config import settings
from vitrine.services.translation_service import TranslationError

ORIGIN = "http://localhost:3010"


@pytest.fixture(autouse=True)
def allowed_origin(monkeypatch):
    monkeypatch.setattr(settings, "ALLOWED_ORIGINS", ORIGIN)


# ============================================================
# POST /api/translate
# ============================================================

def test_traduction_origine_absente(client):
    response = client.post("/api/translate", json={"text": "Hello"})
    assert response.status_code == 403


def test_traduction_origine_inconnue(client):
    response = client.post("/api/translate", json={"text": "Hello"}, headers={"Origin": "https://evil.example.com"})
    assert response.status_code == 403


def test_traduction_texte_manquant(client):
    response = client.post("/api/translate", json={"text": "  "}, headers={"Origin": ORIGIN})
    assert response.status_code == 400


def test_traduction_succes(client):
    with patch("vitrine.routers.translations.translation_service.translate_text", return_value="Bonjour") as mock:
        response = client.post("/api/translate", json={"text": "Hello"}, headers={"Origin": ORIGIN})

    assert response.status_code == 200
    assert response.json() == {"translation": "Bonjour"}
    mock.assert_called_once_with("Hello", "fr", ORIGIN)


def test_traduction_echec_fournisseur(client):
    with patch(
        "vitrine.routers.translations.translation_service.translate_text",
        side_effect=TranslationError("quota"),
    ):
        response = client.post("/api/translate", json={"text": "Hello"}, headers={"Origin": ORIGIN})

    assert response.status_code == 500
    assert response.json()["message"] == "Failed to translate text"


# ============================================================
# /api/admin/translations
# ============================================================

@pytest.fixture
def locales(public_dir):
    for lang in ("en", "fr"):
        folder = public_dir / "locales" / lang
        folder.mkdir(parents=True)
        (folder / "home.json").write_text(json.dumps({"title": lang}), encoding="utf-8")
    return public_dir / "locales"


def test_liste_anonyme_refusee(client):
    assert client.get("/api/admin/translations").status_code == 401


def test_liste_utilisateur_connecte(client, as_user, locales):
    response = client.get("/api/admin/translations")
    assert response.status_code == 200
    assert response.json()["translations"][0]["fr"] == {"name": "home.json", "content": {"title": "fr"}}


def test_modification_reservee_admin(client, as_user, locales):
    response = client.post(
        "/api/admin/translations", json={"locale": "fr", "filename": "home.json", "content": {"title": "x"}}
    )
    assert response.status_code == 403


def test_modification_fichier(client, as_admin, locales):
    response = client.post(
        "/api/admin/translations", json={"locale": "fr", "filename": "home.json", "content": {"title": "Accueil"}}
    )
    assert response.json() == {"success": True}
    assert json.loads((locales / "fr" / "home.json").read_text(encoding="utf-8")) == {"title": "Accueil"}


def test_modification_langue_invalide(client, as_admin, locales):
    response = client.post(
        "/api/admin/translations", json={"locale": "de", "filename": "home.json", "content": {}}
    )
    assert response.status_code == 400


def test_modification_fichier_absent(client, as_admin, locales):
    response = client.post(
        "/api/admin/translations", json={"locale": "en", "filename": "missing.json", "content": {}}
    )
    assert response.status_code == 404
