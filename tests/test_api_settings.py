"""
Tests d'intégration API : paramètres du site et santé de l'API.
"""

from vitrine.config import settings
from vitrine.services import setting_service


def test_health(client):
    body = client.get("/api/health").json()
    assert body["success"] is True
    assert body["status"] == "ok"
    assert body["version"] == settings.APP_VERSION
    assert set(body["emailService"]) == {"configured", "status"}


def test_parametres_publics_filtres(client, db):
    setting_service.set_setting(db, "site_name", "Acme")
    setting_service.set_setting(db, "smtp_secret", "hidden")

    keys = [s["key"] for s in client.get("/api/settings").json()["settings"]]
    assert keys == ["site_name"]


def test_parametres_admin_complets(client, db, as_admin):
    setting_service.set_setting(db, "site_name", "Acme")
    setting_service.set_setting(db, "smtp_secret", "hidden")

    keys = {s["key"] for s in client.get("/api/admin/settings").json()["settings"]}
    assert {"site_name", "smtp_secret"} <= keys


def test_enregistrer_parametre_upsert(client, db, as_admin):
    assert client.post("/api/admin/settings", json={"key": "site_name", "value": "Acme"}).status_code == 200
    assert client.post("/api/admin/settings", json={"key": "site_name", "value": "Acme 2"}).status_code == 200
    assert setting_service.get_setting(db, "site_name") == "Acme 2"


def test_enregistrer_parametre_valeur_non_texte(client, db, as_admin):
    client.post("/api/admin/settings", json={"key": "show_team", "value": True})
    assert setting_service.get_setting(db, "show_team") == "true"


def test_enregistrer_parametre_sans_cle(client, as_admin):
    response = client.post("/api/admin/settings", json={"key": " ", "value": "x"})
    assert response.status_code == 400
    assert response.json()["message"] == "Key is required"


def test_supprimer_parametre(client, db, as_admin):
    setting_service.set_setting(db, "site_name", "Acme")
    assert client.delete("/api/admin/settings/site_name").json() == {"success": True}
    assert client.delete("/api/admin/settings/site_name").status_code == 404


def test_parametres_admin_refuses_aux_non_admins(client, as_user):
    assert client.get("/api/admin/settings").status_code == 403
