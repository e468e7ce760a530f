"""
Tests d'intégration API pour la gestion des utilisateurs.
"""

# ============================================================
# Accès
# ============================================================

def test_users_anonyme_refuse(client):
    response = client.get("/api/admin/users")
    assert response.status_code == 403
    assert response.json() == {"success": False, "message": "Not authorized"}


def test_users_non_admin_refuse(client, as_user):
    assert client.get("/api/admin/users").status_code == 403


# ============================================================
# CRUD
# ============================================================

def test_liste_utilisateurs(client, as_admin):
    response = client.get("/api/admin/users")
    assert response.status_code == 200
    users = response.json()["users"]
    assert [u["email"] for u in users] == ["admin@example.com"]
    assert "password_hash" not in users[0]


def test_creer_utilisateur(client, as_admin):
    response = client.post(
        "/api/admin/users",
        json={"first_name": "Grace", "last_name": "Hopper", "email": "grace@example.com", "password": "pw"},
    )
    assert response.status_code == 201
    assert response.json()["success"] is True
    assert isinstance(response.json()["id"], int)


def test_creer_utilisateur_email_duplique(client, as_admin):
    response = client.post(
        "/api/admin/users",
        json={"first_name": "Other", "last_name": "Admin", "email": "admin@example.com"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "A user with this email already exists"


def test_creer_utilisateur_email_invalide(client, as_admin):
    response = client.post(
        "/api/admin/users",
        json={"first_name": "Grace", "last_name": "Hopper", "email": "not-an-email"},
    )
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_creer_utilisateur_champ_manquant(client, as_admin):
    response = client.post("/api/admin/users", json={"first_name": "Grace", "email": "g@example.com"})
    assert response.status_code == 400
    assert response.json()["message"] == "last_name is required"


def test_modifier_utilisateur_email_pris(client, as_admin, regular_user):
    response = client.put(f"/api/admin/users/{regular_user.user_id}", json={"email": "admin@example.com"})
    assert response.status_code == 400
    assert "already in use" in response.json()["message"]


def test_modifier_utilisateur_introuvable(client, as_admin):
    response = client.put("/api/admin/users/999", json={"first_name": "X"})
    assert response.status_code == 404


def test_supprimer_son_propre_compte_refuse(client, as_admin):
    response = client.delete(f"/api/admin/users/{as_admin.user_id}")
    assert response.status_code == 400
    assert response.json()["message"] == "Cannot delete your own account"


def test_supprimer_utilisateur(client, as_admin, regular_user):
    assert client.delete(f"/api/admin/users/{regular_user.user_id}").json() == {"success": True}
    assert client.delete(f"/api/admin/users/{regular_user.user_id}").status_code == 404


def test_retirer_son_propre_statut_admin_refuse(client, as_admin):
    response = client.put(f"/api/admin/users/{as_admin.user_id}/admin", json={"admin": False})
    assert response.status_code == 400


def test_promouvoir_utilisateur(client, as_admin, regular_user):
    response = client.put(f"/api/admin/users/{regular_user.user_id}/admin", json={"admin": True})
    assert response.status_code == 200
    assert regular_user.admin is True


def test_retirer_son_propre_statut_admin_via_modification_refuse(client, db, as_admin):
    response = client.put(f"/api/admin/users/{as_admin.user_id}", json={"admin": False})
    assert response.status_code == 400
    assert response.json()["message"] == "Cannot remove admin status from your own account"
    db.refresh(as_admin)
    assert as_admin.admin is True


def test_modifier_son_propre_compte_reste_admin(client, as_admin):
    response = client.put(f"/api/admin/users/{as_admin.user_id}", json={"first_name": "Root", "admin": True})
    assert response.status_code == 200
    assert as_admin.first_name == "Root"
