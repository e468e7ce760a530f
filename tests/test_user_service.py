"""
Tests du service utilisateurs : unicité des emails, mots de passe et liaison Google.
"""

import pytest

from vitrine.schemas.auth import GoogleProfile
from vitrine.schemas.user import UserCreate, UserUpdate
from vitrine.services import user_service


def make_user(db, email="ada@example.com", password=None, admin=False):
    return user_service.create_user(
        db, UserCreate(first_name="Ada", last_name="Lovelace", email=email, password=password, admin=admin)
    )


def google_profile(sub="g-123", email="ada@example.com", given="Ada", family="Lovelace"):
    return GoogleProfile.from_userinfo(
        {"sub": sub, "email": email, "given_name": given, "family_name": family}
    )


# --- Mots de passe ---

def test_hash_password_verifiable():
    hashed = user_service.hash_password("s3cret")
    assert hashed != "s3cret"
    assert user_service.verify_password("s3cret", hashed)
    assert not user_service.verify_password("wrong", hashed)


def test_hash_password_tronque_a_72_octets():
    hashed = user_service.hash_password("a" * 72 + "ignored")
    assert user_service.verify_password("a" * 72, hashed)


def test_verify_password_hash_invalide():
    assert user_service.verify_password("x", "not-a-bcrypt-hash") is False


# --- create / update ---

def test_create_user_email_duplique(db):
    make_user(db)
    with pytest.raises(ValueError, match="already exists"):
        make_user(db)


def test_create_user_avec_mot_de_passe(db):
    user = make_user(db, password="s3cret")
    assert user.password_hash is not None
    assert user.google_id is None


def test_update_user_email_deja_pris(db):
    make_user(db, email="ada@example.com")
    other = make_user(db, email="grace@example.com")
    with pytest.raises(ValueError, match="already in use"):
        user_service.update_user(db, other.user_id, UserUpdate(email="ada@example.com"))


def test_update_user_meme_email_accepte(db):
    user = make_user(db)
    updated = user_service.update_user(db, user.user_id, UserUpdate(email="ada@example.com", first_name="Augusta"))
    assert updated.first_name == "Augusta"


def test_update_user_nouveau_mot_de_passe(db):
    user = make_user(db, password="old")
    user_service.update_user(db, user.user_id, UserUpdate(password="new"))
    assert user_service.verify_password("new", user.password_hash)


def test_update_user_introuvable(db):
    assert user_service.update_user(db, 42, UserUpdate(first_name="x")) is None


def test_set_admin_status(db):
    user = make_user(db)
    assert user_service.set_admin_status(db, user.user_id, True) is True
    assert user_service.get_user(db, user.user_id).admin is True
    assert user_service.set_admin_status(db, 999, True) is False


def test_get_users_tries_par_nom(db):
    user_service.create_user(db, UserCreate(first_name="Grace", last_name="Hopper", email="g@example.com"))
    make_user(db)
    assert [u.last_name for u in user_service.get_users(db)] == ["Hopper", "Lovelace"]


# --- upsert_user_from_google ---

def test_google_nouvel_utilisateur_non_admin(db):
    user = user_service.upsert_user_from_google(db, google_profile())
    assert user.google_id == "g-123"
    assert user.admin is False


def test_google_lie_compte_local_existant(db):
    local = make_user(db, password="s3cret", admin=True)
    user = user_service.upsert_user_from_google(db, google_profile())

    assert user.user_id == local.user_id
    assert user.google_id == "g-123"
    assert user.admin is True
    assert len(user_service.get_users(db)) == 1


def test_google_compte_deja_lie_mis_a_jour(db):
    user_service.upsert_user_from_google(db, google_profile())
    user = user_service.upsert_user_from_google(
        db, google_profile(email="ada@newmail.com", family="King")
    )
    assert user.email == "ada@newmail.com"
    assert user.last_name == "King"
    assert len(user_service.get_users(db)) == 1


def test_google_nouvel_email_deja_pris(db):
    make_user(db, email="grace@example.com")
    linked = user_service.upsert_user_from_google(db, google_profile())

    with pytest.raises(ValueError, match="already in use"):
        user_service.upsert_user_from_google(db, google_profile(email="grace@example.com"))

    db.refresh(linked)
    assert linked.email == "ada@example.com"


# --- authenticate_local ---

def test_authenticate_local_succes(db):
    make_user(db, password="s3cret")
    user, reason = user_service.authenticate_local(db, "ada@example.com", "s3cret")
    assert user is not None
    assert reason is None


def test_authenticate_local_compte_google(db):
    user_service.upsert_user_from_google(db, google_profile())
    user, reason = user_service.authenticate_local(db, "ada@example.com", "anything")
    assert user is None
    assert reason == "This account uses Google authentication"


@pytest.mark.parametrize("email,password", [("ada@example.com", "wrong"), ("nobody@example.com", "s3cret")])
def test_authenticate_local_identifiants_invalides(db, email, password):
    make_user(db, password="s3cret")
    user, reason = user_service.authenticate_local(db, email, password)
    assert user is None
    assert reason == "Invalid email or password"
