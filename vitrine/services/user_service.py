"""
Service métier pour les utilisateurs de l'administration.
Gère la lecture, la création, la modification, la suppression et le lien avec les comptes Google.
"""

import logging
from typing import Optional

import bcrypt
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vitrine.models.user import User
from vitrine.schemas.auth import GoogleProfile
from vitrine.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hache un mot de passe avec bcrypt (troncature à 72 octets, limite native de bcrypt)."""
    password_bytes = password.encode("utf-8")[:72]
    return bcrypt.hashpw(password_bytes, bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8")[:72], password_hash.encode("utf-8"))
    except ValueError:
        logger.warning("Hash de mot de passe invalide en base.")
        return False


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.execute(select(User).where(User.email == email)).scalar()


def get_user_by_google_id(db: Session, google_id: str) -> Optional[User]:
    return db.execute(select(User).where(User.google_id == google_id)).scalar()


def get_users(db: Session) -> list[User]:
    """Retourne tous les utilisateurs triés par nom puis prénom."""
    return list(db.execute(
        select(User).order_by(User.last_name, User.first_name)
    ).scalars().all())


def create_user(db: Session, data: UserCreate) -> User:
    """
    Crée un utilisateur. Un mot de passe fourni en fait un compte local.
    Lève une ValueError si l'email est déjà utilisé.
    """
    if get_user_by_email(db, data.email) is not None:
        raise ValueError("A user with this email already exists")

    user = User(
        first_name=data.first_name,
        last_name=data.last_name,
        email=data.email,
        admin=data.admin,
        password_hash=hash_password(data.password) if data.password else None,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Utilisateur créé : %s (%s)", user.email, user.user_id)
    return user


def update_user(db: Session, user_id: int, data: UserUpdate) -> Optional[User]:
    """
    Met à jour les champs fournis d'un utilisateur.
    Retourne None si introuvable, lève une ValueError si le nouvel email est pris.
    """
    user = db.get(User, user_id)
    if user is None:
        return None

    update_data = data.model_dump(exclude_unset=True)

    new_email = update_data.get("email")
    if new_email and new_email != user.email:
        existing = get_user_by_email(db, new_email)
        if existing is not None and existing.user_id != user_id:
            raise ValueError("Email is already in use by another user")

    password = update_data.pop("password", None)
    if password:
        user.password_hash = hash_password(password)

    for field, value in update_data.items():
        if value is None and field in ("first_name", "last_name", "email", "admin"):
            continue  # colonnes NOT NULL : null n'efface pas
        setattr(user, field, value)

    db.commit()
    db.refresh(user)
    return user


def delete_user(db: Session, user_id: int) -> bool:
    """Supprime un utilisateur. Retourne True si supprimé, False si introuvable."""
    user = db.get(User, user_id)
    if user is None:
        return False
    db.delete(user)
    db.commit()
    logger.info("Utilisateur supprimé : %s", user_id)
    return True


def set_admin_status(db: Session, user_id: int, admin: bool) -> bool:
    user = db.get(User, user_id)
    if user is None:
        return False
    user.admin = admin
    db.commit()
    return True


def upsert_user_from_google(db: Session, profile: GoogleProfile) -> User:
    """
    Crée ou met à jour un utilisateur à partir d'un profil Google.

    1. Compte déjà lié (google_id) → mise à jour nom, prénom, email
    2. Compte local avec le même email → liaison du google_id (même user_id)
    3. Sinon → création d'un utilisateur non administrateur

    Lève une ValueError si le nouvel email Google appartient déjà à un autre utilisateur.
    """
    user = get_user_by_google_id(db, profile.id)
    if user is not None:
        user.first_name = profile.given_name or user.first_name
        user.last_name = profile.family_name or user.last_name
        user.email = profile.email
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise ValueError("Email is already in use by another user")
        db.refresh(user)
        return user

    user = get_user_by_email(db, profile.email)
    if user is not None:
        user.google_id = profile.id
        db.commit()
        db.refresh(user)
        logger.info("Compte Google lié à l'utilisateur existant %s", user.user_id)
        return user

    user = User(
        first_name=profile.given_name,
        last_name=profile.family_name,
        email=profile.email,
        google_id=profile.id,
        admin=False,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Nouvel utilisateur créé via Google : %s", user.email)
    return user


def authenticate_local(db: Session, email: str, password: str) -> tuple[Optional[User], Optional[str]]:
    """
    Vérifie des identifiants locaux.
    Retourne (utilisateur, None) en cas de succès, (None, raison) sinon.
    """
    user = get_user_by_email(db, email)
    if user is None:
        return None, "Invalid email or password"
    if not user.password_hash:
        return None, "This account uses Google authentication"
    if not verify_password(password, user.password_hash):
        return None, "Invalid email or password"
    return user, None
