"""
Configuration partagée pour tous les tests.

- db     : session SQLAlchemy sur une base SQLite en mémoire (tables créées à chaque test)
- client : TestClient de l'API avec get_db redirigé vers cette base
- as_admin / as_user : remplacent l'utilisateur de la session par un compte créé en base
Les médias sont écrits dans un dossier temporaire (settings.PUBLIC_DIR).
"""

import os

# Avant tout import de vitrine : le moteur global ne doit jamais toucher un fichier réel
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["NODE_ENV"] = "test"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from vitrine.config import settings
from vitrine.database import Base, create_db_engine, get_db
from vitrine.dependencies import get_current_user
from vitrine.main import app
from vitrine.models.user import User


@pytest.fixture
def engine():
    # StaticPool : une seule connexion, donc une seule base en mémoire partagée par le test
    test_engine = create_db_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture(autouse=True)
def public_dir(tmp_path, monkeypatch):
    """Dossier des médias isolé pour chaque test."""
    monkeypatch.setattr(settings, "PUBLIC_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture
def client(db):
    """Client HTTP de test branché sur la base en mémoire."""
    app.dependency_overrides[get_db] = lambda: db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def _make_user(db, email: str, admin: bool) -> User:
    user = User(first_name="Test", last_name="Admin" if admin else "User", email=email, admin=admin)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def admin_user(db):
    return _make_user(db, "admin@example.com", admin=True)


@pytest.fixture
def regular_user(db):
    return _make_user(db, "jane@example.com", admin=False)


@pytest.fixture
def as_admin(client, admin_user):
    app.dependency_overrides[get_current_user] = lambda: admin_user
    return admin_user


@pytest.fixture
def as_user(client, regular_user):
    app.dependency_overrides[get_current_user] = lambda: regular_user
    return regular_user
