"""
Configuration de la connexion à la base de données SQLite.
Utilise SQLAlchemy avec un moteur synchrone et une session par requête.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker

from vitrine.config import settings

Base = declarative_base()


def create_db_engine(url: str, **engine_kwargs) -> Engine:
    """
    Construit un moteur SQLAlchemy pour l'URL donnée.
    Pour SQLite : connexion partagée entre threads (FastAPI exécute les routes
    synchrones dans un pool) et clés étrangères activées sur chaque connexion.
    """
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    db_engine = create_engine(url, connect_args=connect_args, **engine_kwargs)

    if db_engine.dialect.name == "sqlite":
        @event.listens_for(db_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return db_engine


engine = create_db_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Dépendance FastAPI : fournit une session BDD et la ferme après usage."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
