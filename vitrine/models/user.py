"""
Modèle SQLAlchemy pour les utilisateurs (administration du site).
Un utilisateur se connecte via Google (google_id) ou via un mot de passe local (password_hash).
"""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, func

from vitrine.database import Base


class User(Base):
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False)
    admin = Column(Boolean, nullable=False, default=False)
    google_id = Column(String, unique=True, nullable=True)
    password_hash = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
