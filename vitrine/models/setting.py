"""
Modèle SQLAlchemy pour les paramètres du site (paires clé → valeur).
"""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from vitrine.database import Base


class Setting(Base):
    __tablename__ = "settings"

    setting_id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String, unique=True, nullable=False)
    value = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
