"""
Modèle SQLAlchemy pour les sections de la page « À propos ».
Contenu bilingue : les champs fr_* sont optionnels.
"""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from vitrine.database import Base


class AboutSection(Base):
    __tablename__ = "about"

    about_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    fr_title = Column(String, nullable=True)
    fr_description = Column(Text, nullable=True)
    image_url = Column(String, nullable=True)
    display_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
