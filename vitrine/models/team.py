"""
Modèle SQLAlchemy pour les membres de l'équipe.
"""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from vitrine.database import Base


class TeamMember(Base):
    __tablename__ = "team"

    team_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    title = Column(String, nullable=False)
    bio = Column(Text, nullable=True)
    fr_title = Column(String, nullable=True)
    fr_bio = Column(Text, nullable=True)
    email = Column(String, nullable=True)  # lien avec le compte utilisateur pour l'édition de son propre profil
    image_url = Column(String, nullable=True)
    display_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
