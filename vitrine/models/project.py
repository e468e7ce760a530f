"""
Modèles SQLAlchemy pour les projets et leurs types.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from vitrine.database import Base

PROJECT_STATUSES = (
    "pending-approval",
    "planned",
    "in-progress",
    "under-review",
    "testing",
    "completed",
)


class ProjectType(Base):
    __tablename__ = "project_types"

    type_id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String, unique=True, nullable=False)
    fr_type = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())


class Project(Base):
    __tablename__ = "projects"

    project_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    fr_title = Column(String, nullable=True)
    fr_description = Column(Text, nullable=True)
    type_id = Column(Integer, ForeignKey("project_types.type_id"), nullable=False)
    git_url = Column(String, nullable=True)
    demo_url = Column(String, nullable=True)
    status = Column(String(20), nullable=False, default="pending-approval")
    image_url = Column(String, nullable=True)
    display_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
