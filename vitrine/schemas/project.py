"""
Schémas Pydantic pour les projets et les types de projets.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from vitrine.models.project import PROJECT_STATUSES
from vitrine.schemas.common import SuccessResponse, blank_to_none, required_text


def _check_status(v: Optional[str]) -> Optional[str]:
    if v is not None and v not in PROJECT_STATUSES:
        raise ValueError(f"Invalid status. Allowed values: {', '.join(PROJECT_STATUSES)}")
    return v


class ProjectCreate(BaseModel):
    title: str
    description: str
    fr_title: Optional[str] = None
    fr_description: Optional[str] = None
    type_id: int
    git_url: Optional[str] = None
    demo_url: Optional[str] = None
    status: str = "pending-approval"
    image_url: Optional[str] = None
    display_order: Optional[int] = None

    @field_validator("title", "description")
    @classmethod
    def not_empty(cls, v: str, info) -> str:
        return required_text(v, info.field_name)

    @field_validator("fr_title", "fr_description", "git_url", "demo_url", "image_url", mode="before")
    @classmethod
    def optional_blank(cls, v):
        return blank_to_none(v)

    @field_validator("status")
    @classmethod
    def valid_status(cls, v: str) -> str:
        return _check_status(v)


class ProjectUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    fr_title: Optional[str] = None
    fr_description: Optional[str] = None
    type_id: Optional[int] = None
    git_url: Optional[str] = None
    demo_url: Optional[str] = None
    status: Optional[str] = None
    image_url: Optional[str] = None
    display_order: Optional[int] = None

    @field_validator("title", "description")
    @classmethod
    def not_empty(cls, v: Optional[str], info) -> Optional[str]:
        return required_text(v, info.field_name)

    @field_validator("fr_title", "fr_description", "git_url", "demo_url", "image_url", mode="before")
    @classmethod
    def optional_blank(cls, v):
        return blank_to_none(v)

    @field_validator("status")
    @classmethod
    def valid_status(cls, v: Optional[str]) -> Optional[str]:
        return _check_status(v)


class ProjectResponse(BaseModel):
    project_id: int
    title: str
    description: str
    fr_title: Optional[str]
    fr_description: Optional[str]
    type_id: int
    type: Optional[str] = None
    fr_type: Optional[str] = None
    git_url: Optional[str]
    demo_url: Optional[str]
    status: str
    image_url: Optional[str]
    display_order: int
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    model_config = {"from_attributes": True}


class ProjectListResponse(SuccessResponse):
    projects: List[ProjectResponse]


class ProjectOrderItem(BaseModel):
    project_id: int
    display_order: Optional[int] = None


class ProjectReorder(BaseModel):
    projects: List[ProjectOrderItem] = Field(min_length=1)


class ProjectTypeCreate(BaseModel):
    type: str
    fr_type: Optional[str] = None

    @field_validator("type")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return required_text(v, "type")

    @field_validator("fr_type", mode="before")
    @classmethod
    def optional_blank(cls, v):
        return blank_to_none(v)


class ProjectTypeUpdate(BaseModel):
    type: Optional[str] = None
    fr_type: Optional[str] = None

    @field_validator("type")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> Optional[str]:
        return required_text(v, "type")

    @field_validator("fr_type", mode="before")
    @classmethod
    def optional_blank(cls, v):
        return blank_to_none(v)


class ProjectTypeResponse(BaseModel):
    type_id: int
    type: str
    fr_type: Optional[str]

    model_config = {"from_attributes": True}


class ProjectTypeListResponse(SuccessResponse):
    types: List[ProjectTypeResponse]
