"""Pydantic DTOs for the Project feature."""

from datetime import datetime

from app.application.schemas.common import ApiModel
from app.application.schemas.fields import IdStr, nullable_text, required_text
from app.domain.entities import ProjectStatus


class ProjectPayload(ApiModel):
    client_id: IdStr
    name: required_text(120, "Project name is required.", "Project name is too long.")
    description: nullable_text(1000, "Description is too long.") = None
    status: ProjectStatus = ProjectStatus.ACTIVE


class ProjectResponse(ApiModel):
    id: str
    client_id: str
    client_name: str | None
    name: str
    description: str | None
    status: ProjectStatus
    created_at: datetime
    updated_at: datetime
