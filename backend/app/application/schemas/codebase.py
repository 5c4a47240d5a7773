"""Pydantic DTOs for the Codebase feature."""

from datetime import datetime

from app.application.schemas.common import ApiModel
from app.application.schemas.fields import IdStr, nullable_text, required_text
from app.domain.entities import CodebaseType


class CodebasePayload(ApiModel):
    project_id: IdStr
    name: required_text(120, "Codebase name is required.", "Codebase name is too long.")
    type: CodebaseType = CodebaseType.OTHER
    description: nullable_text(1000, "Description is too long.") = None


class CodebaseResponse(ApiModel):
    id: str
    client_id: str | None
    client_name: str | None
    project_id: str
    project_name: str | None
    name: str
    type: CodebaseType
    description: str | None
    created_at: datetime
    updated_at: datetime
