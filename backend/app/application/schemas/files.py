"""Pydantic DTOs for file attachments."""

from datetime import datetime

from app.application.schemas.common import ApiModel


class FileResponse(ApiModel):
    id: str
    client_id: str | None
    project_id: str | None
    codebase_id: str | None
    filename: str
    mime_type: str
    size_bytes: int
    created_at: datetime
    updated_at: datetime
