"""Pydantic DTOs for the Link feature."""

from datetime import datetime

from app.application.schemas.common import ApiModel
from app.application.schemas.fields import (
    HttpUrlStr,
    IdStr,
    OptionalId,
    nullable_text,
    required_text,
)
from app.domain.entities import LinkCategory


class LinkPayload(ApiModel):
    """Body of POST and PUT.

    There is deliberately no ``user_id`` field: the owner always comes from
    the session.
    """

    project_id: IdStr
    codebase_id: OptionalId = None
    title: required_text(160, "Link title is required.", "Link title is too long.")
    url: HttpUrlStr
    category: LinkCategory = LinkCategory.OTHER
    notes: nullable_text(1000, "Notes are too long.") = None


class LinkResponse(ApiModel):
    id: str
    project_id: str
    project_name: str | None
    codebase_id: str | None
    codebase_name: str | None
    title: str
    url: str
    category: LinkCategory
    notes: str | None
    created_at: datetime
    updated_at: datetime
