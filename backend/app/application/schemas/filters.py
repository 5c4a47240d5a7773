"""Pydantic DTO for the cascading parent-id filters of list endpoints."""

from app.application.schemas.common import ApiModel
from app.application.schemas.fields import OptionalId


class ListFiltersSchema(ApiModel):
    """Raw ``clientId`` / ``projectId`` / ``codebaseId`` query values."""

    client_id: OptionalId = None
    project_id: OptionalId = None
    codebase_id: OptionalId = None
