"""Success envelopes and the per-entity user-facing messages."""

from dataclasses import dataclass
from typing import Any

from app.application.schemas.common import (
    ApiModel,
    ApiResponse,
    DropdownOptionSchema,
    PaginationMetaSchema,
)
from app.domain.entities import DropdownOption, Page


@dataclass(frozen=True)
class EntityMessages:
    list_error: str
    fetch_error: str
    create_error: str
    update_error: str
    delete_error: str
    created: str
    updated: str
    deleted: str


def entity_messages(entity: str, plural: str) -> EntityMessages:
    lower = entity.lower()
    return EntityMessages(
        list_error=f"Unable to fetch {plural} right now.",
        fetch_error=f"Unable to fetch {lower} right now.",
        create_error=f"Unable to create {lower} right now.",
        update_error=f"Unable to update {lower} right now.",
        delete_error=f"Unable to delete {lower} right now.",
        created=f"{entity} created successfully.",
        updated=f"{entity} updated successfully.",
        deleted=f"{entity} deleted successfully.",
    )


CLIENT_MESSAGES = entity_messages("Client", "clients")
PROJECT_MESSAGES = entity_messages("Project", "projects")
CODEBASE_MESSAGES = entity_messages("Codebase", "codebases")
LINK_MESSAGES = entity_messages("Link", "links")
FILE_MESSAGES = entity_messages("File", "files")


def page_response(page: Page, schema: type[ApiModel]) -> dict[str, Any]:
    """Envelope for a list result; dropdown rows keep their ``{id, name}`` shape."""
    items = [
        (DropdownOptionSchema if isinstance(item, DropdownOption) else schema)
        .model_validate(item)
        .model_dump(by_alias=True, mode="json")
        for item in page.items
    ]
    meta = PaginationMetaSchema.model_validate(page.meta).model_dump(by_alias=True)
    return {"success": True, "data": {"items": items, "meta": meta}}


def deleted_response(message: str) -> ApiResponse[None]:
    return ApiResponse[None](data=None, message=message)
