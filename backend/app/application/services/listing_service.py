"""List query orchestrator shared by every list endpoint."""

import logging
from collections.abc import Mapping

from pydantic import ValidationError as PydanticValidationError

from app.application.interfaces import ListingRepository
from app.application.schemas.common import format_validation_errors
from app.application.schemas.filters import ListFiltersSchema
from app.application.services.pagination import (
    get_pagination_meta,
    parse_list_query,
    resolve_pagination,
)
from app.domain.entities import EntityKind, ListFilters, Page
from app.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

# Query parameters each list accepts as cascading parent filters.
FILTER_PARAMS: dict[EntityKind, tuple[str, ...]] = {
    EntityKind.CLIENT: (),
    EntityKind.PROJECT: ("clientId",),
    EntityKind.CODEBASE: ("clientId", "projectId"),
    EntityKind.LINK: ("clientId", "projectId", "codebaseId"),
    EntityKind.FILE: ("clientId", "projectId", "codebaseId"),
}


def parse_list_filters(kind: EntityKind, params: Mapping[str, str]) -> ListFilters:
    """Validate the cascading filters ``kind`` accepts; other params are ignored.

    Raises ValidationError when any supplied id is malformed, so a bad
    filter fails the request instead of silently widening the result.
    """
    raw = {name: params.get(name) for name in FILTER_PARAMS[kind]}
    try:
        parsed = ListFiltersSchema.model_validate(raw)
    except PydanticValidationError as exc:
        raise ValidationError(
            "Invalid filters.", format_validation_errors(exc.errors())
        ) from exc
    return ListFilters(
        client_id=parsed.client_id,
        project_id=parsed.project_id,
        codebase_id=parsed.codebase_id,
    )


class ListingService:
    """Resolves a raw list request into ``{items, meta}`` for one entity kind.

    The count and the fetch run as two separate statements, so under
    concurrent writes ``meta.total`` may briefly disagree with the page.
    """

    def __init__(self, repository: ListingRepository):
        self._repository = repository

    async def list_entities(
        self, user_id: str, kind: EntityKind, params: Mapping[str, str]
    ) -> Page:
        query = parse_list_query(params)
        filters = parse_list_filters(kind, params)

        total = await self._repository.count(
            kind, user_id, filters=filters, search=query.search
        )
        bounds = resolve_pagination(total, query)
        items = await self._repository.fetch(
            kind,
            user_id,
            filters=filters,
            search=query.search,
            skip=bounds.skip,
            take=bounds.take,
            dropdown=query.dropdown,
        )

        logger.debug(
            "Listed %s: total=%d page=%d size=%d returned=%d",
            kind.value, total, bounds.page, bounds.page_size, len(items),
        )
        return Page(
            items=items,
            meta=get_pagination_meta(total, bounds.page, bounds.page_size),
        )
